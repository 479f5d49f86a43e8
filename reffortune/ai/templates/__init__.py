"""Prompt templates per divination type."""
