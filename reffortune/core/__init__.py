"""Process-level infrastructure (logging)."""
