"""Query normalization, scoring and context formatting."""
