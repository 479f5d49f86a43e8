"""Knowledge-base loading, chunking and metadata inference."""
