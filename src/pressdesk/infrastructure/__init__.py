"""Infrastructure adapters (metrics sources)."""
