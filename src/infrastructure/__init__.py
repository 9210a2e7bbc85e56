"""Infrastructure adapters for persistence, settings and logging."""
