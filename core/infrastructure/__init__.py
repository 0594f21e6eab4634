"""Infrastructure layer - adapters, persistence and logging."""
