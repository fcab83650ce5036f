"""Infrastructure adapters for the finance dashboard."""
