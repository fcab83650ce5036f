"""Entry-point adapters."""

__all__ = []
