"""Financial health dashboard engine."""

__version__ = "0.1.0"
