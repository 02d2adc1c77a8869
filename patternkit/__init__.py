"""Runnable demonstrations of classic object-oriented design patterns."""

__version__ = "0.1.0"

__all__ = ["adapter", "furniture", "transport", "iteration", "observer", "proxy", "mario"]