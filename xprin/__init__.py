"""Shell hook execution and input staging helpers for a test runner."""

__version__ = "0.1.0"
__all__ = ["hooks", "inputs"]