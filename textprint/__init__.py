"""Write text to standard output or to an open text stream."""

__version__ = "0.1.0"
__all__ = ["output", "demo", "examples"]