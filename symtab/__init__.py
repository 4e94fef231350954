"""A scoped symbol table for a small C-like compiler front end."""

__version__ = "0.1.0"
__all__ = ["table"]