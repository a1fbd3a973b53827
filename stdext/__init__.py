"""Short constructors for containers, cells and locks, plus console, call and path helpers."""

__version__ = "0.25.1"
__all__ = ["cells", "collections", "console", "execute", "paths", "sync"]