"""In-memory library catalogue of books and users, with lending and console logging."""

__version__ = "0.1.0"
__all__ = ["book", "cli", "library", "log", "user"]