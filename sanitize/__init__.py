"""sanitize — enter a shell with a controlled, reproducible environment."""

__version__ = "0.1.0"
