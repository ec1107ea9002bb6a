"""Top Stories - news article reader backend."""

__version__ = "1.0"
