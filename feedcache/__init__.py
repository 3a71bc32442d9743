"""Cache-aside loader for an image feed."""

__version__ = "0.1.0"
