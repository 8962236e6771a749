"""Lazy iterator adaptors and sources, one module per adaptor family."""

__version__ = "0.1.0"