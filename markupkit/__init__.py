"""Build HTML from Python functions for elements, attributes and documents."""

__version__ = "0.1.0"