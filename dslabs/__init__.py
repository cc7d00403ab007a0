"""Classic data structures and small algorithm exercises built on them."""

__version__ = "0.1.0"