"""Split markdown documents into topic-addressed records and rebuild them."""

__version__ = "0.1.0"
