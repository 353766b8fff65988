"""transcut: word-level transcript editing and export."""

__version__ = "0.1.0"
