"""linecli - a line-oriented command dispatcher."""

__version__ = "0.1.0"
