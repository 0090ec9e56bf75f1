"""Voice skill that reads out Reddit posts."""

__version__ = "0.1.0"
