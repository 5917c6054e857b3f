"""Blood-pressure and pulse tracking from the command line."""

__version__ = "0.1.0"
