"""goreplay — replay recorded Go games one move at a time."""

__version__ = "0.1.0"
