"""ask: terminal assistant that turns plain requests into shell commands."""

__version__ = "0.1.0"
