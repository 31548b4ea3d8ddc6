"""Sellin TN: instant store pages on subdomains of the apex domain."""

__version__ = "0.1.0"
