"""Strict IPv4/IPv6 address and subnet parsing with containment checks."""

__version__ = "0.1.0"
__all__ = ["raw", "parser4", "parser6", "subnet"]