"""Describe an IPv4 address with its prefix length, with small text and buffer helpers."""

__version__ = "0.1.0"