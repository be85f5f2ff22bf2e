"""Helpers for strings, bytes, UTF-8 slicing, padding, buffer pools, data logs, IP addresses and atomic floats."""

__version__ = "0.1.0"

__all__ = [
    "datalog",
    "exatomic",
    "exbytes",
    "exnet",
    "exstrings",
    "exutf8",
    "helper",
    "joinints",
    "pad",
    "pool",
]