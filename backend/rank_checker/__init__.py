"""Rank Checker: track where a domain ranks on Google for a keyword."""

__version__ = "0.1.0"
