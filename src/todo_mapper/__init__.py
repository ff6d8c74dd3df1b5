"""Locate TODO-style comments in source code and report their enclosing scopes."""

__version__ = "0.1.0"
