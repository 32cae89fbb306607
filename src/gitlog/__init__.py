"""Changelog reports generated from Git commit history."""

__version__ = "0.1.0"
