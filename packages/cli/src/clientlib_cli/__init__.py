"""Clientlib CLI - command-line interface for the clientlib generator."""

__version__ = "1.0.0"
