"""Terminate running processes by pid or (partial) process name."""

__version__ = "0.1.0"
