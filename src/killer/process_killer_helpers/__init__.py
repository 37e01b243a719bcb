"""Helpers for resolving and terminating processes."""
