"""Helpers backing the environment configuration loader."""

from .dotenv_loader import DotenvLoader

__all__ = ["DotenvLoader"]
