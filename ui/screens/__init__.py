"""Screens for nyaa."""

from .main import MainScreen

__all__ = ["MainScreen"]
