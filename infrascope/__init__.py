"""Infrascope - terminal dashboard for infrastructure usage and the user directory."""

__version__ = "0.1.0"
