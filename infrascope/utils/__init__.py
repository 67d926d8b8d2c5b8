"""Utility functions and classes for Infrascope."""
