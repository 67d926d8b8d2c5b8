"""Data models for Infrascope."""
