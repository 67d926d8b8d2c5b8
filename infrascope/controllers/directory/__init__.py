"""Directory domain: users, search matching and statistics."""

from infrascope.controllers.directory.controller import DirectoryController

__all__ = ["DirectoryController"]
