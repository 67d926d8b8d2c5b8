"""Selection models."""

from infrascope.models.selection.selection_scope import SelectionOption, SelectionScope

__all__ = ["SelectionOption", "SelectionScope"]
