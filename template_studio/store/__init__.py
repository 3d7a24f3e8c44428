"""Editing session store - named actions with snapshot undo/redo."""

from .history import TemplateStore

__all__ = [
    "TemplateStore",
]
