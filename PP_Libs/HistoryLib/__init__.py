"""
HistoryLib - Undo/redo history

This module provides the bounded snapshot history used for undo and redo.
"""

from PP_Libs.HistoryLib.history_stack import HistoryEntry, HistoryStack

__all__ = [
    "HistoryEntry",
    "HistoryStack",
]
