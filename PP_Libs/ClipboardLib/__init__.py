"""
ClipboardLib - Selection and clipboard

This module provides rectangular selections and region copy/paste.
"""

from PP_Libs.ClipboardLib.clipboard import Selection, ClipboardBlock, Clipboard

__all__ = [
    "Selection",
    "ClipboardBlock",
    "Clipboard",
]
