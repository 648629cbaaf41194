"""
ToolsLib - Drawing tools and gesture handling

This module provides the tool definitions and the press/drag/release
state machine that applies tools to the pixel buffer.
"""

from PP_Libs.ToolsLib.tools import (
    Tool,
    TOOLBAR_ORDER,
    TOOL_SHORTCUTS,
    tool_for_key,
    get_tool_labels,
)
from PP_Libs.ToolsLib.tool_controller import (
    ColorState,
    ToolPreview,
    GestureResult,
    ToolController,
    circle_radius,
)

__all__ = [
    "Tool",
    "TOOLBAR_ORDER",
    "TOOL_SHORTCUTS",
    "tool_for_key",
    "get_tool_labels",
    "ColorState",
    "ToolPreview",
    "GestureResult",
    "ToolController",
    "circle_radius",
]
