"""
Tool definitions for Pixel Painter.

Tools are listed in toolbar order; the digit keys 1-8 select them in that
same order.
"""

from enum import Enum
from typing import Dict, List, Optional


class Tool(Enum):
    PENCIL = "pencil"
    ERASER = "eraser"
    FILL = "fill"
    LINE = "line"
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    EYEDROPPER = "eyedropper"
    SELECT = "select"

    @property
    def is_freehand(self) -> bool:
        return self in (Tool.PENCIL, Tool.ERASER)

    @property
    def is_shape(self) -> bool:
        return self in (Tool.LINE, Tool.RECTANGLE, Tool.CIRCLE)

    @classmethod
    def from_value(cls, value: str) -> "Tool":
        """
        Look up a tool by its name, case-insensitive.

        Raises:
            ValueError: If no tool has that name
        """
        normalized = str(value).strip().lower()
        for tool in cls:
            if tool.value == normalized:
                return tool
        available = ", ".join(tool.value for tool in cls)
        raise ValueError(f"Unknown tool '{value}'. Available tools: {available}")


TOOLBAR_ORDER: List[Tool] = list(Tool)

TOOL_SHORTCUTS: Dict[str, Tool] = {
    str(position): tool for position, tool in enumerate(TOOLBAR_ORDER, start=1)
}


def tool_for_key(key: str) -> Optional[Tool]:
    return TOOL_SHORTCUTS.get(key)


def get_tool_labels() -> Dict[Tool, str]:
    """Toolbar tooltip text, e.g. 'Pencil (1)'."""
    return {
        tool: f"{tool.value.capitalize()} ({position})"
        for position, tool in enumerate(TOOLBAR_ORDER, start=1)
    }
