"""
Keyboard shortcut dispatch for Pixel Painter.

Maps key presses onto session operations:

- 1-8: select tools in toolbar order
- Ctrl+Z: undo, Ctrl+Shift+Z or Ctrl+Y: redo (no-ops at history boundaries)
- + or =: zoom in, -: zoom out (clamped to 1-16)
- g: toggle the pixel grid

``Cmd`` on macOS is passed as ``ctrl=True`` by the caller.
"""

import logging
from typing import Optional

from PP_Libs.SessionLib.paint_session import PaintSession
from PP_Libs.ToolsLib.tools import tool_for_key

logger = logging.getLogger(__name__)


def dispatch_key(session: PaintSession, key: str, ctrl: bool = False, shift: bool = False) -> Optional[str]:
    """
    Apply a key press to the session.

    Args:
        session: Target session
        key: Key as reported by the UI ('1', 'z', '+', ...)
        ctrl: Control (or Cmd) modifier held
        shift: Shift modifier held

    Returns:
        Name of the action performed ('tool:line', 'undo', 'zoom_in', ...),
        or None if the key is not bound. Undo/redo at a history boundary
        still return their action name.
    """
    key = key.lower() if len(key) == 1 else key

    if ctrl:
        if key == "z" and shift:
            session.try_redo()
            return "redo"
        if key == "z":
            session.try_undo()
            return "undo"
        if key == "y":
            session.try_redo()
            return "redo"
        return None

    tool = tool_for_key(key)
    if tool is not None:
        session.select_tool(tool)
        return f"tool:{tool.value}"

    if key in ("+", "="):
        session.view.zoom_in()
        return "zoom_in"
    if key == "-":
        session.view.zoom_out()
        return "zoom_out"
    if key == "g":
        session.view.toggle_grid()
        return "toggle_grid"

    logger.debug(f"Unbound key: {key!r}")
    return None
