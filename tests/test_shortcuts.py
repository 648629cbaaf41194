"""
Tests for keyboard shortcut dispatch.
"""

import pytest

from PP_Libs.SessionLib.shortcuts import dispatch_key
from PP_Libs.ToolsLib.tools import Tool

from conftest import WHITE


class TestToolKeys:
    """Digit keys select tools in toolbar order."""

    @pytest.mark.parametrize("key,tool", [
        ("1", Tool.PENCIL),
        ("2", Tool.ERASER),
        ("3", Tool.FILL),
        ("4", Tool.LINE),
        ("5", Tool.RECTANGLE),
        ("6", Tool.CIRCLE),
        ("7", Tool.EYEDROPPER),
        ("8", Tool.SELECT),
    ])
    def test_digit_selects_tool(self, session, key, tool):
        """Should select tools in toolbar order."""
        action = dispatch_key(session, key)

        assert action == f"tool:{tool.value}"
        assert session.active_tool is tool

    def test_unbound_digit(self, session):
        """Should ignore digits past the last tool."""
        assert dispatch_key(session, "9") is None
        assert session.active_tool is Tool.PENCIL


class TestHistoryKeys:
    """Ctrl shortcuts for undo and redo."""

    def test_ctrl_z_undoes_and_ctrl_y_redoes(self, session):
        """Should undo with Ctrl+Z and redo with Ctrl+Y."""
        session.press(1, 1)
        session.release(1, 1)

        assert dispatch_key(session, "z", ctrl=True) == "undo"
        assert set(session.export_pixels()) == {WHITE}

        assert dispatch_key(session, "y", ctrl=True) == "redo"
        assert session.buffer.get(1, 1) != WHITE

    def test_ctrl_shift_z_redoes(self, session):
        """Should redo with Ctrl+Shift+Z."""
        session.press(1, 1)
        session.release(1, 1)
        session.undo()

        assert dispatch_key(session, "Z", ctrl=True, shift=True) == "redo"
        assert not session.can_redo()

    def test_undo_at_boundary_is_noop(self, session):
        """Should do nothing at the start of history."""
        assert dispatch_key(session, "z", ctrl=True) == "undo"
        assert len(session.history) == 1

    def test_plain_z_is_unbound(self, session):
        """Should ignore z without Ctrl."""
        assert dispatch_key(session, "z") is None


class TestViewKeys:
    """Zoom and grid keys."""

    def test_zoom_in_and_out(self, session):
        """Should step the zoom level."""
        assert dispatch_key(session, "+") == "zoom_in"
        assert dispatch_key(session, "=") == "zoom_in"
        assert session.view.zoom == 10

        assert dispatch_key(session, "-") == "zoom_out"
        assert session.view.zoom == 9

    def test_zoom_is_clamped(self, session):
        """Should keep zoom between 1 and 16."""
        for _ in range(30):
            dispatch_key(session, "+")
        assert session.view.zoom == 16

        for _ in range(30):
            dispatch_key(session, "-")
        assert session.view.zoom == 1

    def test_toggle_grid(self, session):
        """Should toggle the grid with g or G."""
        assert dispatch_key(session, "g") == "toggle_grid"
        assert session.view.show_grid is False
        dispatch_key(session, "G")
        assert session.view.show_grid is True
