"""
Tests for the Tool Controller gesture state machine.

Tests cover:
- Pencil/eraser strokes and clamping
- Fill and eyedropper single-step tools
- Shape previews and commit on release
- Selection tracking
- History capture rules and debounced stroke capture
- Leaving the canvas mid-drag
"""

import pytest

from PP_Libs.ClipboardLib.clipboard import Selection
from PP_Libs.RasterLib.rasterizer import circle_points, line_points
from PP_Libs.ToolsLib.tool_controller import circle_radius
from PP_Libs.ToolsLib.tools import Tool

from conftest import BLUE, RED, WHITE


def painted(buffer, color):
    return {
        (x, y)
        for y in range(buffer.height)
        for x in range(buffer.width)
        if buffer.get(x, y) == color
    }


class TestFreehand:
    """Tests for pencil and eraser."""

    def test_pencil_draws_on_press_and_move(self, controller):
        """Should paint each sampled point."""
        controller.press(1, 1)
        controller.move(2, 1)
        controller.move(6, 5)

        assert painted(controller.buffer, RED) == {(1, 1), (2, 1), (6, 5)}
        assert controller.is_dragging

    def test_pencil_moves_are_point_by_point(self, controller):
        """Should not interpolate between samples."""
        controller.press(0, 0)
        controller.move(5, 0)

        # Gaps between samples are not filled in
        assert painted(controller.buffer, RED) == {(0, 0), (5, 0)}

    def test_eraser_writes_background(self, controller):
        """Should paint with the background color."""
        controller.buffer.fill_all(BLUE)
        controller.active_tool = Tool.ERASER

        controller.press(3, 3)
        controller.move(4, 3)

        assert painted(controller.buffer, WHITE) == {(3, 3), (4, 3)}

    def test_press_outside_canvas_is_clamped(self, controller):
        """Should clamp an off-canvas press."""
        controller.press(-10, 50)

        assert controller.buffer.get(0, 7) == RED

    def test_stroke_captures_once_on_release(self, controller):
        """Should capture a stroke once, on release."""
        controller.press(1, 1)
        for x in range(2, 7):
            controller.move(x, 1)

        assert len(controller.history) == 1
        result = controller.release(6, 1)

        assert result.captured
        assert len(controller.history) == 2
        assert not controller.is_dragging
        assert not controller.has_pending_capture

    def test_release_while_idle_is_noop(self, controller):
        """Should ignore a release with no gesture."""
        result = controller.release(3, 3)

        assert not result.captured
        assert len(controller.history) == 1


class TestDebouncedCapture:
    """Tests for debounced pencil/eraser capture."""

    def test_poll_before_window_does_nothing(self, controller, clock):
        """Should not capture inside the debounce window."""
        controller.press(1, 1)
        clock.advance(0.2)

        assert controller.poll() is False
        assert len(controller.history) == 1

    def test_poll_after_window_captures_once(self, controller, clock):
        """Should capture once after the window elapses."""
        controller.press(1, 1)
        controller.move(2, 1)
        clock.advance(0.5)

        assert controller.poll() is True
        assert controller.poll() is False
        assert len(controller.history) == 2
        assert controller.is_dragging

    def test_moves_restart_the_window(self, controller, clock):
        """Should restart the window on every move."""
        controller.press(1, 1)
        for x in range(2, 6):
            clock.advance(0.3)
            controller.move(x, 1)
            assert controller.poll() is False

        clock.advance(0.6)
        assert controller.poll() is True
        assert len(controller.history) == 2

    def test_release_clears_pending_capture(self, controller, clock):
        """Should leave nothing pending after release."""
        controller.press(1, 1)
        controller.release(1, 1)
        clock.advance(1.0)

        assert controller.poll() is False
        assert len(controller.history) == 2

    def test_release_after_poll_adds_no_duplicate_entry(self, controller, clock):
        """Should skip the release capture when poll() already captured the stroke."""
        controller.press(1, 1)
        controller.move(2, 1)
        clock.advance(0.5)
        controller.poll()

        result = controller.release(2, 1)

        assert not result.captured
        assert len(controller.history) == 2
        assert not controller.is_dragging

    def test_release_captures_edits_made_after_poll(self, controller, clock):
        """Should still capture pixels drawn after the last poll() capture."""
        controller.press(1, 1)
        clock.advance(0.5)
        controller.poll()
        controller.move(3, 1)

        result = controller.release(3, 1)

        assert result.captured
        assert len(controller.history) == 3
        assert controller.history.current().snapshot == controller.buffer.snapshot()

    def test_shape_drags_never_pend(self, controller, clock):
        """Should never schedule captures for shape drags."""
        controller.active_tool = Tool.LINE
        controller.press(0, 0)
        controller.move(4, 4)
        clock.advance(1.0)

        assert controller.poll() is False


class TestFillAndEyedropper:
    """Tests for single-step tools."""

    def test_fill_on_press_and_capture(self, controller):
        """Should fill and capture on press."""
        controller.active_tool = Tool.FILL

        result = controller.press(4, 4)

        assert result.changed == 64
        assert result.captured
        assert set(controller.buffer.export_pixels()) == {RED}
        assert len(controller.history) == 2
        assert not controller.is_dragging

    def test_fill_same_color_still_captures(self, controller):
        """Should capture even when the fill changes nothing."""
        controller.colors.foreground = WHITE
        controller.active_tool = Tool.FILL

        result = controller.press(0, 0)

        assert result.changed == 0
        assert len(controller.history) == 2

    def test_eyedropper_sets_foreground_without_capture(self, controller):
        """Should pick the foreground without touching history."""
        controller.buffer.set(2, 3, BLUE)
        controller.active_tool = Tool.EYEDROPPER
        before = controller.buffer.snapshot()

        result = controller.press(2, 3)
        controller.release(2, 3)

        assert result.picked_color == BLUE
        assert controller.colors.foreground == BLUE
        assert controller.buffer.snapshot() == before
        assert len(controller.history) == 1


class TestShapes:
    """Tests for line, rectangle and circle tools."""

    def test_line_previews_without_mutation(self, controller):
        """Should preview the line without drawing it."""
        controller.active_tool = Tool.LINE
        before = controller.buffer.snapshot()

        controller.press(0, 0)
        preview = controller.move(5, 2)

        assert controller.buffer.snapshot() == before
        assert preview.tool is Tool.LINE
        assert preview.points == line_points(0, 0, 5, 2)
        assert controller.preview is preview

    def test_line_commits_on_release(self, controller):
        """Should draw the line on release."""
        controller.active_tool = Tool.LINE
        controller.press(0, 0)
        controller.move(3, 3)

        result = controller.release(5, 0)

        assert painted(controller.buffer, RED) == {(x, 0) for x in range(6)}
        assert result.captured
        assert len(controller.history) == 2
        assert controller.preview is None

    def test_rectangle_draws_outline(self, controller):
        """Should draw a rectangle outline between the corners."""
        controller.active_tool = Tool.RECTANGLE
        controller.press(5, 5)
        controller.release(1, 2)

        red = painted(controller.buffer, RED)
        assert (1, 2) in red and (5, 5) in red
        assert (3, 3) not in red
        assert len(red) == 14

    def test_circle_radius_is_floored_distance(self, controller):
        """Should use the floored distance as the radius."""
        controller.active_tool = Tool.CIRCLE
        controller.press(3, 3)

        controller.release(5, 4)

        assert circle_radius((3, 3), (5, 4)) == 2
        expected = {p for p in circle_points(3, 3, 2) if controller.buffer.in_bounds(*p)}
        assert painted(controller.buffer, RED) == expected

    def test_circle_preview_drops_off_canvas_points(self, controller):
        """Should leave off-canvas points out of the preview."""
        controller.active_tool = Tool.CIRCLE
        controller.press(0, 0)

        preview = controller.move(3, 0)

        assert preview.points
        assert all(controller.buffer.in_bounds(p.x, p.y) for p in preview.points)

    def test_moves_are_clamped(self, controller):
        """Should clamp drag points to the canvas."""
        controller.active_tool = Tool.LINE
        controller.press(0, 0)

        preview = controller.move(100, 0)

        assert preview.end == (7, 0)


class TestSelect:
    """Tests for the select tool."""

    def test_select_tracks_and_finalizes(self, controller):
        """Should track the selection and finalize it on release."""
        controller.active_tool = Tool.SELECT
        before = controller.buffer.snapshot()

        controller.press(5, 6)
        preview = controller.move(2, 1)
        result = controller.release(1, 1)

        assert preview.selection == Selection(2, 1, 5, 6)
        assert result.selection == Selection(1, 1, 5, 6)
        assert controller.selection == Selection(1, 1, 5, 6)
        assert controller.buffer.snapshot() == before
        assert len(controller.history) == 1

    def test_new_select_press_clears_selection(self, controller):
        """Should clear the old selection on a new press."""
        controller.active_tool = Tool.SELECT
        controller.press(0, 0)
        controller.release(2, 2)

        controller.press(4, 4)

        assert controller.selection is None


class TestLeave:
    """Tests for leaving the canvas mid-drag."""

    def test_leave_releases_at_last_point(self, controller):
        """Should release at the last drag point."""
        controller.active_tool = Tool.LINE
        controller.press(0, 0)
        controller.move(4, 0)

        result = controller.leave()

        assert result.captured
        assert painted(controller.buffer, RED) == {(x, 0) for x in range(5)}
        assert not controller.is_dragging

    def test_leave_while_idle(self, controller):
        """Should do nothing with no gesture in progress."""
        assert controller.leave() is None
        assert controller.hover is None

    def test_switching_tool_mid_drag_finishes_gesture(self, controller):
        """Should commit the drag before switching tools."""
        controller.active_tool = Tool.RECTANGLE
        controller.press(0, 0)
        controller.move(2, 2)

        controller.active_tool = Tool.PENCIL

        assert not controller.is_dragging
        assert len(controller.history) == 2
        assert controller.active_tool is Tool.PENCIL

    def test_tool_from_string(self, controller):
        """Should accept a tool name."""
        controller.active_tool = "Circle"

        assert controller.active_tool is Tool.CIRCLE

    def test_unknown_tool_raises(self, controller):
        """Should raise ValueError for an unknown tool name."""
        with pytest.raises(ValueError):
            controller.active_tool = "spray"
