"""
Pointer gesture state machine for Pixel Painter.

The controller turns press/move/release events into rasterizer calls on a
PixelBuffer and decides when the history captures a snapshot.

States:
    Idle: no gesture in progress
    Dragging(tool, start): a pencil/eraser stroke, a shape or a selection
        is being dragged

Commit rules:
    - Pencil/Eraser mutate on press and on every move, and capture on release
      unless poll() has already captured every edit
    - Fill mutates and captures on press
    - Eyedropper only changes the foreground color
    - Line/Rectangle/Circle only preview while dragging and draw on release
    - Select only tracks a rectangle and never mutates the buffer

Pencil/eraser strokes also capture on a debounced cadence while dragging.
The controller never schedules anything itself: the caller invokes
``poll()`` from its own timer and the capture happens once the last
mutation is older than the debounce window.

Classes:
    ColorState: Foreground/background colors shared with the session
    ToolPreview: Transient shape or selection to draw over the canvas
    GestureResult: Outcome of a press or release
    ToolController: The state machine
"""

import logging
import math
import time
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from PP_Libs.constants import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_DEBOUNCE_MS,
    DEFAULT_FOREGROUND_COLOR,
)
from PP_Libs.ClipboardLib.clipboard import Selection
from PP_Libs.HistoryLib.history_stack import HistoryStack
from PP_Libs.RasterLib.color import RgbColor, hex_to_rgb
from PP_Libs.RasterLib.pixel_buffer import PixelBuffer, Point
from PP_Libs.RasterLib import rasterizer
from PP_Libs.ToolsLib.tools import Tool

logger = logging.getLogger(__name__)


@dataclass
class ColorState:
    foreground: RgbColor = field(default_factory=lambda: hex_to_rgb(DEFAULT_FOREGROUND_COLOR))
    background: RgbColor = field(default_factory=lambda: hex_to_rgb(DEFAULT_BACKGROUND_COLOR))

    def swap(self) -> None:
        self.foreground, self.background = self.background, self.foreground


@dataclass(frozen=True)
class ToolPreview:
    """Transient overlay for an in-progress drag. Never part of the buffer.

    Attributes:
        tool: Tool being dragged
        start: Press point
        end: Current pointer point
        points: In-canvas pixels the shape would cover if released now
        selection: Normalized rectangle for the Select tool
    """
    tool: Tool
    start: Point
    end: Point
    points: List[Point] = field(default_factory=list)
    selection: Optional[Selection] = None


@dataclass(frozen=True)
class GestureResult:
    """What a press or release did.

    Attributes:
        tool: Tool that handled the event
        changed: Number of pixels written to the buffer
        captured: Whether a history entry was recorded
        picked_color: Color read by the eyedropper, if any
        selection: Finalized selection for the Select tool, if any
    """
    tool: Tool
    changed: int = 0
    captured: bool = False
    picked_color: Optional[RgbColor] = None
    selection: Optional[Selection] = None


@dataclass
class _DragState:
    tool: Tool
    start: Point
    current: Point


class ToolController:
    """
    Maps the active tool and pointer gestures onto buffer mutations.

    Example:
        >>> controller = ToolController(buffer, history, ColorState())
        >>> controller.active_tool = Tool.LINE
        >>> controller.press(0, 0)
        >>> preview = controller.move(5, 3)
        >>> controller.release(5, 3).captured
        True
    """

    def __init__(
        self,
        buffer: PixelBuffer,
        history: HistoryStack,
        colors: ColorState,
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            buffer: Canvas the tools draw into
            history: History that receives snapshots after each edit
            colors: Shared color state; the eyedropper writes the foreground
            debounce_ms: Quiet period before a stroke in progress is captured
            clock: Monotonic time source in seconds, injectable for tests
        """
        if debounce_ms < 0:
            raise ValueError(f"debounce_ms must be >= 0, got {debounce_ms}")

        self.buffer = buffer
        self.history = history
        self.colors = colors
        self.debounce_seconds = debounce_ms / 1000.0
        self._clock = clock

        self._active_tool = Tool.PENCIL
        self._drag: Optional[_DragState] = None
        self._pending_since: Optional[float] = None

        self.preview: Optional[ToolPreview] = None
        self.selection: Optional[Selection] = None
        self.hover: Optional[Point] = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def active_tool(self) -> Tool:
        return self._active_tool

    @active_tool.setter
    def active_tool(self, tool: Tool) -> None:
        if not isinstance(tool, Tool):
            tool = Tool.from_value(tool)
        if self._drag is not None:
            # Switching tools mid-drag finishes the current gesture first
            self.leave()
        self._active_tool = tool
        logger.debug(f"Active tool: {tool.value}")

    @property
    def is_dragging(self) -> bool:
        return self._drag is not None

    @property
    def drag_start(self) -> Optional[Point]:
        return self._drag.start if self._drag else None

    @property
    def has_pending_capture(self) -> bool:
        return self._pending_since is not None

    # ------------------------------------------------------------------
    # Gesture events
    # ------------------------------------------------------------------

    def press(self, x: int, y: int) -> GestureResult:
        """
        Start a gesture at (x, y). Off-canvas points are clamped.

        Returns:
            GestureResult describing any immediate mutation or color pick
        """
        if self._drag is not None:
            self.leave()

        point = self.buffer.clamp(x, y)
        self.hover = point
        tool = self._active_tool

        if tool is Tool.EYEDROPPER:
            picked = self.buffer.get(point.x, point.y)
            self.colors.foreground = picked
            logger.debug(f"Eyedropper picked {picked} at {tuple(point)}")
            return GestureResult(tool=tool, picked_color=picked)

        if tool is Tool.FILL:
            changed = rasterizer.flood_fill(
                self.buffer, point.x, point.y, self.colors.foreground
            )
            self._capture()
            return GestureResult(tool=tool, changed=changed, captured=True)

        self._drag = _DragState(tool=tool, start=point, current=point)

        if tool.is_freehand:
            changed = self._plot_freehand(point)
            return GestureResult(tool=tool, changed=changed)

        if tool is Tool.SELECT:
            self.selection = None

        self.preview = self._build_preview(self._drag)
        return GestureResult(tool=tool)

    def move(self, x: int, y: int) -> Optional[ToolPreview]:
        """
        Track the pointer. Off-canvas points are clamped.

        Returns:
            The live preview for shape and select drags, otherwise None
        """
        point = self.buffer.clamp(x, y)
        self.hover = point

        if self._drag is None:
            return None

        self._drag.current = point
        if self._drag.tool.is_freehand:
            self._plot_freehand(point)
            return None

        self.preview = self._build_preview(self._drag)
        return self.preview

    def release(self, x: int, y: int) -> GestureResult:
        """
        Finish the gesture at (x, y), drawing shapes and capturing history.

        A release while Idle is a no-op.
        """
        point = self.buffer.clamp(x, y)
        self.hover = point

        drag = self._drag
        if drag is None:
            return GestureResult(tool=self._active_tool)

        self._drag = None
        self.preview = None
        tool = drag.tool
        start = drag.start

        if tool is Tool.SELECT:
            self.selection = Selection.from_points(start, point)
            logger.debug(f"Selection finalized: {self.selection}")
            return GestureResult(tool=tool, selection=self.selection)

        color = self.colors.foreground
        changed = 0
        if tool is Tool.LINE:
            changed = rasterizer.draw_line(self.buffer, start.x, start.y, point.x, point.y, color)
        elif tool is Tool.RECTANGLE:
            changed = rasterizer.draw_rectangle(self.buffer, start.x, start.y, point.x, point.y, color)
        elif tool is Tool.CIRCLE:
            radius = circle_radius(start, point)
            changed = rasterizer.draw_circle(self.buffer, start.x, start.y, radius, color)

        # Nothing new since the last poll() capture
        if tool.is_freehand and self._pending_since is None:
            return GestureResult(tool=tool)

        self._pending_since = None
        self._capture()
        return GestureResult(tool=tool, changed=changed, captured=True)

    def leave(self) -> Optional[GestureResult]:
        """
        Pointer left the canvas. A drag in progress is released at the last
        in-canvas point.

        Returns:
            The release result, or None when no drag was in progress
        """
        self.hover = None
        if self._drag is None:
            return None
        last = self._drag.current
        return self.release(last.x, last.y)

    def poll(self, now: Optional[float] = None) -> bool:
        """
        Capture a pending stroke once the debounce window has elapsed.

        Args:
            now: Current clock reading (default: the controller's clock)

        Returns:
            True if a history entry was captured
        """
        if self._pending_since is None:
            return False

        now = self._clock() if now is None else now
        if now - self._pending_since < self.debounce_seconds:
            return False

        self._pending_since = None
        self._capture()
        logger.debug("Debounced stroke capture")
        return True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _plot_freehand(self, point: Point) -> int:
        if self._drag.tool is Tool.ERASER:
            color = self.colors.background
        else:
            color = self.colors.foreground
        self.buffer.set(point.x, point.y, color)
        self._pending_since = self._clock()
        return 1

    def _build_preview(self, drag: _DragState) -> ToolPreview:
        start, end = drag.start, drag.current
        if drag.tool is Tool.SELECT:
            return ToolPreview(
                tool=drag.tool, start=start, end=end,
                selection=Selection.from_points(start, end),
            )

        if drag.tool is Tool.LINE:
            points = rasterizer.line_points(start.x, start.y, end.x, end.y)
        elif drag.tool is Tool.RECTANGLE:
            points = rasterizer.rectangle_points(start.x, start.y, end.x, end.y)
        else:
            points = rasterizer.circle_points(start.x, start.y, circle_radius(start, end))

        visible = [p for p in points if self.buffer.in_bounds(p.x, p.y)]
        return ToolPreview(tool=drag.tool, start=start, end=end, points=visible)

    def _capture(self) -> None:
        self.history.capture(self.buffer.snapshot())


def circle_radius(center: Any, edge: Any) -> int:
    """Euclidean distance between two points, floored to an integer."""
    return int(math.floor(math.hypot(edge[0] - center[0], edge[1] - center[1])))
