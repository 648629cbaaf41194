"""
Exception types raised by the Pixel Painter engine.

Each error also derives from the closest builtin exception so callers that
only catch ``IndexError`` or ``ValueError`` keep working.

Classes:
    PaintEngineError: Base class for all engine errors
    OutOfBoundsError: Pixel coordinate outside the buffer
    DimensionMismatchError: Restore/import data of the wrong size
    NoHistoryError: Undo/redo requested at a history boundary
    EmptySelectionError: Copy requested with no active selection
    EmptyClipboardError: Paste requested before anything was copied
"""


class PaintEngineError(Exception):
    """Base class for recoverable engine errors."""


class OutOfBoundsError(PaintEngineError, IndexError):
    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(
            f"Pixel ({x}, {y}) is outside the {width}x{height} canvas"
        )
        self.x = x
        self.y = y


class DimensionMismatchError(PaintEngineError, ValueError):
    def __init__(self, expected, actual):
        super().__init__(
            f"Expected {expected[0]}x{expected[1]} pixel data, got {actual[0]}x{actual[1]}"
        )
        self.expected = tuple(expected)
        self.actual = tuple(actual)


class NoHistoryError(PaintEngineError, LookupError):
    pass


class EmptySelectionError(PaintEngineError, ValueError):
    pass


class EmptyClipboardError(PaintEngineError, ValueError):
    pass
