"""
Pixel Painter Drawing Examples

Drives a PaintSession headlessly the way a UI would: tool gestures,
undo/redo, copy/paste, then exports a PNG and a session file.
"""

import sys
import tempfile
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from PP_Libs.ClipboardLib.clipboard import Selection
from PP_Libs.constants import EXPORT_FILE_NAME
from PP_Libs.SessionLib import PaintSession, create_session_file, dispatch_key, load_session
from PP_Libs.ToolsLib.tools import Tool


def example_shapes(session: PaintSession):
    """Example: Draw a line, rectangle and circle."""
    print("=" * 60)
    print("Example 1: Shapes")
    print("=" * 60)

    session.set_foreground("#0000aa")
    session.select_tool(Tool.RECTANGLE)
    session.press(2, 2)
    session.move(10, 8)
    session.release(12, 10)

    session.set_foreground("#aa0000")
    session.select_tool(Tool.CIRCLE)
    session.press(20, 20)
    session.release(26, 20)

    session.set_foreground("#00aa00")
    session.select_tool("line")
    session.press(0, 31)
    session.release(31, 0)

    print(f"✓ History entries: {len(session.history)}")


def example_fill_and_undo(session: PaintSession):
    """Example: Flood fill, then undo and redo it."""
    print("\n" + "=" * 60)
    print("Example 2: Fill and Undo")
    print("=" * 60)

    session.set_foreground("#ffff55")
    session.select_tool(Tool.FILL)
    result = session.press(5, 5)
    print(f"✓ Fill changed {result.changed} pixels")

    dispatch_key(session, "z", ctrl=True)
    print(f"✓ After undo, pixel (5, 5) is {session.buffer.get(5, 5)}")
    dispatch_key(session, "y", ctrl=True)
    print(f"✓ After redo, pixel (5, 5) is {session.buffer.get(5, 5)}")


def example_copy_paste(session: PaintSession):
    """Example: Copy a block and paste it partly off the canvas."""
    print("\n" + "=" * 60)
    print("Example 3: Copy and Paste")
    print("=" * 60)

    session.set_selection(Selection(2, 2, 12, 10))
    block = session.copy_selection()
    written = session.paste(26, 26)
    print(f"✓ Copied {block.width}x{block.height}, pasted {written} pixels")


def example_save(session: PaintSession):
    """Example: Export a PNG and round-trip a session file."""
    print("\n" + "=" * 60)
    print("Example 4: Saving")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmpdir:
        png_path = session.save_png(Path(tmpdir) / EXPORT_FILE_NAME)
        print(f"✓ Exported {png_path.name}")

        session_path = create_session_file(Path(tmpdir), session, "Demo Drawing")
        restored = load_session(session_path)
        print(f"✓ Saved {session_path.name}, reload matches: {restored.buffer == session.buffer}")


if __name__ == "__main__":
    session = PaintSession.initialize(32, 32, "#ffffff")

    example_shapes(session)
    example_fill_and_undo(session)
    example_copy_paste(session)
    example_save(session)
