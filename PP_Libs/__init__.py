"""
PP_Libs - Pixel Painter Library Modules

This package contains the raster editing engine for Pixel Painter,
organized into specialized sub-packages:

- RasterLib: Pixel buffer, color model and shape rasterization
- ToolsLib: Tool definitions and the pointer gesture state machine
- HistoryLib: Bounded undo/redo snapshot history
- ClipboardLib: Rectangular selection copy and paste
- SessionLib: Editing session, image I/O and session file persistence
"""

__version__ = "0.1.0"
