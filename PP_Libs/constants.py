"""
Constants and configuration values for Pixel Painter.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the engine.
"""

# Canvas defaults
DEFAULT_CANVAS_WIDTH = 32
DEFAULT_CANVAS_HEIGHT = 32
DEFAULT_FOREGROUND_COLOR = "#000000"
DEFAULT_BACKGROUND_COLOR = "#ffffff"

# History
DEFAULT_HISTORY_CAPACITY = 50

# Pencil/eraser strokes are captured this long after the last mutation
DEFAULT_DEBOUNCE_MS = 500

# View constants
DEFAULT_ZOOM = 8
MIN_ZOOM = 1
MAX_ZOOM = 16
DEFAULT_SHOW_GRID = True

# Default 16-color palette inspired by VGA
DEFAULT_PALETTE = (
    "#000000", "#800000", "#008000", "#808000",
    "#000080", "#800080", "#008080", "#c0c0c0",
    "#808080", "#ff0000", "#00ff00", "#ffff00",
    "#0000ff", "#ff00ff", "#00ffff", "#ffffff",
)

# Session file constants
SESSIONS_DIR_NAME = "Sessions"
SESSION_EXTENSION = ".ppaint"
SCHEMA_VERSION = 1
DEFAULT_SESSION_NAME = "untitled"
DATA_URL_PREFIX = "data:image/png;base64,"

# File naming
EXPORT_FILE_NAME = "pixel-art.png"
DEFAULT_EXPORT_FORMAT = "PNG"

# Safe filename characters
SAFE_FILENAME_CHARS = "-_"
FILENAME_REPLACEMENT_CHAR = "_"

# Session field names
FIELD_SCHEMA_VERSION = "schema_version"
FIELD_NAME = "name"
FIELD_CREATED_AT = "created_at"
FIELD_WIDTH = "width"
FIELD_HEIGHT = "height"
FIELD_FOREGROUND = "foreground"
FIELD_BACKGROUND = "background"
FIELD_PALETTE = "palette"
FIELD_CANVAS = "canvas"
