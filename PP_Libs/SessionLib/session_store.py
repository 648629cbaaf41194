"""
Session file storage for Pixel Painter.

Sessions are saved as JSON files in the .ppaint format so a drawing can be
resumed later with its colors and palette.

The session file schema includes:
- Session metadata (name, creation date, schema version)
- Canvas dimensions
- Foreground/background colors and the palette as hex strings
- Canvas pixels as a PNG data URL

Functions:
    get_sessions_dir: Return (and create) the Sessions directory
    list_session_files: List all session files in the Sessions directory
    session_to_payload: Build the JSON payload for a session
    save_session: Write a session to a file
    create_session_file: Save a session under a sanitized, unique name
    load_session_data: Load and normalize a session payload
    load_session_name: Load just the session name from a file
    load_session: Rebuild a PaintSession from a file
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

from PP_Libs.constants import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_FOREGROUND_COLOR,
    DEFAULT_PALETTE,
    DEFAULT_SESSION_NAME,
    FIELD_BACKGROUND,
    FIELD_CANVAS,
    FIELD_CREATED_AT,
    FIELD_FOREGROUND,
    FIELD_HEIGHT,
    FIELD_NAME,
    FIELD_PALETTE,
    FIELD_SCHEMA_VERSION,
    FIELD_WIDTH,
    FILENAME_REPLACEMENT_CHAR,
    SAFE_FILENAME_CHARS,
    SCHEMA_VERSION,
    SESSION_EXTENSION,
    SESSIONS_DIR_NAME,
)
from PP_Libs.RasterLib.color import normalize_color, rgb_to_hex
from PP_Libs.SessionLib.engine_config import EngineConfig
from PP_Libs.SessionLib.paint_session import PaintSession

logger = logging.getLogger(__name__)


def _normalize_hex(value: Any, default: str) -> str:
    """Return value as a '#rrggbb' string, or default if it is not a color."""
    try:
        return rgb_to_hex(normalize_color(value))
    except (TypeError, ValueError):
        return default


def _normalize_dimension(value: Any, default: int) -> int:
    try:
        return max(1, int(value))
    except (TypeError, ValueError):
        return default


def _normalize_palette(value: Any) -> List[str]:
    if not isinstance(value, list):
        return list(DEFAULT_PALETTE)

    palette = []
    for color in value:
        try:
            palette.append(rgb_to_hex(normalize_color(color)))
        except (TypeError, ValueError):
            continue
    return palette or list(DEFAULT_PALETTE)


def get_sessions_dir(base_dir: Path) -> Path:
    sessions_dir = base_dir / SESSIONS_DIR_NAME
    sessions_dir.mkdir(parents=True, exist_ok=True)
    return sessions_dir


def list_session_files(base_dir: Path) -> List[Path]:
    sessions_dir = get_sessions_dir(base_dir)
    return sorted(sessions_dir.glob(f"*{SESSION_EXTENSION}"))


def session_to_payload(session: PaintSession, name: str = DEFAULT_SESSION_NAME) -> Dict[str, Any]:
    return {
        FIELD_SCHEMA_VERSION: SCHEMA_VERSION,
        FIELD_NAME: name,
        FIELD_CREATED_AT: datetime.now().isoformat(timespec="seconds"),
        FIELD_WIDTH: session.buffer.width,
        FIELD_HEIGHT: session.buffer.height,
        FIELD_FOREGROUND: rgb_to_hex(session.foreground),
        FIELD_BACKGROUND: rgb_to_hex(session.background),
        FIELD_PALETTE: [rgb_to_hex(color) for color in session.palette],
        FIELD_CANVAS: session.serialize_snapshot(),
    }


def save_session(session_path: Path, session: PaintSession, name: str = DEFAULT_SESSION_NAME) -> Path:
    payload = session_to_payload(session, name)
    session_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    logger.info(f"Saved session '{name}' to {session_path}")
    return session_path


def create_session_file(base_dir: Path, session: PaintSession, session_name: str) -> Path:
    """
    Save a session into the Sessions folder under a new file.

    Args:
        base_dir: Base directory containing the Sessions folder
        session: Session to save
        session_name: Human-readable name for the session

    Returns:
        Path to the created session file
    """
    sessions_dir = get_sessions_dir(base_dir)

    # Sanitize filename - keep only alphanumeric and safe characters
    safe_name = "".join(
        c if c.isalnum() or c in SAFE_FILENAME_CHARS else FILENAME_REPLACEMENT_CHAR
        for c in session_name
    ).strip(FILENAME_REPLACEMENT_CHAR)

    if not safe_name:
        safe_name = DEFAULT_SESSION_NAME

    session_path = sessions_dir / f"{safe_name}{SESSION_EXTENSION}"
    counter = 1
    while session_path.exists():
        session_path = sessions_dir / f"{safe_name}_{counter}{SESSION_EXTENSION}"
        counter += 1

    return save_session(session_path, session, session_name)


def load_session_name(session_path: Path) -> str:
    """
    Load the session name from a session file.

    Returns:
        The session name, or the filename stem if loading fails
    """
    try:
        payload = json.loads(session_path.read_text(encoding="utf-8"))
    except (FileNotFoundError, json.JSONDecodeError, OSError):
        return session_path.stem

    if not isinstance(payload, dict):
        return session_path.stem
    return str(payload.get(FIELD_NAME) or session_path.stem)


def load_session_data(session_path: Path) -> Dict[str, Any]:
    """
    Load a session payload and fill in defaults for missing or bad fields.

    The canvas field is passed through untouched; it is validated when the
    session is rebuilt.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a JSON object
    """
    try:
        payload = json.loads(session_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Session file is not valid JSON: {session_path}") from e

    if not isinstance(payload, dict):
        raise ValueError(f"Session file does not contain an object: {session_path}")

    payload[FIELD_SCHEMA_VERSION] = SCHEMA_VERSION
    payload[FIELD_NAME] = str(payload.get(FIELD_NAME) or session_path.stem)
    payload.setdefault(FIELD_CREATED_AT, datetime.now().isoformat(timespec="seconds"))
    payload[FIELD_WIDTH] = _normalize_dimension(payload.get(FIELD_WIDTH), DEFAULT_CANVAS_WIDTH)
    payload[FIELD_HEIGHT] = _normalize_dimension(payload.get(FIELD_HEIGHT), DEFAULT_CANVAS_HEIGHT)
    payload[FIELD_FOREGROUND] = _normalize_hex(payload.get(FIELD_FOREGROUND), DEFAULT_FOREGROUND_COLOR)
    payload[FIELD_BACKGROUND] = _normalize_hex(payload.get(FIELD_BACKGROUND), DEFAULT_BACKGROUND_COLOR)
    payload[FIELD_PALETTE] = _normalize_palette(payload.get(FIELD_PALETTE))
    payload.setdefault(FIELD_CANVAS, "")

    return payload


def load_session(session_path: Path, **config_options: Any) -> PaintSession:
    """
    Rebuild a session from a file.

    History starts fresh from the loaded canvas. A file without canvas data
    loads as a blank canvas.

    Args:
        session_path: Path to the session file
        **config_options: Extra EngineConfig fields (e.g. history_capacity)

    Raises:
        ValueError: If the canvas data cannot be decoded
        DimensionMismatchError: If the canvas data does not match the stored size
    """
    payload = load_session_data(session_path)

    config = EngineConfig.from_dict({
        **config_options,
        "width": payload[FIELD_WIDTH],
        "height": payload[FIELD_HEIGHT],
        "foreground": payload[FIELD_FOREGROUND],
        "background": payload[FIELD_BACKGROUND],
    })
    session = PaintSession(config)
    session.set_palette(payload[FIELD_PALETTE])

    if payload[FIELD_CANVAS]:
        session.restore_snapshot(payload[FIELD_CANVAS])
    session.reset_history()

    logger.info(f"Loaded session '{payload[FIELD_NAME]}' from {session_path}")
    return session
