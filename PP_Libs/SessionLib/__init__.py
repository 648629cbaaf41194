"""
SessionLib - Editing sessions and persistence

This module provides the PaintSession engine boundary, Pillow-based image
I/O, JSON session files and keyboard shortcut dispatch.
"""

from PP_Libs.SessionLib.engine_config import EngineConfig, ViewState
from PP_Libs.SessionLib.image_io import (
    buffer_to_image,
    image_to_array,
    fit_image_to_canvas,
    load_image,
    save_png,
    encode_data_url,
    decode_data_url,
)
from PP_Libs.SessionLib.paint_session import PaintSession
from PP_Libs.SessionLib.session_store import (
    get_sessions_dir,
    list_session_files,
    session_to_payload,
    save_session,
    create_session_file,
    load_session_data,
    load_session_name,
    load_session,
)
from PP_Libs.SessionLib.shortcuts import dispatch_key

__all__ = [
    "EngineConfig",
    "ViewState",
    "buffer_to_image",
    "image_to_array",
    "fit_image_to_canvas",
    "load_image",
    "save_png",
    "encode_data_url",
    "decode_data_url",
    "PaintSession",
    "get_sessions_dir",
    "list_session_files",
    "session_to_payload",
    "save_session",
    "create_session_file",
    "load_session_data",
    "load_session_name",
    "load_session",
    "dispatch_key",
]
