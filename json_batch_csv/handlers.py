from __future__ import annotations

import logging
import os
import tempfile
from datetime import datetime
from typing import Any, List, Optional

import gradio as gr

from .constants import DEFAULT_OUTPUT_FILENAME, STRATEGY_MERGED
from .errors import ConversionError
from .io_utils import file_display_name, is_json_file
from .pipeline import convert_files
from .strategies import STRATEGIES

logger = logging.getLogger(__name__)

PREVIEW_ROWS = 3


def strategy_choices():
    return [(s.label, s.name) for s in STRATEGIES.values()]


def log_message(msg: str, now: Optional[datetime] = None) -> str:
    now = now or datetime.now()
    return f"[{now.strftime('%H:%M:%S')}] {msg}"


def format_bytes(num_bytes: int) -> str:
    if not num_bytes:
        return "0 B"
    sizes = ["B", "KB", "MB", "GB"]
    value = float(num_bytes)
    i = 0
    while value >= 1024 and i < len(sizes) - 1:
        value /= 1024
        i += 1
    return f"{round(value, 2):g} {sizes[i]}"


def _file_size(file_obj) -> int:
    path = file_obj if isinstance(file_obj, (str, os.PathLike)) else getattr(file_obj, 'name', None)
    try:
        return os.path.getsize(path) if path else 0
    except OSError:
        return 0


def select_json_files(files) -> List[Any]:
    if not files:
        return []
    if not isinstance(files, (list, tuple)):
        files = [files]
    return [f for f in files if is_json_file(f)]


def describe_selection(files):
    """Count line and file list for the current upload selection."""
    files = select_json_files(files)
    if not files:
        return "No files selected yet.", ""

    count_text = f"{len(files)} file(s) ready."
    listing = "\n".join(
        f"- `{file_display_name(f)}` ({format_bytes(_file_size(f))})" for f in files
    )
    return count_text, listing


def clear_selection():
    return gr.update(value=None), "No files selected yet.", "", log_message("Cleared."), None, None


def normalize_output_name(file_name: Optional[str]) -> str:
    name = (file_name or "").strip()
    if not name:
        return DEFAULT_OUTPUT_FILENAME
    # Uploaded names only; never write outside the temp directory
    name = os.path.basename(name)
    if not name.lower().endswith(".csv"):
        name += ".csv"
    return name


def save_download(payload: bytes, file_name: str) -> str:
    """Write the finished CSV to the temp directory and return its path."""
    path = os.path.join(tempfile.gettempdir(), normalize_output_name(file_name))
    with open(path, 'wb') as f:
        f.write(payload)
    return path


def convert_files_handler(files, mode=STRATEGY_MERGED, file_name=None):
    files = select_json_files(files)
    if not files:
        return None, log_message("Add some JSON files first."), None

    try:
        result = convert_files(files, mode or STRATEGY_MERGED)
        path = save_download(result.payload(), file_name)
    except (ConversionError, ValueError, OSError) as e:
        logger.warning("Conversion failed: %s", e)
        return None, log_message(f"Error: {e}"), None

    preview = result.rows[:PREVIEW_ROWS] or None
    return path, log_message(f"Done. {result.summary()}"), preview
