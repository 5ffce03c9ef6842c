from __future__ import annotations

import json
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Sequence

from .constants import INPUT_FILE_EXTENSION, READER_MAX_WORKERS, UTF8_BOM
from .errors import ParseError, ReadError

logger = logging.getLogger(__name__)


def file_display_name(file_obj) -> str:
    """Short name for an uploaded file, file-like object or path."""
    if file_obj is None:
        return ''
    if isinstance(file_obj, (str, os.PathLike)):
        path = os.fspath(file_obj)
    else:
        path = getattr(file_obj, 'orig_name', None) or getattr(file_obj, 'name', None) or ''
    return os.path.basename(str(path)) or str(path) or repr(file_obj)


def is_json_file(file_obj) -> bool:
    return file_display_name(file_obj).lower().endswith(INPUT_FILE_EXTENSION)


def read_text(file_obj) -> str:
    """Read the raw text of an uploaded file, file-like object or path."""
    name = file_display_name(file_obj)
    if file_obj is None:
        raise ReadError(name or '(none)', "no file given")

    try:
        if hasattr(file_obj, 'read'):
            if hasattr(file_obj, 'seek'):
                file_obj.seek(0)
            content = file_obj.read()
            if isinstance(content, bytes):
                content = content.decode('utf-8')
            return content

        path = file_obj if isinstance(file_obj, (str, os.PathLike)) else file_obj.name
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(name, str(e)) from e


def strip_bom(text: str) -> str:
    if text and text.startswith(UTF8_BOM):
        return text[len(UTF8_BOM):]
    return text


class _NonStandardConstant(ValueError):
    pass


def _reject_constant(name: str):
    raise _NonStandardConstant(f"{name} is not a valid JSON value")


def parse_document(text: str, file_name: str = '') -> Any:
    """Parse the JSON value in `text`, ignoring a leading byte-order mark.

    NaN, Infinity and -Infinity are rejected like any other invalid token.
    """
    try:
        return json.loads(strip_bom(text), parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ParseError(file_name, f"line {e.lineno}, column {e.colno}: {e.msg}") from e
    except _NonStandardConstant as e:
        raise ParseError(file_name, str(e)) from e
    except RecursionError as e:
        raise ParseError(file_name, "nesting too deep") from e


def load_document(file_obj) -> Any:
    return parse_document(read_text(file_obj), file_display_name(file_obj))


def read_documents(files: Sequence[Any], max_workers: int = READER_MAX_WORKERS) -> List[Any]:
    """Read and parse every file concurrently, returning documents in input order.

    The first file (in input order, not completion order) that fails to read
    or parse aborts the whole batch.
    """
    files = list(files)
    if not files:
        return []

    workers = max(1, min(max_workers, len(files)))
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix='Reader') as executor:
        futures = [executor.submit(load_document, f) for f in files]
        documents = [future.result() for future in futures]

    logger.info("Read %d document(s)", len(documents))
    return documents
