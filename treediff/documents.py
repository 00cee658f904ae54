"""
Document loading for treediff.

Turns JSON or YAML text into tree values (dicts, lists, scalars). Parse
failures surface as ParseError before any comparison starts.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Optional

import yaml

from .core.errors import ParseError

logger = logging.getLogger(__name__)

FORMATS = ("json", "yaml")

_EXTENSIONS = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def detect_format(path: str) -> str:
    """Guess the document format from a file extension (default: json)."""
    ext = os.path.splitext(path)[1].lower()
    return _EXTENSIONS.get(ext, "json")


def parse_document(text: str, fmt: str = "json", source: str = "<string>") -> Any:
    """
    Parse document text into a tree value.

    Args:
        text: Document text
        fmt: "json" or "yaml"
        source: Name used in error messages (usually the file path)

    Returns:
        The parsed tree

    Raises:
        ParseError: If the text is malformed
        ValueError: If fmt is not a supported format
    """
    if fmt == "json":
        return _parse_json(text, source)
    if fmt == "yaml":
        return _parse_yaml(text, source)
    raise ValueError(
        f"Unsupported document format: {fmt!r} (expected one of {FORMATS})"
    )


def load_document(path: str, fmt: Optional[str] = None) -> Any:
    """Read and parse a UTF-8 document file.

    The format is taken from the file extension when ``fmt`` is None.
    """
    fmt = fmt or detect_format(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as exc:
        raise ParseError(
            f"not valid UTF-8: {exc.reason}", source=path, fmt=fmt
        ) from exc

    tree = parse_document(text, fmt=fmt, source=path)
    logger.debug("Loaded %s document from %s (%d bytes)", fmt, path, len(text))
    return tree


def _parse_json(text: str, source: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(
            exc.msg, source=source, fmt="json", line=exc.lineno, column=exc.colno
        ) from exc


def _parse_yaml(text: str, source: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        message = getattr(exc, "problem", None) or str(exc)
        raise ParseError(
            message,
            source=source,
            fmt="yaml",
            line=mark.line + 1 if mark is not None else None,
            column=mark.column + 1 if mark is not None else None,
        ) from exc
