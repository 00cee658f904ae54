"""Human-readable rendering of discrepancies.

One line per discrepancy, using the reference wording. Values are shown
as compact JSON so strings keep their quotes ("John" vs 1).
"""

from __future__ import annotations

import json
from typing import Any, Optional

from .types import ABSENT, Discrepancy, DiscrepancyKind, Severity

_MARKERS = {
    Severity.ERROR: "❌ ",
    Severity.WARNING: "⚠️  ",
}


def format_value(value: Any, max_len: Optional[int] = None) -> str:
    """Compact JSON for a tree value, ``<absent>`` for ABSENT."""
    if value is ABSENT:
        return repr(ABSENT)
    try:
        text = json.dumps(
            value, default=str, ensure_ascii=False, separators=(",", ":")
        )
    except (TypeError, ValueError):
        # Non-string dict keys that json cannot coerce, or cyclic values
        text = repr(value)
    if max_len is not None and len(text) > max_len:
        if max_len < 4:
            # No room for an ellipsis
            text = text[: max(max_len, 0)]
        else:
            text = text[: max_len - 3] + "..."
    return text


def render_discrepancy(
    d: Discrepancy, markers: bool = False, max_len: Optional[int] = None
) -> str:
    """Render one discrepancy as a single line."""
    path = str(d.path)
    exp = format_value(d.expected, max_len)
    act = format_value(d.actual, max_len)

    if d.kind == DiscrepancyKind.EXTRA_NODE:
        line = f"Missing expected node at '{path}', but actual has value: {act}"
    elif d.kind == DiscrepancyKind.MISSING_NODE:
        line = f"Missing actual node at '{path}', expected value: {exp}"
    elif d.kind == DiscrepancyKind.MISSING_FIELD:
        line = f"Missing field in actual: {path} (expected: {exp})"
    elif d.kind == DiscrepancyKind.EXTRA_FIELD:
        line = f"Extra field in actual: {path} (value: {act})"
    elif d.kind == DiscrepancyKind.ARRAY_SHRUNK:
        line = f"Array '{path}' has {d.count} extra expected elements"
    elif d.kind == DiscrepancyKind.ARRAY_GROWN:
        line = f"Array '{path}' has {d.count} extra actual elements"
    else:
        line = f"Mismatch at '{path}' → expected: {exp}, actual: {act}"

    if markers:
        return _MARKERS[d.severity] + line
    return line
