"""Tree value model, paths and discrepancy records for treediff.

Tree values are plain Python values as produced by a document parser:
dicts are objects, lists/tuples are arrays, everything else is a scalar.
``ABSENT`` marks "no node at this path" and is distinct from ``None``
(JSON null).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union


class _AbsentType:
    """Singleton sentinel for a node that does not exist in one tree."""

    _instance: Optional["_AbsentType"] = None

    def __new__(cls) -> "_AbsentType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<absent>"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_AbsentType, ())


ABSENT = _AbsentType()


class NodeKind(str, Enum):
    """Variant of a tree value."""

    OBJECT = "object"
    ARRAY = "array"
    SCALAR = "scalar"
    ABSENT = "absent"


def node_kind(value: Any) -> NodeKind:
    """Classify a Python value into its tree variant."""
    if value is ABSENT:
        return NodeKind.ABSENT
    if isinstance(value, dict):
        return NodeKind.OBJECT
    if isinstance(value, (list, tuple)):
        return NodeKind.ARRAY
    return NodeKind.SCALAR


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldSegment:
    name: str


@dataclass(frozen=True)
class IndexSegment:
    index: int


Segment = Union[FieldSegment, IndexSegment]


@dataclass(frozen=True)
class NodePath:
    """
    Location of a node inside a tree.

    Rendering: the root is the empty string, a field directly under the
    root is bare (``name``), deeper fields are appended as ``.name`` and
    indices as ``[i]``, e.g. ``details.phones[1]``.
    """

    segments: Tuple[Segment, ...] = ()

    def child(self, name: Any) -> "NodePath":
        return NodePath(self.segments + (FieldSegment(str(name)),))

    def index(self, i: int) -> "NodePath":
        return NodePath(self.segments + (IndexSegment(i),))

    @property
    def is_root(self) -> bool:
        return not self.segments

    @property
    def depth(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        parts = []
        for seg in self.segments:
            if isinstance(seg, IndexSegment):
                parts.append(f"[{seg.index}]")
            elif parts:
                parts.append(f".{seg.name}")
            else:
                parts.append(seg.name)
        return "".join(parts)


ROOT = NodePath()


# ---------------------------------------------------------------------------
# Discrepancies
# ---------------------------------------------------------------------------


class Severity(str, Enum):
    """How serious a discrepancy is for an expected-vs-actual check."""

    ERROR = "error"  # expected content lost or changed
    WARNING = "warning"  # actual carries something extra


class DiscrepancyKind(str, Enum):
    """Classification of a single reported difference."""

    MISSING_NODE = "missing_node"
    EXTRA_NODE = "extra_node"
    MISSING_FIELD = "missing_field"
    EXTRA_FIELD = "extra_field"
    ARRAY_SHRUNK = "array_shrunk"
    ARRAY_GROWN = "array_grown"
    VALUE_MISMATCH = "value_mismatch"

    @property
    def severity(self) -> Severity:
        return _SEVERITIES[self]


_SEVERITIES: Dict[DiscrepancyKind, Severity] = {
    DiscrepancyKind.MISSING_NODE: Severity.WARNING,
    DiscrepancyKind.EXTRA_NODE: Severity.WARNING,
    DiscrepancyKind.MISSING_FIELD: Severity.ERROR,
    DiscrepancyKind.EXTRA_FIELD: Severity.WARNING,
    DiscrepancyKind.ARRAY_SHRUNK: Severity.ERROR,
    DiscrepancyKind.ARRAY_GROWN: Severity.WARNING,
    DiscrepancyKind.VALUE_MISMATCH: Severity.ERROR,
}


@dataclass(frozen=True)
class Discrepancy:
    """
    One difference between the expected and actual trees.

    Attributes:
        path: Location of the difference
        kind: What kind of difference it is
        expected: Expected value at ``path`` (``ABSENT`` if none)
        actual: Actual value at ``path`` (``ABSENT`` if none)
        count: Number of trailing elements, only for array size kinds
    """

    path: NodePath
    kind: DiscrepancyKind
    expected: Any = ABSENT
    actual: Any = ABSENT
    count: Optional[int] = None

    @property
    def severity(self) -> Severity:
        return self.kind.severity

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dict. Absent sides are omitted."""
        result: Dict[str, Any] = {
            "path": str(self.path),
            "kind": self.kind.value,
            "severity": self.severity.value,
        }
        if self.expected is not ABSENT:
            result["expected"] = _json_keys(self.expected)
        if self.actual is not ABSENT:
            result["actual"] = _json_keys(self.actual)
        if self.count is not None:
            result["count"] = self.count
        return result


_JSON_KEY_TYPES = (str, int, float, bool)


def _json_keys(value: Any) -> Any:
    """Copy of ``value`` whose mapping keys are all valid JSON object keys.

    YAML loaders produce keys such as dates or tuples; those become strings.
    """
    if isinstance(value, dict):
        result = {}
        for k, v in value.items():
            if k is not None and not isinstance(k, _JSON_KEY_TYPES):
                k = str(k)
            result[k] = _json_keys(v)
        return result
    if isinstance(value, (list, tuple)):
        return [_json_keys(v) for v in value]
    return value
