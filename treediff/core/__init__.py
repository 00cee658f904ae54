"""Core types and logic for treediff."""

from .differ import DiffPolicy, compare, diff, scalars_equal
from .errors import ParseError, TreeDiffError, TreeMismatchError
from .render import format_value, render_discrepancy
from .report import (
    DiffReport,
    FailOn,
    assert_trees_equal,
    build_report,
    first_discrepancy,
    is_equivalent,
)
from .types import (
    ABSENT,
    ROOT,
    Discrepancy,
    DiscrepancyKind,
    FieldSegment,
    IndexSegment,
    NodeKind,
    NodePath,
    Severity,
    node_kind,
)

__all__ = [
    # Tree values and paths
    "ABSENT",
    "NodeKind",
    "node_kind",
    "NodePath",
    "FieldSegment",
    "IndexSegment",
    "ROOT",
    # Discrepancies
    "Discrepancy",
    "DiscrepancyKind",
    "Severity",
    # Differ
    "DiffPolicy",
    "compare",
    "diff",
    "scalars_equal",
    # Rendering
    "format_value",
    "render_discrepancy",
    # Reports and assertions
    "DiffReport",
    "FailOn",
    "build_report",
    "first_discrepancy",
    "is_equivalent",
    "assert_trees_equal",
    # Exceptions
    "TreeDiffError",
    "ParseError",
    "TreeMismatchError",
]
