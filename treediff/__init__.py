from .core import (
    # Tree values and paths
    ABSENT,
    ROOT,
    # Discrepancies
    Discrepancy,
    DiscrepancyKind,
    # Differ
    DiffPolicy,
    # Reports
    DiffReport,
    FailOn,
    FieldSegment,
    IndexSegment,
    NodeKind,
    NodePath,
    # Exceptions
    ParseError,
    Severity,
    TreeDiffError,
    TreeMismatchError,
    assert_trees_equal,
    build_report,
    compare,
    diff,
    first_discrepancy,
    format_value,
    is_equivalent,
    node_kind,
    render_discrepancy,
)
from .documents import detect_format, load_document, parse_document
from .version import TREEDIFF_VERSION

__all__ = [
    # Version
    "TREEDIFF_VERSION",
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
    # Documents
    "parse_document",
    "load_document",
    "detect_format",
    # Exceptions
    "TreeDiffError",
    "ParseError",
    "TreeMismatchError",
]
