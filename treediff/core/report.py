"""Sinks for the discrepancy sequence: reports, lookups, assertions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .differ import DiffPolicy, compare
from .errors import TreeMismatchError
from .render import render_discrepancy
from .types import ROOT, Discrepancy, Severity


class FailOn:
    """Threshold deciding which discrepancies make a report fail."""

    ANY = "any"
    ERROR = "error"
    NEVER = "never"

    CHOICES = (ANY, ERROR, NEVER)


@dataclass(frozen=True)
class DiffReport:
    """
    Collected result of comparing two trees.

    Empty ``discrepancies`` means the trees are structurally equivalent.
    """

    discrepancies: Tuple[Discrepancy, ...] = ()

    @property
    def same(self) -> bool:
        return not self.discrepancies

    def errors(self) -> List[Discrepancy]:
        return [d for d in self.discrepancies if d.severity == Severity.ERROR]

    def warnings(self) -> List[Discrepancy]:
        return [d for d in self.discrepancies if d.severity == Severity.WARNING]

    def counts(self) -> Dict[str, int]:
        """Number of discrepancies per kind, in order of first appearance."""
        counts: Dict[str, int] = {}
        for d in self.discrepancies:
            counts[d.kind.value] = counts.get(d.kind.value, 0) + 1
        return counts

    def fails(self, fail_on: str = FailOn.ANY) -> bool:
        if fail_on == FailOn.NEVER:
            return False
        if fail_on == FailOn.ERROR:
            return bool(self.errors())
        if fail_on == FailOn.ANY:
            return not self.same
        raise ValueError(f"Unknown fail_on threshold: {fail_on!r}")

    def summary(self) -> str:
        """One-line summary of the report."""
        if self.same:
            return "Trees are equivalent"
        total = len(self.discrepancies)
        noun = "discrepancy" if total == 1 else "discrepancies"
        return (
            f"{total} {noun} "
            f"({len(self.errors())} errors, {len(self.warnings())} warnings)"
        )

    def to_text(
        self,
        limit: Optional[int] = None,
        markers: bool = True,
        max_len: Optional[int] = None,
    ) -> str:
        """Render every discrepancy (up to ``limit``) followed by the summary."""
        shown = self.discrepancies if limit is None else self.discrepancies[:limit]
        lines = [
            render_discrepancy(d, markers=markers, max_len=max_len) for d in shown
        ]
        hidden = len(self.discrepancies) - len(shown)
        if hidden > 0:
            lines.append(f"... and {hidden} more discrepancies")
        lines.append(self.summary())
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for serialization."""
        return {
            "same": self.same,
            "total": len(self.discrepancies),
            "counts": self.counts(),
            "discrepancies": [d.to_dict() for d in self.discrepancies],
        }


def build_report(
    expected: Any, actual: Any, policy: Optional[DiffPolicy] = None
) -> DiffReport:
    """Compare two trees and collect every discrepancy into a report."""
    return DiffReport(discrepancies=tuple(compare(expected, actual, ROOT, policy)))


def first_discrepancy(
    expected: Any, actual: Any, policy: Optional[DiffPolicy] = None
) -> Optional[Discrepancy]:
    """Return the first discrepancy, or None. Stops the traversal early."""
    return next(compare(expected, actual, ROOT, policy), None)


def is_equivalent(
    expected: Any, actual: Any, policy: Optional[DiffPolicy] = None
) -> bool:
    return first_discrepancy(expected, actual, policy) is None


def assert_trees_equal(
    expected: Any,
    actual: Any,
    policy: Optional[DiffPolicy] = None,
    limit: int = 20,
) -> None:
    """
    Assert that two trees are structurally equivalent.

    Raises:
        TreeMismatchError: If any discrepancy is found. The message lists
            the first ``limit`` discrepancies.
    """
    report = build_report(expected, actual, policy)
    if not report.same:
        raise TreeMismatchError(
            "Trees differ:\n" + report.to_text(limit=limit, markers=False),
            report.discrepancies,
        )
