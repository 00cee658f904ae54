"""Exceptions raised around the differ.

The differ itself never raises. These belong to its collaborators: the
document parser and the assertion sink.
"""

from __future__ import annotations

from typing import Optional, Sequence

from .types import Discrepancy


class TreeDiffError(Exception):
    """Base exception for treediff errors."""

    pass


class ParseError(TreeDiffError):
    """
    Raised when document text cannot be turned into a tree.

    Raised before any comparison runs, so the differ never sees a
    partially-built tree.
    """

    def __init__(
        self,
        message: str,
        source: str = "<string>",
        fmt: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        super().__init__(message)
        self.source = source
        self.fmt = fmt
        self.line = line
        self.column = column

    def __str__(self) -> str:
        location = f"source={self.source}"
        if self.fmt:
            location += f", format={self.fmt}"
        if self.line is not None:
            location += f", line={self.line}"
        if self.column is not None:
            location += f", column={self.column}"
        return f"ParseError({location}): {self.args[0]}"


class TreeMismatchError(TreeDiffError, AssertionError):
    """
    Raised by assert_trees_equal when the trees differ.

    Subclasses AssertionError so test frameworks report it as a failure.
    """

    def __init__(self, message: str, discrepancies: Sequence[Discrepancy]):
        super().__init__(message)
        self.discrepancies = tuple(discrepancies)
