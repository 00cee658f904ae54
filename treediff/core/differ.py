"""Structural differ for tree values.

Walks two trees in lock-step and yields one Discrepancy per difference.

Traversal guarantees:
- Depth-first pre-order over the expected tree's structure
- dict: expected's fields in expected's order (each field's discrepancies
  before the next field), then extra actual fields in actual's order
- list: by index 0..n-1, then at most one size discrepancy for the array
- Type mismatch: one VALUE_MISMATCH for the whole node, no descent
- Missing/extra subtrees are reported once, never per leaf

The differ is total: every pair of inputs is a defined case, nothing raises.
It keeps an explicit stack of iterators, so tree depth is not limited by
the interpreter recursion limit.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import (
    Any,
    FrozenSet,
    Iterable,
    Iterator,
    List,
    NamedTuple,
    Optional,
    Union,
)

from .types import (
    ABSENT,
    ROOT,
    Discrepancy,
    DiscrepancyKind,
    NodeKind,
    NodePath,
    node_kind,
)


@dataclass(frozen=True)
class DiffPolicy:
    """
    Configuration for a comparison.

    The default policy is the plain structural comparison; every option
    narrows or sharpens it.

    Attributes:
        ignore_fields: Object field names skipped on both sides, at any depth.
        strict_numbers: If True, an int never equals a float (1 vs 1.0).
    """

    ignore_fields: FrozenSet[str] = frozenset()
    strict_numbers: bool = False

    @classmethod
    def default(cls) -> "DiffPolicy":
        """Create default policy."""
        return cls()

    @classmethod
    def strict(cls) -> "DiffPolicy":
        """Create strict policy - numeric types must match too."""
        return cls(strict_numbers=True)

    def with_ignored(self, fields: Iterable[str]) -> "DiffPolicy":
        return DiffPolicy(
            ignore_fields=self.ignore_fields | frozenset(fields),
            strict_numbers=self.strict_numbers,
        )


class _Pair(NamedTuple):
    expected: Any
    actual: Any
    path: NodePath


_Task = Union[_Pair, Discrepancy]


def scalars_equal(expected: Any, actual: Any, strict_numbers: bool = False) -> bool:
    """Equality of two scalar leaves.

    Booleans only equal booleans, NaN equals NaN, and ints compare with
    floats numerically unless ``strict_numbers`` is set.
    """
    if expected is actual:
        return True
    if isinstance(expected, bool) or isinstance(actual, bool):
        return type(expected) is type(actual) and expected == actual
    if isinstance(expected, (int, float)) and isinstance(actual, (int, float)):
        if strict_numbers and type(expected) is not type(actual):
            return False
        if isinstance(expected, float) and isinstance(actual, float):
            if math.isnan(expected) and math.isnan(actual):
                return True
        return expected == actual
    return expected == actual


# ---------------------------------------------------------------------------
# Node expansion
# ---------------------------------------------------------------------------


def _expand(pair: _Pair, policy: DiffPolicy) -> Iterator[_Task]:
    expected, actual, path = pair
    if expected is actual:
        return

    kind_e = node_kind(expected)
    kind_a = node_kind(actual)

    if kind_e is NodeKind.ABSENT:
        yield Discrepancy(path, DiscrepancyKind.EXTRA_NODE, ABSENT, actual)
        return
    if kind_a is NodeKind.ABSENT:
        yield Discrepancy(path, DiscrepancyKind.MISSING_NODE, expected, ABSENT)
        return

    if kind_e is NodeKind.OBJECT and kind_a is NodeKind.OBJECT:
        yield from _expand_object(expected, actual, path, policy)
        return
    if kind_e is NodeKind.ARRAY and kind_a is NodeKind.ARRAY:
        yield from _expand_array(expected, actual, path)
        return

    # Containers of different shape, or a container against a scalar
    if kind_e is not kind_a:
        yield Discrepancy(path, DiscrepancyKind.VALUE_MISMATCH, expected, actual)
        return

    if not scalars_equal(expected, actual, policy.strict_numbers):
        yield Discrepancy(path, DiscrepancyKind.VALUE_MISMATCH, expected, actual)


def _expand_object(
    expected: dict, actual: dict, path: NodePath, policy: DiffPolicy
) -> Iterator[_Task]:
    ignored = policy.ignore_fields
    for name, exp_value in expected.items():
        if name in ignored:
            continue
        child = path.child(name)
        if name not in actual:
            yield Discrepancy(child, DiscrepancyKind.MISSING_FIELD, exp_value, ABSENT)
        else:
            yield _Pair(exp_value, actual[name], child)

    for name, act_value in actual.items():
        if name in ignored or name in expected:
            continue
        yield Discrepancy(
            path.child(name), DiscrepancyKind.EXTRA_FIELD, ABSENT, act_value
        )


def _expand_array(expected: Any, actual: Any, path: NodePath) -> Iterator[_Task]:
    len_e = len(expected)
    len_a = len(actual)
    for i in range(min(len_e, len_a)):
        yield _Pair(expected[i], actual[i], path.index(i))

    if len_e > len_a:
        yield Discrepancy(
            path, DiscrepancyKind.ARRAY_SHRUNK, expected, actual, count=len_e - len_a
        )
    elif len_a > len_e:
        yield Discrepancy(
            path, DiscrepancyKind.ARRAY_GROWN, expected, actual, count=len_a - len_e
        )


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def compare(
    expected: Any,
    actual: Any,
    path: NodePath = ROOT,
    policy: Optional[DiffPolicy] = None,
) -> Iterator[Discrepancy]:
    """Lazily compare two trees.

    Args:
        expected: The expected tree (``ABSENT`` allowed).
        actual: The actual tree (``ABSENT`` allowed).
        path: Path of the compared nodes (default: root).
        policy: Comparison options (default: DiffPolicy.default()).

    Yields:
        Discrepancy records in traversal order. Calling again with the
        same inputs yields an identical sequence.
    """
    policy = policy or DiffPolicy.default()
    stack: List[Iterator[_Task]] = [_expand(_Pair(expected, actual, path), policy)]
    while stack:
        task = next(stack[-1], None)
        if task is None:
            stack.pop()
        elif isinstance(task, Discrepancy):
            yield task
        else:
            stack.append(_expand(task, policy))


def diff(
    expected: Any,
    actual: Any,
    policy: Optional[DiffPolicy] = None,
) -> List[Discrepancy]:
    """Compare two trees from the root and return every discrepancy."""
    return list(compare(expected, actual, ROOT, policy))
