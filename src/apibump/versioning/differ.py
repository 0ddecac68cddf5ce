"""Line-oriented diff between two interface snapshots.

Uses the Myers O(ND) shortest-edit-script algorithm, the same family as
``diff`` and ``git diff``: every line that is not part of a longest common
subsequence is reported as removed (previous side) or added (current side).
A line that only moved shows up as a removal plus an addition.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Literal

from apibump.core.errors import InternalError

ChangeKind = Literal["removed", "added"]

# Edit script ops: (op, previous_index, current_index); -1 marks "no index"
_Op = tuple[str, int, int]
_EQUAL = "="
_DELETE = "-"
_INSERT = "+"


@dataclass(frozen=True, slots=True)
class DiffLine:
    """Single changed line.

    ``index`` is the 0-based position in the snapshot the line belongs to:
    the previous snapshot for removals, the current one for additions.
    """

    kind: ChangeKind
    text: str
    index: int

    def render(self) -> str:
        """``diff`` normal-format marker line (``< text`` / ``> text``)."""
        marker = "<" if self.kind == "removed" else ">"
        return f"{marker} {self.text}"


@dataclass(frozen=True, slots=True)
class InterfaceDiff:
    """Ordered changes between two snapshots; unchanged lines are omitted."""

    lines: tuple[DiffLine, ...] = field(default_factory=tuple)

    @property
    def removed_lines(self) -> tuple[str, ...]:
        return tuple(line.text for line in self.lines if line.kind == "removed")

    @property
    def added_lines(self) -> tuple[str, ...]:
        return tuple(line.text for line in self.lines if line.kind == "added")

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def __iter__(self) -> Iterator[DiffLine]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


def diff_lines(previous: Sequence[str], current: Sequence[str]) -> InterfaceDiff:
    """Diff two line sequences.

    Changes come out in scan order. Inside one change block (a run of edits
    between two unchanged lines) removals precede additions, matching the
    ``<`` then ``>`` layout of ``diff`` output.
    """
    prefix = _common_prefix(previous, current)
    suffix = _common_suffix(previous, current, prefix)
    a = previous[prefix : len(previous) - suffix]
    b = current[prefix : len(current) - suffix]

    result: list[DiffLine] = []
    removed: list[DiffLine] = []
    added: list[DiffLine] = []

    for op, i, j in _edit_script(a, b):
        if op == _EQUAL:
            result.extend(removed)
            result.extend(added)
            removed.clear()
            added.clear()
        elif op == _DELETE:
            removed.append(DiffLine("removed", a[i], prefix + i))
        else:
            added.append(DiffLine("added", b[j], prefix + j))
    result.extend(removed)
    result.extend(added)

    return InterfaceDiff(tuple(result))


def _common_prefix(a: Sequence[str], b: Sequence[str]) -> int:
    limit = min(len(a), len(b))
    n = 0
    while n < limit and a[n] == b[n]:
        n += 1
    return n


def _common_suffix(a: Sequence[str], b: Sequence[str], prefix: int) -> int:
    limit = min(len(a), len(b)) - prefix
    n = 0
    while n < limit and a[len(a) - 1 - n] == b[len(b) - 1 - n]:
        n += 1
    return n


def _edit_script(a: Sequence[str], b: Sequence[str]) -> list[_Op]:
    """Shortest edit script from ``a`` to ``b``, in forward order."""
    n, m = len(a), len(b)
    if n == 0:
        return [(_INSERT, -1, j) for j in range(m)]
    if m == 0:
        return [(_DELETE, i, -1) for i in range(n)]

    max_d = n + m
    offset = max_d + 1
    v = [0] * (2 * max_d + 3)
    # trace[d] holds the furthest-reaching x per diagonal before step d,
    # windowed to diagonals -d-1..d+1 (index k + d + 1)
    trace: list[list[int]] = []

    for d in range(max_d + 1):
        trace.append(v[offset - d - 1 : offset + d + 2])
        for k in range(-d, d + 1, 2):
            if k == -d or (k != d and v[offset + k - 1] < v[offset + k + 1]):
                x = v[offset + k + 1]
            else:
                x = v[offset + k - 1] + 1
            y = x - k
            while x < n and y < m and a[x] == b[y]:
                x += 1
                y += 1
            v[offset + k] = x
            if x >= n and y >= m:
                return _backtrack(trace, n, m)

    raise InternalError.unexpected(  # pragma: no cover
        "edit script search exhausted", previous_lines=n, current_lines=m
    )


def _backtrack(trace: list[list[int]], n: int, m: int) -> list[_Op]:
    ops: list[_Op] = []
    x, y = n, m
    for d in range(len(trace) - 1, -1, -1):
        window = trace[d]
        k = x - y
        if k == -d or (k != d and window[k - 1 + d + 1] < window[k + 1 + d + 1]):
            prev_k = k + 1
        else:
            prev_k = k - 1
        prev_x = window[prev_k + d + 1]
        prev_y = prev_x - prev_k

        while x > prev_x and y > prev_y:
            x -= 1
            y -= 1
            ops.append((_EQUAL, x, y))
        if d > 0:
            if x == prev_x:
                ops.append((_INSERT, -1, prev_y))
            else:
                ops.append((_DELETE, prev_x, -1))
        x, y = prev_x, prev_y

    ops.reverse()
    return ops
