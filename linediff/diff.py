from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from linediff.lcs import LCS, Edit, Line
from linediff.render import mark_added, mark_removed, render_edits

log = logging.getLogger(__name__)


@dataclass
class DiffStats:
    added: int = 0
    removed: int = 0
    unchanged: int = 0

    @property
    def total(self) -> int:
        return self.added + self.removed + self.unchanged

    def __str__(self) -> str:
        insertions = "insertion" if self.added == 1 else "insertions"
        deletions = "deletion" if self.removed == 1 else "deletions"
        return f"{self.added} {insertions}(+), {self.removed} {deletions}(-)"


def lines(document: Optional[str]) -> list[Line]:
    if not document:
        return []
    return [Line(i + 1, text) for i, text in enumerate(document.split("\n"))]


def diff(a: Optional[str], b: Optional[str]) -> list[Edit]:
    if not a and not b:
        return []
    if not a:
        return [Edit("ins", None, line) for line in lines(b)]
    if not b:
        return [Edit("del", line, None) for line in lines(a)]

    edits = LCS.diff(lines(a), lines(b))
    log.debug(f"diff produced {len(edits)} edits")
    return edits


def diff_chars(a: Optional[str], b: Optional[str]) -> list[Edit]:
    # TODO: compare changed lines character by character instead of delegating
    return diff(a, b)


def compare(a: Optional[str], b: Optional[str]) -> str:
    """
    Compare two texts line by line and return them as marked-up fragments.

    When one side is empty the other is wrapped whole in a single fragment,
    without the per-line breaks the general path appends.
    """
    if not a and not b:
        return ""
    if not a:
        return mark_added(b or "")
    if not b:
        return mark_removed(a)

    return render_edits(diff(a, b))


def compare_chars(a: Optional[str], b: Optional[str]) -> str:
    return compare(a, b)


def stats(edits: Sequence[Edit]) -> DiffStats:
    result = DiffStats()

    for edit in edits:
        if edit.ty == "ins":
            result.added += 1
        elif edit.ty == "del":
            result.removed += 1
        else:
            result.unchanged += 1

    return result
