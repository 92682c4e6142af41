from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generator

log = logging.getLogger(__name__)

SYMBOLS: dict[str, str] = {
    "eql": " ",
    "ins": "+",
    "del": "-",
}

KINDS: dict[str, str] = {
    "eql": "unchanged",
    "ins": "added",
    "del": "removed",
}


@dataclass(frozen=True)
class Line:
    number: int
    text: str


@dataclass(frozen=True)
class Edit:
    ty: str
    a_line: Line | None = None
    b_line: Line | None = None

    def __str__(self) -> str:
        return SYMBOLS[self.ty] + self.text

    @property
    def line(self) -> Line:
        line = self.a_line or self.b_line
        assert line is not None
        return line

    @property
    def text(self) -> str:
        return self.line.text

    @property
    def kind(self) -> str:
        return KINDS[self.ty]


class LCS:
    """
    Line diff driven by a longest-common-subsequence table.

    The table is filled bottom-up, then walked from its last cell back to the
    origin. When both predecessor cells hold the same length the walk consumes
    a line from ``b`` first, so additions are emitted after removals in the
    final (reversed) script.
    """

    def __init__(self, a: list[Line], b: list[Line]):
        self.a = a
        self.b = b

    @classmethod
    def diff(cls, a: list[Line], b: list[Line]) -> list[Edit]:
        return cls(a, b)._diff()

    def _diff(self) -> list[Edit]:
        edits: list[Edit] = []

        for ty, i, j in self._backtrack():
            if ty == "ins":
                edits.append(Edit("ins", None, self.b[j]))
            elif ty == "del":
                edits.append(Edit("del", self.a[i], None))
            else:
                edits.append(Edit("eql", self.a[i], self.b[j]))

        edits.reverse()
        return edits

    def _backtrack(self) -> Generator[tuple[str, int, int]]:
        matrix = self._matrix()
        i, j = len(self.a), len(self.b)

        while i > 0 or j > 0:
            if i == 0:
                yield "ins", i, j - 1
                j -= 1
            elif j == 0:
                yield "del", i - 1, j
                i -= 1
            elif self.a[i - 1].text == self.b[j - 1].text:
                yield "eql", i - 1, j - 1
                i -= 1
                j -= 1
            elif matrix[i][j - 1] >= matrix[i - 1][j]:
                yield "ins", i, j - 1
                j -= 1
            else:
                yield "del", i - 1, j
                i -= 1

    def _matrix(self) -> list[list[int]]:
        n, m = len(self.a), len(self.b)
        log.debug(f"building {n + 1}x{m + 1} LCS matrix")

        matrix = [[0] * (m + 1) for _ in range(n + 1)]

        for i in range(1, n + 1):
            a_text = self.a[i - 1].text
            row, prev = matrix[i], matrix[i - 1]
            for j in range(1, m + 1):
                if a_text == self.b[j - 1].text:
                    row[j] = prev[j - 1] + 1
                else:
                    row[j] = max(prev[j], row[j - 1])

        return matrix
