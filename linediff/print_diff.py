from __future__ import annotations

from typing import Sequence

from linediff.color import Color
from linediff.lcs import Edit

DIFF_FORMATS: dict[str, str] = {
    "context": "normal",
    "meta": "bold",
    "old": "red",
    "new": "green",
}

EDIT_SLOTS: dict[str, str] = {
    "eql": "context",
    "ins": "new",
    "del": "old",
}


class PrintDiffMixin:
    def diff_styles(self) -> dict[str, list[str]]:
        styles = getattr(self, "_diff_styles", None)
        if styles is not None:
            return styles

        styles = {}
        for name, default in DIFF_FORMATS.items():
            style_str = self.config.get(["color", "diff", name])

            if isinstance(style_str, str) and style_str:
                styles[name] = Color.parse(style_str)
            else:
                styles[name] = [default]

        self._diff_styles = styles
        return styles

    def diff_fmt(self, name: str, text: str) -> str:
        return self.fmt(self.diff_styles()[name], text)

    def print_text_diff(self, edits: Sequence[Edit]) -> None:
        for edit in edits:
            self.print_diff_edit(edit)

    def print_diff_edit(self, edit: Edit) -> None:
        self.println(self.diff_fmt(EDIT_SLOTS[edit.ty], str(edit)))

    def print_header(self, string: str) -> None:
        self.println(self.diff_fmt("meta", string))
