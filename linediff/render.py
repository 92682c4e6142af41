from __future__ import annotations

from typing import Sequence

from linediff.lcs import Edit

ESCAPES: list[tuple[str, str]] = [
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
]

KIND_CLASSES: dict[str, str] = {
    "added": "diff-added",
    "removed": "diff-removed",
    "unchanged": "diff-unchanged",
}

EMPTY_MESSAGE = "No differences found"

DOCUMENT_CSS = """
<style>
body {
    font-family: ui-monospace, SFMono-Regular, Menlo, Consolas, "Liberation Mono", monospace;
    font-size: 12px;
    line-height: 1.5;
}

.diff-result {
    white-space: pre-wrap;
    word-break: break-all;
}

.diff-added {
    background-color: #e6ffed;
    color: #22863a;
}

.diff-removed {
    background-color: #ffeef0;
    color: #cb2431;
    text-decoration: line-through;
}

.diff-unchanged {
    color: #24292e;
}
</style>
"""


def escape_html(text: str) -> str:
    # "&" has to go first or the entities below would be escaped again
    for char, entity in ESCAPES:
        text = text.replace(char, entity)
    return text


def mark(kind: str, text: str) -> str:
    try:
        css_class = KIND_CLASSES[kind]
    except KeyError as e:
        raise ValueError(f"Unknown diff kind: {e}") from e

    return f'<span class="{css_class}">{escape_html(text)}</span>'


def mark_added(text: str) -> str:
    return mark("added", text)


def mark_removed(text: str) -> str:
    return mark("removed", text)


def mark_unchanged(text: str) -> str:
    return mark("unchanged", text)


def render_edit(edit: Edit) -> str:
    return mark(edit.kind, edit.text + "\n")


def render_edits(edits: Sequence[Edit]) -> str:
    return "".join(render_edit(edit) for edit in edits)


def render_document(body: str, empty_message: str = EMPTY_MESSAGE) -> str:
    """
    Wrap rendered fragments in a standalone HTML page.

    An empty body is replaced by a paragraph holding ``empty_message``, the
    same fallback the interactive viewer shows when nothing was compared.
    """
    if not body:
        content = f"<p>{escape_html(empty_message)}</p>"
    else:
        content = f'<pre class="diff-result">{body}</pre>'

    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    {DOCUMENT_CSS}
</head>
<body>
    {content}
</body>
</html>
"""
