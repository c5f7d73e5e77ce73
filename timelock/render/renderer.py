from __future__ import annotations

from typing import List, Sequence

from ..jsonic import dumps as jdumps
from ..types import StaleFile

TABLE_HEADERS = ("File", "Author", "Last Modified", "Changes")
NO_RESULTS_MESSAGE = "No unchanged files found."


def _cells(row: StaleFile) -> List[str]:
    return [row.file, row.author, row.last_modified, str(row.changes)]


def render_table(rows: Sequence[StaleFile]) -> str:
    """
    Box-drawn text table:

        +------+--------+---------------+---------+
        | File | Author | Last Modified | Changes |
        +------+--------+---------------+---------+
        | a.py | John   | 2019-...      | 1       |
        +------+--------+---------------+---------+
    """
    body = [_cells(r) for r in rows]
    widths = [len(h) for h in TABLE_HEADERS]
    for cells in body:
        widths = [max(w, len(c)) for w, c in zip(widths, cells)]

    sep = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    def line(cells: Sequence[str]) -> str:
        return "|" + "|".join(f" {c.ljust(w)} " for c, w in zip(cells, widths)) + "|"

    out = [sep, line(TABLE_HEADERS), sep]
    out.extend(line(cells) for cells in body)
    out.append(sep)
    return "\n".join(out) + "\n"


def render_json(rows: Sequence[StaleFile]) -> str:
    return jdumps([r.model_dump(mode="json") for r in rows], pretty=True) + "\n"


__all__ = ["render_table", "render_json", "TABLE_HEADERS", "NO_RESULTS_MESSAGE"]
