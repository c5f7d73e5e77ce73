import json

from timelock.render import TABLE_HEADERS, render_json, render_table
from timelock.types import StaleFile


def _rows():
    return [
        StaleFile(file="file1.txt", author="John Doe", last_modified="2018-01-01 10:00:00", changes=1),
        StaleFile(file="src/very/long/path.py", author="Zoë", last_modified="2017-05-05 00:00:00", changes=12),
    ]


def test_table_layout():
    out = render_table(_rows())
    lines = out.rstrip("\n").split("\n")
    # border, header, border, 2 rows, border
    assert len(lines) == 6
    assert lines[0] == lines[2] == lines[-1]
    assert lines[0].startswith("+-") and lines[0].endswith("-+")
    assert [c.strip() for c in lines[1].strip("|").split("|")] == list(TABLE_HEADERS)
    assert [c.strip() for c in lines[3].strip("|").split("|")] == ["file1.txt", "John Doe", "2018-01-01 10:00:00", "1"]
    assert "src/very/long/path.py" in lines[4]
    # every line has the same width
    assert len({len(ln) for ln in lines}) == 1


def test_table_with_single_row():
    out = render_table(_rows()[:1])
    body = [ln for ln in out.splitlines() if ln.startswith("|")]
    assert len(body) == 2  # header + 1 row


def test_json_output():
    data = json.loads(render_json(_rows()))
    assert data == [
        {"file": "file1.txt", "author": "John Doe", "last_modified": "2018-01-01 10:00:00", "changes": 1},
        {"file": "src/very/long/path.py", "author": "Zoë", "last_modified": "2017-05-05 00:00:00", "changes": 12},
    ]


def test_json_is_pretty_printed():
    out = render_json(_rows()[:1])
    assert out.startswith("[\n    {\n")
    assert '"file": "file1.txt"' in out
