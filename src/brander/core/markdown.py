"""Markdown fragment builders used by document providers"""


def link(content: str, url: str) -> str:
    """Return an inline Markdown link."""
    return f"[{content or ''}]({url or ''})"


def image(alt: str, url: str, title: str | None = None) -> str:
    """Return an inline Markdown image, with an optional title."""
    suffix = f' "{title}"' if title else ""
    return f"![{alt or ''}]({url or ''}{suffix})"


def horizontal_rule() -> str:
    return "---"


def table(rows: list[list], headers: list | None = None, line_separator: str = "\n") -> str:
    """Render rows (and optional headers) as a GitHub-flavoured Markdown table.

    Without headers the first row is promoted to the header line.
    """
    rows = [[_cell(c) for c in row] for row in rows]
    header = [_cell(h) for h in headers] if headers else (rows.pop(0) if rows else [])
    width = max([len(header)] + [len(r) for r in rows]) if header or rows else 0
    if not width:
        return ""

    def _line(cells: list[str]) -> str:
        cells = cells + [""] * (width - len(cells))
        return "| " + " | ".join(cells) + " |"

    lines = [_line(header), _line(["---"] * width)]
    lines.extend(_line(r) for r in rows)
    return line_separator.join(lines)


def _cell(value) -> str:
    """Stringify a table cell, escaping pipes so they don't split the column."""
    return "" if value is None else str(value).replace("|", "\\|")
