"""Utilities for parsing delimiter-separated CLI tables.

The layout of a table (how many banner lines to skip, the delimiter, the
column order) is a contract with the tool that prints it, so it is passed
in as a ``TableLayout`` rather than detected from the text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from app.models.metrics import SecurityDecision
from app.utils.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class TableLayout:
    skip_lines: int = 2
    delimiter: str = "|"
    separator: str = "----"
    columns: tuple[str, ...] = ()
    strip_border: bool = True

    def __post_init__(self) -> None:
        if not self.delimiter:
            raise ValueError("TableLayout.delimiter must not be empty")


DECISION_LAYOUT = TableLayout(columns=("reason", "origin", "action", "count"))

DEFAULT_REASON_PREFIX = "crowdsecurity/"


# ---------------------------------------------------------------------------
# Generic rows
# ---------------------------------------------------------------------------

def _is_separator(line: str, layout: TableLayout) -> bool:
    return bool(layout.separator) and layout.separator in line


def _split_row(line: str, layout: TableLayout) -> list[str]:
    row = line.strip()
    width = len(layout.delimiter)
    # Boxed rows only; a plain row may start with an empty cell
    if (
        layout.strip_border
        and len(row) >= 2 * width
        and row.startswith(layout.delimiter)
        and row.endswith(layout.delimiter)
    ):
        row = row[width:-width]
    return [cell.strip() for cell in row.split(layout.delimiter)]


def parse_table(text: str, layout: TableLayout) -> list[dict[str, str]]:
    """Map each data row of *text* onto ``layout.columns``.

    Blank lines and separator rows are skipped.  Every column key is
    present in every row; missing cells are empty strings.
    """
    rows: list[dict[str, str]] = []
    for line in text.splitlines()[layout.skip_lines:]:
        if not line.strip() or _is_separator(line, layout):
            continue
        cells = _split_row(line, layout)
        rows.append({
            name: cells[i] if i < len(cells) else ""
            for i, name in enumerate(layout.columns)
        })
    return rows


# ---------------------------------------------------------------------------
# Security decisions
# ---------------------------------------------------------------------------

_LEADING_INT_RE = re.compile(r"^[+-]?[0-9]+")


def parse_count(cell: str) -> Optional[int]:
    """Parse the leading integer of *cell*, or None if there is none."""
    m = _LEADING_INT_RE.match(cell.strip())
    if m is None:
        return None
    return int(m.group(0))


def strip_prefix(reason: str, prefix: str = DEFAULT_REASON_PREFIX) -> str:
    if prefix and reason.startswith(prefix):
        return reason[len(prefix):]
    return reason


def parse_decisions(
    text: str,
    layout: TableLayout = DECISION_LAYOUT,
    reason_prefix: str = DEFAULT_REASON_PREFIX,
) -> list[SecurityDecision]:
    """Parse a decisions table into records sorted by count, highest first.

    Rows whose count is missing, non-numeric or not positive are dropped.
    Never raises on malformed input.
    """
    decisions: list[SecurityDecision] = []
    for row in parse_table(text, layout):
        count = parse_count(row.get("count", ""))
        if count is None or count <= 0:
            log.debug(
                "decisions.row_dropped",
                cause="malformed" if count is None else "not_positive",
                row=row,
            )
            continue
        decisions.append(
            SecurityDecision(
                reason=strip_prefix(row.get("reason", ""), reason_prefix),
                origin=row.get("origin", ""),
                action=row.get("action", ""),
                count=count,
            ),
        )
    # sorted() is stable, so equal counts keep table order
    return sorted(decisions, key=lambda d: d.count, reverse=True)
