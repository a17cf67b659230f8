"""Utilities for parsing ``uptime``, ``free -h`` and ``df -h`` output.

Columns are taken by position only; values are passed through as the
human-readable tokens the tools print (no unit conversion).
"""

from __future__ import annotations

import re

from app.models.metrics import UNAVAILABLE, DiskInfo, MemoryInfo, SystemSnapshot

# " 10:12:01 up 3 days,  4:05,  2 users,  load average: 0.15, 0.10, 0.05"
_UPTIME_RE = re.compile(r"up\s+(.+?),\s+\d+ users?,\s+load average:\s+(.+)")


def _second_line_fields(output: str) -> list[str]:
    """Whitespace-split fields of the first line after the header."""
    lines = output.splitlines()
    if len(lines) < 2:
        return []
    return lines[1].split()


def _field(fields: list[str], index: int) -> str:
    return fields[index] if index < len(fields) else UNAVAILABLE


def parse_uptime(output: str) -> tuple[str, str]:
    """Return (uptime, load_average); both are the sentinel on no match."""
    m = _UPTIME_RE.search(output)
    if not m:
        return UNAVAILABLE, UNAVAILABLE
    return m.group(1).strip(), m.group(2).strip()


def parse_memory(output: str) -> MemoryInfo:
    fields = _second_line_fields(output)
    return MemoryInfo(
        total=_field(fields, 1),
        used=_field(fields, 2),
        free=_field(fields, 3),
    )


def parse_disk(output: str) -> DiskInfo:
    fields = _second_line_fields(output)
    return DiskInfo(
        total=_field(fields, 1),
        used=_field(fields, 2),
        available=_field(fields, 3),
        use_percentage=_field(fields, 4),
    )


def parse_system_metrics(
    uptime_output: str,
    memory_output: str,
    disk_output: str,
) -> SystemSnapshot:
    """Combine the three probes; each section degrades on its own."""
    uptime, load_average = parse_uptime(uptime_output)
    return SystemSnapshot(
        uptime=uptime,
        load_average=load_average,
        memory=parse_memory(memory_output),
        disk=parse_disk(disk_output),
    )
