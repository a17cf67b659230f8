"""Tests for uptime / free / df output parsing."""

from __future__ import annotations

from app.models.metrics import UNAVAILABLE
from app.utils.system_parser import (
    parse_disk,
    parse_memory,
    parse_system_metrics,
    parse_uptime,
)
from tests.fake_executor import DF_H, FREE_H, UPTIME


class TestUptime:
    def test_well_formed(self):
        uptime, load = parse_uptime(UPTIME)
        assert uptime == "12 days,  3:41"
        assert load == "0.08, 0.12, 0.09"

    def test_single_user(self):
        uptime, load = parse_uptime(
            " 09:00:00 up 5 min,  1 user,  load average: 1.00, 0.50, 0.25",
        )
        assert uptime == "5 min"
        assert load == "1.00, 0.50, 0.25"

    def test_unmatched(self):
        assert parse_uptime("garbage") == (UNAVAILABLE, UNAVAILABLE)

    def test_empty(self):
        assert parse_uptime("") == (UNAVAILABLE, UNAVAILABLE)


class TestMemory:
    def test_columns(self):
        mem = parse_memory(FREE_H)
        assert (mem.total, mem.used, mem.free) == ("7.7Gi", "2.1Gi", "1.3Gi")

    def test_header_only(self):
        mem = parse_memory("total used free")
        assert (mem.total, mem.used, mem.free) == (UNAVAILABLE,) * 3

    def test_short_line(self):
        mem = parse_memory("header\nMem: 512M")
        assert mem.total == "512M"
        assert mem.used == UNAVAILABLE
        assert mem.free == UNAVAILABLE


class TestDisk:
    def test_columns(self):
        disk = parse_disk(DF_H)
        assert disk.total == "49G"
        assert disk.used == "18G"
        assert disk.available == "29G"
        assert disk.use_percentage == "39%"

    def test_empty(self):
        disk = parse_disk("")
        assert disk.use_percentage == UNAVAILABLE


class TestSnapshot:
    def test_full_snapshot_serialises_with_camel_case_keys(self):
        snap = parse_system_metrics(UPTIME, FREE_H, DF_H)
        data = snap.model_dump(by_alias=True)
        assert data == {
            "uptime": "12 days,  3:41",
            "loadAverage": "0.08, 0.12, 0.09",
            "memory": {"total": "7.7Gi", "used": "2.1Gi", "free": "1.3Gi"},
            "disk": {
                "total": "49G",
                "used": "18G",
                "available": "29G",
                "usePercentage": "39%",
            },
        }

    def test_sections_degrade_independently(self):
        snap = parse_system_metrics("nonsense", FREE_H, "")
        assert snap.uptime == UNAVAILABLE
        assert snap.load_average == UNAVAILABLE
        assert snap.memory.total == "7.7Gi"
        assert snap.disk.total == UNAVAILABLE
