"""Metrics aggregation: run the probes, hand their output to the parsers."""

from __future__ import annotations

import asyncio

from app.config import Settings
from app.errors import MetricsUnavailableError
from app.models.metrics import SecurityDecision, SystemSnapshot
from app.services.executor import CommandExecutor
from app.utils.system_parser import parse_system_metrics
from app.utils.table_parser import TableLayout, parse_decisions

CROWDSEC_ERROR = "Failed to retrieve CrowdSec metrics"
SYSTEM_ERROR = "Failed to retrieve system metrics"


class MetricsService:
    """Stateless between calls; one instance per application."""

    def __init__(self, cfg: Settings, executor: CommandExecutor) -> None:
        self._cfg = cfg
        self._executor = executor
        self._layout = TableLayout(
            skip_lines=cfg.decision_header_lines,
            delimiter=cfg.decision_delimiter,
            separator=cfg.decision_separator,
            columns=("reason", "origin", "action", "count"),
        )

    async def get_security_metrics(self) -> list[SecurityDecision]:
        result = await self._executor.execute(
            self._cfg.crowdsec_metrics_command,
            container=self._cfg.crowdsec_container,
        )
        if result.failed:
            raise MetricsUnavailableError(CROWDSEC_ERROR, detail=result.message or "")
        return parse_decisions(
            result.output or "",
            layout=self._layout,
            reason_prefix=self._cfg.decision_reason_prefix,
        )

    async def get_system_metrics(self) -> SystemSnapshot:
        results = await asyncio.gather(
            self._executor.execute(self._cfg.uptime_command),
            self._executor.execute(self._cfg.memory_command),
            self._executor.execute(self._cfg.disk_command),
        )
        failures = [r for r in results if r.failed]
        if failures:
            detail = "; ".join(f"{r.command}: {r.message}" for r in failures)
            raise MetricsUnavailableError(SYSTEM_ERROR, detail=detail)
        uptime, memory, disk = (r.output or "" for r in results)
        return parse_system_metrics(uptime, memory, disk)
