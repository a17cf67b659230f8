"""Errors surfaced to the HTTP layer."""

from __future__ import annotations


class MetricsUnavailableError(Exception):
    """An upstream command failed, so no metrics can be returned.

    ``message`` is safe to show to clients; ``detail`` is the internal
    diagnostic and only goes to the log.
    """

    def __init__(self, message: str, detail: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail
