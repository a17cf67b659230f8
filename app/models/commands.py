"""Command-related data structures."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class CommandResult(BaseModel):
    """Internal result from a single command execution.

    ``output`` is meaningful when ``failed`` is false, ``message`` when it
    is true.
    """

    command: str
    failed: bool = False
    output: Optional[str] = None
    message: Optional[str] = None
    elapsed_time: float = 0.0
