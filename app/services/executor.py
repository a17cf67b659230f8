"""Bounded shell command execution, on the host or inside a container.

Every call owns its own child process and timeout clock, so the executor
is safe to use concurrently.  It never raises: failures come back as a
``CommandResult`` with ``failed=True`` and are logged here.
"""

from __future__ import annotations

import asyncio
import os
import shlex
import signal
import time
from typing import Optional

from app.models.commands import CommandResult
from app.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


class ExecutionTarget:
    """Where a command runs.  Subclasses only decide how to spawn it."""

    async def spawn(self, command: str) -> asyncio.subprocess.Process:
        raise NotImplementedError


class LocalTarget(ExecutionTarget):
    """Run through the host's default shell."""

    async def spawn(self, command: str) -> asyncio.subprocess.Process:
        return await asyncio.create_subprocess_shell(
            command,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            start_new_session=True,
        )

    def __repr__(self) -> str:
        return "LocalTarget()"


class ContainerTarget(ExecutionTarget):
    """Run inside a named container via ``<runtime> exec``."""

    def __init__(self, name: str, runtime: str = "docker") -> None:
        self.name = name
        self.runtime = runtime

    def argv(self, command: str) -> list[str]:
        return [self.runtime, "exec", self.name, *shlex.split(command)]

    async def spawn(self, command: str) -> asyncio.subprocess.Process:
        return await asyncio.create_subprocess_exec(
            *self.argv(command),
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            start_new_session=True,
        )

    def __repr__(self) -> str:
        return f"ContainerTarget(name={self.name!r}, runtime={self.runtime!r})"


class CommandExecutor:
    """Runs commands with a hard wall-clock timeout."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        container_runtime: str = "docker",
    ) -> None:
        self.timeout = timeout
        self.container_runtime = container_runtime

    def target_for(self, container: Optional[str] = None) -> ExecutionTarget:
        if container:
            return ContainerTarget(container, runtime=self.container_runtime)
        return LocalTarget()

    async def execute(
        self,
        command: str,
        container: Optional[str] = None,
    ) -> CommandResult:
        target = self.target_for(container)
        started = time.monotonic()

        def _failed(message: str) -> CommandResult:
            elapsed = time.monotonic() - started
            log.warning(
                "command.failed",
                command=command,
                target=repr(target),
                message=message,
                elapsed=round(elapsed, 3),
            )
            return CommandResult(
                command=command,
                failed=True,
                message=message,
                elapsed_time=elapsed,
            )

        try:
            proc = await target.spawn(command)
        except (OSError, ValueError) as exc:
            # ValueError: unbalanced quotes in shlex.split
            return _failed(f"Command could not be started: {exc}")

        try:
            stdout, stderr = await asyncio.wait_for(
                proc.communicate(), timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            await _kill(proc)
            return _failed(f"Command timed out after {self.timeout:g}s")

        if proc.returncode != 0:
            err = stderr.decode(errors="replace").strip()
            message = f"Command exited with status {proc.returncode}"
            if err:
                message = f"{message}: {err}"
            return _failed(message)

        return CommandResult(
            command=command,
            output=stdout.decode(errors="replace").strip(),
            elapsed_time=time.monotonic() - started,
        )


async def _kill(proc: asyncio.subprocess.Process) -> None:
    """Kill the child's whole process group and reap it."""
    try:
        os.killpg(proc.pid, signal.SIGKILL)
    except ProcessLookupError:
        pass
    except PermissionError:
        proc.kill()
    await proc.wait()
