"""CommandExecutor — run a vertex's shell commands."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Iterable
from dataclasses import dataclass

from .context import Context
from .errors import CommandFailure

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Outcome of a single shell command."""

    command: str
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandExecutor:
    """Run commands through the host shell, inheriting stdout and stderr."""

    def __init__(self, ctx: Context | None = None) -> None:
        self.ctx = ctx or Context()

    def run(self, command: str) -> CommandResult:
        """Run one command; launch failures are reported as returncode -1."""
        if self.ctx.echo:
            print(command, flush=True)
        if self.ctx.dry_run:
            logger.info("[DRY RUN] Would run: %s", command)
            return CommandResult(command, 0)

        logger.info("Running: %s", command)
        try:
            proc = subprocess.run(command, shell=True, cwd=self.ctx.workdir)
        except OSError as exc:
            logger.error("Could not launch '%s': %s", command, exc)
            return CommandResult(command, -1)
        return CommandResult(command, proc.returncode)

    def run_all(self, commands: Iterable[str], *, name: str | None = None) -> int:
        """Run commands in order, stopping at the first failure.

        Returns the number of commands run; raises CommandFailure on failure.
        """
        count = 0
        for command in commands:
            result = self.run(command)
            if not result.ok:
                raise CommandFailure(command, result.returncode, name=name)
            count += 1
        return count
