"""Runtime execution context for a build invocation."""

from __future__ import annotations

from pathlib import Path


class Context:
    """Runtime settings passed through the traversal and executor."""

    def __init__(
        self,
        *,
        workdir: str | Path | None = None,
        dry_run: bool = False,
        echo: bool = True,
    ) -> None:
        self.workdir = Path(workdir) if workdir is not None else None
        self.dry_run = dry_run
        self.echo = echo

    def path(self, name: str) -> Path:
        """Resolve a vertex name literally against the working directory."""
        if self.workdir is None:
            return Path(name)
        return self.workdir / name
