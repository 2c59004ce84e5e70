"""Vertex model — one named build artifact or dependency."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from .context import Context

logger = logging.getLogger(__name__)


class Vertex(BaseModel):
    """A named node in the dependency graph.

    The name doubles as a filename; `is_target` records whether a rule was
    ever declared for it. The remaining fields are transient traversal state
    and are only meaningful during a single build run.
    """

    name: str = Field(min_length=1)
    is_target: bool = False
    commands: list[str] = Field(default_factory=list)
    dependencies: list[Vertex] = Field(default_factory=list, repr=False)

    visited: bool = False
    processed: bool = False
    to_build: bool = False
    file_exists: bool = False
    file_timestamp: float = 0.0

    def depends_on(self, other: Vertex) -> bool:
        """Return True if `other` is already a direct dependency."""
        return any(dep is other for dep in self.dependencies)

    def reset(self) -> None:
        """Clear the per-traversal flags."""
        self.visited = False
        self.processed = False
        self.to_build = False

    def stat(self, ctx: Context) -> bool:
        """Refresh file state from the filesystem; returns `file_exists`."""
        try:
            st = ctx.path(self.name).stat()
        except (OSError, ValueError):  # ValueError: embedded NUL in the name
            self.file_exists = False
            self.file_timestamp = 0.0
        else:
            self.file_exists = True
            self.file_timestamp = st.st_mtime
        logger.debug(
            "Stat '%s': exists=%s mtime=%s", self.name, self.file_exists, self.file_timestamp
        )
        return self.file_exists
