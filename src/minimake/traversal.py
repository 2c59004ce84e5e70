"""BuildTraversal — staleness-driven post-order walk of a dependency graph."""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .context import Context
from .errors import BuildError, DependencyCycle, MissingPrerequisite, UnknownTarget
from .executor import CommandExecutor

if TYPE_CHECKING:
    from .graph import DependencyGraph
    from .vertex import Vertex

logger = logging.getLogger(__name__)


def _outdates(dep: Vertex, vertex: Vertex) -> bool:
    """True if `dep` forces `vertex` to be rebuilt."""
    return dep.to_build or not dep.file_exists or dep.file_timestamp > vertex.file_timestamp


class Outcome(enum.Enum):
    """Aggregate result of one build invocation."""

    UP_TO_DATE = "up-to-date"
    REBUILT = "rebuilt"
    FAILED = "failed"


@dataclass
class BuildResult:
    """What a build did, reported back to the caller instead of exiting."""

    target: str | None
    outcome: Outcome = Outcome.UP_TO_DATE
    rebuilt: list[str] = field(default_factory=list)
    processed: list[str] = field(default_factory=list)
    cycles: list[DependencyCycle] = field(default_factory=list)
    error: BuildError | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is not Outcome.FAILED

    def raise_for_error(self) -> None:
        """Re-raise the fatal error that aborted the build, if any."""
        if self.error is not None:
            raise self.error


class BuildTraversal:
    """Walks the graph from one target, rebuilding stale vertices in dependency order.

    Each vertex moves strictly from unvisited to visited to processed. A vertex
    reached again while visited but not processed closes a dependency cycle;
    the cycle is reported and the edge treated as satisfied. The walk keeps its
    own stack, so chain depth is not limited by the interpreter recursion limit.
    """

    def __init__(
        self,
        graph: DependencyGraph,
        context: Context | None = None,
        *,
        executor: CommandExecutor | None = None,
    ) -> None:
        self.graph = graph
        self.ctx = context or Context()
        self.executor = executor or CommandExecutor(self.ctx)
        self._result = BuildResult(target=None)

    def run(self, target: str | None = None) -> BuildResult:
        """Build `target` (default: the graph's first target) and report the outcome."""
        name = target if target is not None else self.graph.default_target
        self._result = result = BuildResult(target=name)
        self.graph.reset_traversal_state()

        try:
            if name is None:
                raise BuildError("No target given and no targets declared")
            vertex = self.graph.vertices.lookup(name)
            if vertex is None:
                raise UnknownTarget(name)
            logger.info("Building target '%s'", name)
            self._visit(vertex)
        except BuildError as exc:
            logger.debug("Build of '%s' aborted: %s", name, exc)
            result.outcome = Outcome.FAILED
            result.error = exc
            return result

        if result.rebuilt:
            result.outcome = Outcome.REBUILT
        else:
            logger.info("'%s' is up to date", name)
        return result

    def _visit(self, root: Vertex) -> None:
        """Post-order walk from `root` using an explicit stack of dependency iterators."""
        if root.visited:
            return
        stack = [self._enter(root)]
        while stack:
            vertex, deps, existed = stack[-1]
            dep = next(deps, None)
            if dep is None:
                stack.pop()
                self._finish(vertex, existed)
                if stack:
                    self._check_edge(stack[-1][0], vertex)
            elif dep.visited:
                self._check_edge(vertex, dep)
            else:
                stack.append(self._enter(dep))

    def _enter(self, vertex: Vertex) -> tuple[Vertex, Iterator[Vertex], bool]:
        vertex.visited = True
        if not vertex.stat(self.ctx):
            if not vertex.is_target:
                raise MissingPrerequisite(vertex.name)
            vertex.to_build = True
        return vertex, iter(vertex.dependencies), vertex.file_exists

    def _check_edge(self, vertex: Vertex, dep: Vertex) -> None:
        if not dep.processed:
            cycle = DependencyCycle(dep.name)
            logger.warning("%s (from '%s')", cycle, vertex.name)
            self._result.cycles.append(cycle)
        elif not vertex.to_build and _outdates(dep, vertex):
            logger.debug("'%s' is newer than '%s'", dep.name, vertex.name)
            vertex.to_build = True

    def _finish(self, vertex: Vertex, existed: bool) -> None:
        if vertex.to_build:
            self._rebuild(vertex, existed)
        else:
            logger.debug("Skipping '%s'; up to date", vertex.name)
        vertex.processed = True
        self._result.processed.append(vertex.name)

    def _rebuild(self, vertex: Vertex, existed: bool) -> None:
        logger.info("Rebuilding '%s'", vertex.name)
        ran = self.executor.run_all(vertex.commands, name=vertex.name)
        if ran or not existed:
            self._result.rebuilt.append(vertex.name)
        if not self.ctx.dry_run:
            vertex.stat(self.ctx)
