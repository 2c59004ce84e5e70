"""DependencyGraph — vertices, edges and per-vertex command lists."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .errors import DuplicateEdge, UnknownVertex
from .store import VertexStore
from .vertex import Vertex

if TYPE_CHECKING:
    from .context import Context
    from .traversal import BuildResult

logger = logging.getLogger(__name__)


class DependencyGraph:
    """A build graph: each target points at the dependencies it is built from."""

    def __init__(self) -> None:
        self.vertices = VertexStore()
        self._default_target: str | None = None

    @property
    def default_target(self) -> str | None:
        """Name of the first vertex declared as a target."""
        return self._default_target

    def targets(self) -> list[str]:
        """Names of all declared targets, in insertion order."""
        return [v.name for v in self.vertices.all() if v.is_target]

    def _require(self, name: str) -> Vertex:
        vertex = self.vertices.lookup(name)
        if vertex is None:
            raise UnknownVertex(name)
        return vertex

    # -- construction --

    def add_vertex(self, name: str, is_target: bool = False) -> Vertex:
        vertex = self.vertices.upsert(name, is_target)
        if is_target and self._default_target is None:
            self._default_target = name
        return vertex

    def add_dependency(self, from_target: str, to_dependency: str) -> None:
        """Add an edge from a target to one of its dependencies.

        Raises UnknownVertex if either end is missing and DuplicateEdge if the
        same ordered pair was already added; neither case modifies the graph.
        """
        source = self._require(from_target)
        dest = self._require(to_dependency)
        if source.depends_on(dest):
            raise DuplicateEdge(from_target, to_dependency)
        source.dependencies.append(dest)
        logger.debug("Added edge '%s' -> '%s'", from_target, to_dependency)

    def add_command(self, name: str, command: str) -> None:
        """Append a shell command to the named vertex."""
        self._require(name).commands.append(command)

    def reset_traversal_state(self) -> None:
        """Clear visited/processed/to_build on every vertex."""
        for vertex in self.vertices.all():
            vertex.reset()

    # -- parser boundary --

    def declare_target(self, name: str) -> Vertex:
        return self.add_vertex(name, is_target=True)

    def declare_dependency(self, target: str, dependency: str) -> None:
        """Reference `dependency` from `target`; duplicate edges are only logged."""
        self.add_vertex(dependency)
        try:
            self.add_dependency(target, dependency)
        except DuplicateEdge as exc:
            logger.warning("%s", exc)

    def declare_command(self, target: str, command: str) -> None:
        self.add_command(target, command)

    # -- building --

    def build(self, target: str | None = None, context: Context | None = None) -> BuildResult:
        """Bring `target` (or the default target) up to date."""
        from .traversal import BuildTraversal

        return BuildTraversal(self, context).run(target)

    def __contains__(self, name: object) -> bool:
        return name in self.vertices

    def __len__(self) -> int:
        return len(self.vertices)

    def __repr__(self) -> str:
        edges = sum(len(v.dependencies) for v in self.vertices.all())
        return f"DependencyGraph(vertices={len(self.vertices)}, edges={edges})"
