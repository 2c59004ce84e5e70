"""VertexStore — name-keyed, insertion-ordered collection of vertices."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any, overload

from .vertex import Vertex

logger = logging.getLogger(__name__)


class VertexStore(Mapping[str, Vertex]):
    """Holds every vertex of a graph keyed by its unique name."""

    def __init__(self) -> None:
        self._vertices: dict[str, Vertex] = {}

    def upsert(self, name: str, is_target: bool = False) -> Vertex:
        """Return the vertex for `name`, creating it on first reference.

        Target status is monotonic: a re-declaration may promote an existing
        vertex to a target but never demotes it.
        """
        vertex = self._vertices.get(name)
        if vertex is None:
            vertex = Vertex(name=name, is_target=is_target)
            self._vertices[name] = vertex
            logger.debug("Added vertex '%s' (target=%s)", name, is_target)
        elif is_target and not vertex.is_target:
            logger.debug("Promoting vertex '%s' to target", name)
            vertex.is_target = True
        return vertex

    def lookup(self, name: str) -> Vertex | None:
        """Return the vertex with exactly this name, or None."""
        return self._vertices.get(name)

    def all(self) -> list[Vertex]:
        """Return all vertices in order of first reference."""
        return list(self._vertices.values())

    def __getitem__(self, name: str) -> Vertex:
        return self._vertices[name]

    def __contains__(self, name: object) -> bool:
        return name in self._vertices

    def __iter__(self) -> Iterator[str]:
        return iter(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    @overload
    def get(self, name: str) -> Vertex | None: ...
    @overload
    def get(self, name: str, default: Vertex) -> Vertex: ...
    @overload
    def get(self, name: str, default: None) -> Vertex | None: ...
    def get(self, name: str, default: Any = None) -> Vertex | None:
        return self._vertices.get(name, default)

    def __repr__(self) -> str:
        targets = sum(1 for v in self._vertices.values() if v.is_target)
        return f"VertexStore(vertices={len(self._vertices)}, targets={targets})"
