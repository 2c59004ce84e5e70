"""HCL loading engine — parse .hcl build descriptions into a DependencyGraph."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import hcl2
from lark.exceptions import LarkError

from .graph import DependencyGraph

logger = logging.getLogger(__name__)

_TARGET_ATTRS = {"depends", "commands"}


def load(file: str | Path) -> dict[str, Any]:
    """Load and parse a single HCL file."""
    file = Path(file)
    text = file.read_text()
    try:
        return hcl2.loads(text)
    except LarkError as exc:
        raise ValueError(f"{file}: {exc}") from exc


def _unquote(value: str) -> str:
    # newer python-hcl2 releases keep the quotes around string literals
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def _as_list(name: str, key: str, value: Any) -> list[str]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"Target '{name}': '{key}' must be a string or list of strings")
    return [_unquote(v) for v in value]


def populate(graph: DependencyGraph, data: dict[str, Any]) -> DependencyGraph:
    """Declare every target block on the graph, in file order.

    HCL2 structure for target blocks:
        {"target": [{"app": {"depends": [...], "commands": [...]}}, ...]}
    """
    for block in data.get("target", []):
        for label, attrs in block.items():
            name = _unquote(label)
            logger.debug("Found target '%s'", name)
            attrs = {k: v for k, v in attrs.items() if not k.startswith("__")}
            unknown = set(attrs) - _TARGET_ATTRS
            if unknown:
                raise ValueError(f"Target '{name}' has unknown attribute(s): {sorted(unknown)}")

            graph.declare_target(name)
            for dep in _as_list(name, "depends", attrs.get("depends", [])):
                graph.declare_dependency(name, dep)
            for command in _as_list(name, "commands", attrs.get("commands", [])):
                graph.declare_command(name, command)
    return graph


def load_graph(file: str | Path) -> DependencyGraph:
    """Parse an HCL build description into a new graph."""
    return populate(DependencyGraph(), load(file))
