"""Rule-file loader — parse make-style build descriptions into a DependencyGraph.

The format is line oriented:

    app : main.o util.o
    	cc -o app main.o util.o

A rule line names one target, a colon, and its dependencies. Lines starting
with a TAB are commands for the most recent rule. Blank lines and lines
starting with '#' are ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from .errors import RuleSyntaxError
from .graph import DependencyGraph

logger = logging.getLogger(__name__)

DEFAULT_FILE = "myMakefile"


@dataclass
class Rule:
    """One parsed rule with the commands that follow it."""

    target: str
    dependencies: list[str] = field(default_factory=list)
    commands: list[str] = field(default_factory=list)
    lineno: int = 0


def _parse_rule(line: str, lineno: int, source: str | None) -> Rule:
    head, sep, tail = line.partition(":")
    if ":" in tail:
        raise RuleSyntaxError(
            f"multiple colons in line: {line.strip()!r}", lineno=lineno, source=source
        )
    names = head.split()
    if len(names) != 1:
        raise RuleSyntaxError(f"illegal target: {line.strip()!r}", lineno=lineno, source=source)
    deps = tail.split() if sep else []
    return Rule(target=names[0], dependencies=deps, lineno=lineno)


def parse(text: str, *, source: str | None = None) -> Iterator[Rule]:
    """Yield rules in file order; each is complete once the next one starts."""
    current: Rule | None = None
    for lineno, raw in enumerate(text.splitlines(), start=1):
        if not raw.strip():
            continue

        if raw.startswith("\t"):
            if current is None:
                raise RuleSyntaxError(
                    "command precedes the first target", lineno=lineno, source=source
                )
            current.commands.append(raw[1:])
            continue

        if raw.lstrip().startswith("#"):
            continue

        if current is not None:
            yield current
        current = _parse_rule(raw, lineno, source)
        logger.debug("Parsed rule '%s' at line %d", current.target, lineno)

    if current is not None:
        yield current


def populate(graph: DependencyGraph, rules: Iterator[Rule]) -> DependencyGraph:
    """Declare each rule's target, dependencies and commands on the graph."""
    for rule in rules:
        graph.declare_target(rule.target)
        for dep in rule.dependencies:
            graph.declare_dependency(rule.target, dep)
        for command in rule.commands:
            graph.declare_command(rule.target, command)
    return graph


def loads(text: str, *, source: str | None = None) -> DependencyGraph:
    """Build a graph from rule-file text."""
    return populate(DependencyGraph(), parse(text, source=source))


def load(path: str | Path) -> DependencyGraph:
    """Build a graph from a rule file on disk."""
    file = Path(path)
    logger.debug("Loading rules from %s", file)
    return loads(file.read_text(), source=str(file))
