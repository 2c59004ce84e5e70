"""Error taxonomy for graph construction and builds."""

from __future__ import annotations


class BuildError(Exception):
    """Base class for all minimake errors."""

    def __init__(self, message: str, *, name: str | None = None) -> None:
        super().__init__(message)
        self.name = name


class UnknownVertex(BuildError):
    """An edge or command references a vertex that is not in the graph."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown vertex: '{name}'", name=name)


class DuplicateEdge(BuildError):
    """A dependency was declared more than once on the same target."""

    def __init__(self, target: str, dependency: str) -> None:
        super().__init__(f"Edge already exists: '{target}' -> '{dependency}'", name=target)
        self.dependency = dependency


class MissingPrerequisite(BuildError):
    """A dependency has neither a file nor a rule to build it."""

    def __init__(self, name: str) -> None:
        super().__init__(f"File does not exist: '{name}'", name=name)


class DependencyCycle(BuildError):
    """A vertex was re-entered before its own post-order step completed."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Dependency cycle found: '{name}'", name=name)


class CommandFailure(BuildError):
    """A build command exited non-zero or could not be launched."""

    def __init__(self, command: str, returncode: int, *, name: str | None = None) -> None:
        super().__init__(f"Command failed ({returncode}): {command}", name=name)
        self.command = command
        self.returncode = returncode


class UnknownTarget(BuildError):
    """The requested starting target is not in the graph."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Target '{name}' does not exist", name=name)


class RuleSyntaxError(BuildError, ValueError):
    """A build description could not be parsed."""

    def __init__(
        self, message: str, *, lineno: int | None = None, source: str | None = None
    ) -> None:
        where = source or "<string>"
        if lineno is not None:
            where = f"{where}:{lineno}"
        super().__init__(f"{where}: {message}")
        self.lineno = lineno
        self.source = source
