"""Command line entrypoint: minimake [-f FILE] [TARGET]."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from . import hcl, rules
from .context import Context
from .errors import BuildError
from .graph import DependencyGraph
from .traversal import Outcome

logger = logging.getLogger(__name__)

app = typer.Typer(help="Rebuild stale targets in dependency order.", add_completion=False)


def load_graph(path: Path) -> DependencyGraph:
    """Load a build description, choosing the front end by file suffix."""
    if path.suffix == ".hcl":
        return hcl.load_graph(path)
    return rules.load(path)


@app.command()
def main(
    target: str | None = typer.Argument(None, help="Target to build (default: first target)"),
    file: Path = typer.Option(Path(rules.DEFAULT_FILE), "-f", "--file", help="Rule file"),
    directory: Path | None = typer.Option(None, "-C", "--directory", help="Run in this directory"),
    dry_run: bool = typer.Option(False, "-n", "--dry-run", help="Print commands, do not run them"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Build TARGET from the rules in FILE."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if directory is not None and not file.is_absolute():
        file = directory / file

    try:
        graph = load_graph(file)
    except OSError as exc:
        typer.echo(f"{file}: {exc.strerror or exc}", err=True)
        raise typer.Exit(code=1) from None
    except (ValueError, BuildError) as exc:
        typer.echo(f"Error! {exc}", err=True)
        raise typer.Exit(code=1) from None

    logger.debug("Loaded %r from %s", graph, file)
    ctx = Context(workdir=directory, dry_run=dry_run)
    result = graph.build(target, ctx)

    if result.outcome is Outcome.FAILED:
        typer.echo(f"Error! {result.error}", err=True)
        raise typer.Exit(code=1)
    if result.outcome is Outcome.UP_TO_DATE:
        typer.echo(f"{result.target} is up to date.")
