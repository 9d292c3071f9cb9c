"""closure-complete CLI - index Closure declaration files and list import suggestions."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from closure_complete.config import IndexConfig, ScanSummary
from closure_complete.engine import ImportEngine
from closure_complete.output import write_completions


@click.group()
def cli() -> None:
    """closure-complete - Auto-import suggestions for goog: namespaces."""
    pass


def _configure_logging(config: IndexConfig) -> None:
    """Route log records to stderr through Rich at a level set by the CLI flags."""
    from rich.console import Console
    from rich.logging import RichHandler

    if config.quiet:
        level = logging.ERROR
    elif config.verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _run_with_progress(engine: ImportEngine, root: str) -> ScanSummary:
    """Scan the workspace with Rich progress display."""
    from rich.console import Console
    from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
    from rich.table import Table

    console = Console()

    with Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task("Scanning declaration files...", total=None)
        summary = engine.scan_workspace(root)

    table = Table(title=f"Closure namespaces: {Path(root).name}", show_edge=False)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Files scanned", str(summary.files_scanned))
    table.add_row("Files indexed", str(summary.files_indexed))
    if summary.files_failed:
        table.add_row("Files failed", f"[red]{summary.files_failed}[/red]")
    table.add_row("Namespaces", str(summary.namespaces))
    table.add_row("Duration", f"{summary.duration_ms:.1f}ms")

    console.print(table)
    return summary


def _build_engine(
    path: str, exclude: tuple[str, ...], snapshot: bool, verbose: bool, quiet: bool,
) -> tuple[ImportEngine, str]:
    root = str(Path(path).resolve())
    config = IndexConfig(
        workspace_root=root,
        exclude_patterns=list(exclude),
        write_snapshot=snapshot,
        verbose=verbose,
        quiet=quiet,
    )
    _configure_logging(config)
    return ImportEngine(config), root


@cli.command("scan")
@click.argument("path", type=click.Path(exists=True, file_okay=False))
@click.option("-o", "--output", "output_path", default=None, help="Write completion items as JSON")
@click.option("--exclude", multiple=True, help="Additional directory name patterns to skip")
@click.option("--snapshot/--no-snapshot", default=True, help="Write the namespace cache file into the workspace")
@click.option("--verbose", is_flag=True, help="Log every scanned file")
@click.option("--quiet", is_flag=True, help="Suppress all output except errors")
def scan_cmd(
    path: str,
    output_path: str | None,
    exclude: tuple[str, ...],
    snapshot: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """Index the declaration files of a workspace."""
    engine, root = _build_engine(path, exclude, snapshot, verbose, quiet)

    if engine.config.quiet:
        engine.scan_workspace(root)
    else:
        _run_with_progress(engine, root)

    if output_path:
        write_completions(engine.get_completions(), output_path)
        if not engine.config.quiet:
            from rich.console import Console
            Console().print(f"[green]Completions written to:[/green] {output_path}")


@cli.command("complete")
@click.argument("path", type=click.Path(exists=True, file_okay=False))
@click.option("-p", "--prefix", default="", help="Only show suggestions whose label starts with this")
@click.option("-n", "--limit", default=0, type=int, help="Maximum suggestions to print (0 = all)")
@click.option("--exclude", multiple=True, help="Additional directory name patterns to skip")
@click.option("--snapshot/--no-snapshot", default=False, help="Write the namespace cache file into the workspace")
def complete_cmd(
    path: str,
    prefix: str,
    limit: int,
    exclude: tuple[str, ...],
    snapshot: bool,
) -> None:
    """Print the import statements offered for a workspace."""
    engine, root = _build_engine(path, exclude, snapshot, verbose=False, quiet=True)
    engine.scan_workspace(root)

    items = sorted(
        (item for item in engine.get_completions() if item.label.startswith(prefix)),
        key=lambda item: (item.label, item.detail),
    )
    if limit > 0:
        items = items[:limit]

    for item in items:
        click.echo(item.additional_text_edits[0].new_text, nl=False)


if __name__ == "__main__":
    cli()
