"""Click CLI: find (and optionally delete) files unreachable from router entry points."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from next_unused import __version__
from next_unused.errors import ConfigurationError
from next_unused.exporter import delete_files, write_report
from next_unused.models import AnalysisConfig, RouterType
from next_unused.pipeline import run_analysis

_ROUTER_CHOICES = [r.value for r in RouterType]
_CONFIG_CHOICES = ["tsconfig.json", "jsconfig.json"]


@click.group()
@click.version_option(version=__version__)
def cli():
    """next-unused: Find source files no route ever imports."""


@cli.command()
@click.argument("project_dir", type=click.Path(path_type=Path), default=".")
@click.option(
    "--router", "-r",
    type=click.Choice(_ROUTER_CHOICES),
    prompt="Which router are you using?",
    help="Next.js router type",
)
@click.option(
    "--src/--no-src",
    "use_src",
    default=False,
    prompt="Is your code inside an `src/` directory?",
    help="Router directory lives under src/",
)
@click.option(
    "--config", "-c", "config_file",
    type=click.Choice(_CONFIG_CHOICES),
    default="tsconfig.json",
    prompt="Which file holds your path aliases?",
    help="Manifest with compilerOptions.paths",
)
@click.option("--entry", "-e", "entries", multiple=True, type=click.Path(path_type=Path),
              help="Extra entry file, relative to PROJECT_DIR (repeatable)")
@click.option("--delete", "delete", is_flag=True, help="Delete unused files after confirmation")
@click.option("--yes", "-y", is_flag=True, help="Skip the delete confirmation")
@click.option("--dry-run", is_flag=True, help="List unused files without deleting")
@click.option("--report", "report_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Write a JSON report to this file")
@click.option("--workers", "-w", default=8, show_default=True, type=click.IntRange(min=1),
              help="Files analyzed in parallel")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging and progress output")
def scan(
    project_dir: Path,
    router: str,
    use_src: bool,
    config_file: str,
    entries: tuple[Path, ...],
    delete: bool,
    yes: bool,
    dry_run: bool,
    report_path: Path | None,
    workers: int,
    verbose: bool,
):
    """Report files under PROJECT_DIR that no entry point reaches."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = AnalysisConfig(
        project_root=project_dir.absolute(),
        router=RouterType(router),
        use_src=use_src,
        config_file=config_file,
        max_workers=workers,
    )

    def progress(stage: str, current: int, total: int):
        if total > 0:
            click.echo(f"  {stage}: {current}/{total}", err=True)

    try:
        result = run_analysis(
            config,
            progress=progress if verbose else None,
            extra_entries=entries,
        )
    except ConfigurationError as e:
        raise click.ClickException(str(e))

    if result.failures:
        click.echo(click.style(
            f"Warning: {len(result.failures)} file(s) could not be analyzed:", fg="yellow",
        ), err=True)
        for failure in result.failures:
            click.echo(f"  {failure.path} ({failure.kind}): {failure.message}", err=True)

    if report_path is not None:
        write_report(result, report_path)
        click.echo(f"Report written to {report_path}")

    if not result.unused:
        click.echo("No unused files found.")
        return

    click.echo(f"Found {len(result.unused)} unused files.")
    for path in result.unused:
        click.echo(str(path))

    if delete:
        if yes or click.confirm("Do you want to delete these files?", default=False):
            deleted = delete_files(result.unused)
            skipped = len(result.unused) - len(deleted)
            if skipped:
                click.echo(click.style(f"Could not delete {skipped} file(s).", fg="yellow"), err=True)
            click.echo("Deletion complete.")
        else:
            click.echo("Deletion cancelled.")
    elif dry_run:
        click.echo("Dry run complete: No files were deleted.")


def main():
    cli()


if __name__ == "__main__":
    main()
