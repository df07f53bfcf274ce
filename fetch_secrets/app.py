"""Typer CLI entrypoint for fetch-secrets."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError
from rich import box
from rich.console import Console
from rich.table import Table

from .config import DEFAULT_PATTERNS_FILE, ScanSettings, load_patterns, load_settings, load_targets
from .engine import compile_patterns
from .errors import ConfigError
from .logging_conf import configure_logging
from .orchestrator import Orchestrator, ScanSummary

app = typer.Typer(
    help="Fetch URLs concurrently and scan the responses for leaked secrets.",
    no_args_is_help=True,
    rich_markup_mode=None,
)

err_console = Console(stderr=True, highlight=False)


def _build_settings(config_file: Optional[Path], overrides: dict[str, Any]) -> ScanSettings:
    payload: dict[str, Any] = load_settings(config_file) if config_file else {}
    payload.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return ScanSettings.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid settings: {exc}") from exc


def _render_startup(settings: ScanSettings, pattern_count: int, url_count: int) -> Table:
    table = Table(title="fetch-secrets", box=box.MINIMAL_DOUBLE_HEAD, show_header=False, pad_edge=False)
    table.add_column("setting", style="dim")
    table.add_column("value", style="cyan")
    table.add_row("threads", str(settings.threads))
    table.add_row("patterns", str(pattern_count))
    table.add_row("urls", str(url_count))
    table.add_row("format", settings.output_format.value)
    if settings.output_file:
        table.add_row("output", str(settings.output_file))
    return table


def _render_summary(summary: ScanSummary) -> Table:
    table = Table(title="Scan summary", box=box.SIMPLE_HEAD)
    table.add_column("metric", style="cyan")
    table.add_column("count", style="green", justify="right")
    for key, value in summary.as_dict().items():
        table.add_row(key, str(value))
    return table


@app.callback()
def main() -> None:
    """Secret scanner for lists of URLs."""


@app.command("scan", help="Fetch every URL in the list and report secrets found in the bodies.")
def scan(
    url_list: Path = typer.Option(..., "--list", "-l", help="File containing one URL per line."),
    patterns_file: Path = typer.Option(
        Path(DEFAULT_PATTERNS_FILE),
        "--patterns",
        "-p",
        envvar="FETCH_SECRETS_PATTERNS",
        help="JSON/YAML mapping of pattern name to regex.",
    ),
    threads: Optional[int] = typer.Option(None, "--threads", "-t", help="Concurrent workers (default 10)."),
    output_format: Optional[str] = typer.Option(
        None, "--format", "-f", help="Output format: text, json or csv (default text)."
    ),
    output_file: Optional[Path] = typer.Option(None, "--output", "-o", help="Also append results to this file."),
    colorless: bool = typer.Option(False, "--colorless", help="Disable colored output.", is_flag=True),
    silent: bool = typer.Option(
        False, "--silent", help="Hide status messages and HTTP status errors.", is_flag=True
    ),
    mask_visible: Optional[int] = typer.Option(
        None, "--mask", help="Mask secrets, keeping this many trailing characters visible."
    ),
    config_file: Optional[Path] = typer.Option(None, "--config", help="YAML/JSON settings file."),
    verbose: bool = typer.Option(False, "--verbose", help="Emit debug logs to stderr.", is_flag=True),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Write JSON logs to this file."),
) -> None:
    logger = configure_logging(verbose=verbose, log_file=log_file).bind(component="cli")
    try:
        settings = _build_settings(
            config_file,
            {
                "threads": threads,
                "output_format": output_format,
                "output_file": output_file,
                "colorless": colorless or None,
                "silent": silent or None,
                "mask_visible": mask_visible,
            },
        )
        targets = load_targets(url_list)
        sources = load_patterns(patterns_file)
    except ConfigError as exc:
        logger.error("config_error", error=str(exc))
        err_console.print(f"Error: {exc}", style="red", markup=False)
        raise typer.Exit(code=1)

    patterns = compile_patterns(sources, logger=logger)
    if not settings.silent:
        err_console.print(_render_startup(settings, len(patterns), len(targets)))

    orchestrator = Orchestrator.from_settings(settings, patterns)
    try:
        summary = orchestrator.run(targets)
    finally:
        orchestrator.close()
    if not settings.silent:
        err_console.print(_render_summary(summary))


def cli() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    cli()
