import json
import logging
from pathlib import Path

import typer
from rich import box
from rich.markup import escape
from rich.table import Table

from . import __version__
from . import logger as log
from .core.config import Config, get_config, set_config
from .core.exceptions import ConfigError
from .core.models import ConversionReport, FragmentReport

app = typer.Typer(add_completion=False, help="Check that paths convert cleanly to utf-8 text.")
logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"pathstr version {__version__}")
        raise typer.Exit()


def _config_error(e: ConfigError) -> typer.Exit:
    log.error(f"Configuration error: {escape(str(e))}")
    return typer.Exit(code=2)


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable colored output", envvar="NO_COLOR"
    ),
    config_path: Path | None = typer.Option(
        None, "--config", help="Path to config.toml (defaults to ./config.toml)"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    try:
        config = Config.load(config_path).merge_cli_args(no_color=no_color or None)
    except ConfigError as e:
        log.init_console(no_color=no_color)
        raise _config_error(e) from e
    set_config(config)
    log.init_console(no_color=config.no_color)
    log.setup_logging(verbose=verbose)
    logger.debug("Loaded config: %s", config)


def _effective_config(output_format: str | None, fail_fast: bool | None = None) -> Config:
    try:
        return get_config().merge_cli_args(output_format=output_format, fail_fast=fail_fast)
    except ConfigError as e:
        raise _config_error(e) from e


def _emit_json(payload: object) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command()
def check(
    paths: list[str] = typer.Argument(..., help="Paths to convert"),
    output_format: str | None = typer.Option(
        None, "--format", "-f", help="Output format: table or json"
    ),
    fail_fast: bool | None = typer.Option(
        None, "--fail-fast/--no-fail-fast", help="Stop at the first path that fails"
    ),
) -> None:
    """Convert each PATH to text and report the ones that are not valid utf-8."""
    config = _effective_config(output_format, fail_fast)

    reports: list[ConversionReport] = []
    for path in paths:
        report = ConversionReport.from_path(path)
        logger.debug("Checked %s: ok=%s", report.path, report.ok)
        reports.append(report)
        if config.fail_fast and not report.ok:
            break

    if config.output_format == "json":
        _emit_json([r.model_dump() for r in reports])
    elif config.fail_fast and reports and not reports[-1].ok:
        log.error(escape(reports[-1].error or ""))
    else:
        table = Table(box=box.SIMPLE)
        table.add_column("Path")
        table.add_column("Status")
        table.add_column("Text / Error")
        for r in reports:
            if r.ok:
                table.add_row(escape(r.path), "[green]ok[/green]", escape(r.text or ""))
            else:
                table.add_row(escape(r.path), "[red]invalid[/red]", escape(r.error or ""))
        log.get_console().print(table)

    failed = sum(1 for r in reports if not r.ok)
    if failed:
        if config.output_format != "json":
            log.warning(f"{failed} of {len(reports)} checked path(s) are not valid utf-8")
            skipped = len(paths) - len(reports)
            if skipped:
                log.dim(f"Stopped at the first failure; {skipped} path(s) not checked")
        raise typer.Exit(code=1)
    if config.output_format != "json":
        log.success(f"All {len(paths)} path(s) are valid utf-8")


@app.command()
def parts(
    path: str = typer.Argument(..., help="Path to split"),
    output_format: str | None = typer.Option(
        None, "--format", "-f", help="Output format: table or json"
    ),
) -> None:
    """Show the parent, file name, file stem and extension of PATH as text."""
    config = _effective_config(output_format)

    report = FragmentReport.from_path(path)

    if config.output_format == "json":
        _emit_json(report.model_dump())
    else:
        log.info(f"Path: {escape(report.path)}")
        table = Table(box=box.SIMPLE)
        table.add_column("Fragment")
        table.add_column("Value")
        for name, value in report.items():
            if value.status == "ok":
                cell = escape(repr(value.text))
            elif value.status == "absent":
                cell = "[dim]absent[/dim]"
            else:
                cell = f"[red]{escape(value.error or '')}[/red]"
            table.add_row(name, cell)
        log.get_console().print(table)

    if not report.ok:
        raise typer.Exit(code=1)

