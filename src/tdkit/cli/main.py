"""CLI entry point for tdkit."""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from tdkit import __version__, bootstrap
from tdkit.config import RunSettings, find_default_settings, load_settings
from tdkit.core.discovery import load_suites
from tdkit.core.runner import TestRunner
from tdkit.reporting import create_reporter, registry


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class CliState:
    """Holds global CLI state."""

    def __init__(self, verbose: bool) -> None:
        self.verbose = verbose


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"tdkit {__version__}")
    raise click.exceptions.Exit()


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", is_flag=True, help="Enable verbose logging output.")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the tdkit version and exit.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Top level CLI group for tdkit."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if os.getcwd() not in sys.path:
        sys.path.insert(0, os.getcwd())
    bootstrap()
    ctx.obj = CliState(verbose=verbose)


@cli.command()
@click.argument("targets", nargs=-1, required=True)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML settings file (defaults to ./tdkit.yaml when present).",
)
@click.option("--cases", "case_filters", type=str, help="Comma-separated case name filters (supports globs).")
@click.option("--tags", "tag_filters", type=str, help="Comma-separated tags to include.")
@click.option("--timeout", type=float, help="Default wait timeout in seconds.")
@click.option("--report", "report_format", type=str, help="Reporter name (terminal, json, log or a plugin).")
@click.option("--report-path", type=str, help="When --report json, write to this path.")
@click.option("--no-color", is_flag=True, help="Disable ANSI colors in terminal output.")
@click.pass_obj
def run(
    state: CliState,
    targets: Tuple[str, ...],
    config_path: Optional[str],
    case_filters: Optional[str],
    tag_filters: Optional[str],
    timeout: Optional[float],
    report_format: Optional[str],
    report_path: Optional[str],
    no_color: bool,
) -> None:
    """Run the suites named by TARGETS (module:attr import paths)."""

    try:
        settings = _load_settings(config_path).merged(
            timeout=timeout,
            cases=_split_csv(case_filters),
            tags=_split_csv(tag_filters),
            report_format=report_format,
            report_path=report_path,
            color=False if no_color else None,
        )
        if settings.report.format not in registry:
            known = ", ".join(sorted(registry.names()))
            raise click.BadParameter(f"unknown reporter '{settings.report.format}' (known: {known})")
        suite = load_suites(targets, timeout=settings.timeout, poll_interval=settings.poll_interval)
        suite = suite.select(settings.cases, settings.tags)
        if not len(suite):
            click.echo("No cases matched the provided filters.")
            raise click.exceptions.Exit(1)
        reporter = create_reporter(
            settings.report.format,
            path=settings.report.path,
            color=settings.report.color,
        )
        result = TestRunner(reporter=reporter).run(suite)
    except (click.ClickException, click.exceptions.Exit):
        raise
    except Exception as exc:  # pragma: no cover - CLI error translation
        raise click.ClickException(str(exc)) from exc
    raise click.exceptions.Exit(0 if result.succeeded else 1)


@cli.command(name="list")
@click.argument("targets", nargs=-1, required=True)
@click.option("--cases", "case_filters", type=str, help="Comma-separated case name filters (supports globs).")
@click.option("--tags", "tag_filters", type=str, help="Comma-separated tags to include.")
def list_cases(targets: Tuple[str, ...], case_filters: Optional[str], tag_filters: Optional[str]) -> None:
    """List the cases of TARGETS without running them."""

    try:
        suite = load_suites(targets).select(_split_csv(case_filters), _split_csv(tag_filters))
    except Exception as exc:  # pragma: no cover - CLI error translation
        raise click.ClickException(str(exc)) from exc
    for name in suite.names():
        click.echo(name)


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry point for console_scripts shim."""

    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="tdkit", standalone_mode=True)
    except click.ClickException as err:  # pragma: no cover - click handles display
        err.show()
        return err.exit_code
    except SystemExit as exc:  # click may raise exit code
        return int(exc.code or 0)
    return 0


def _load_settings(config_path: Optional[str]) -> RunSettings:
    path = Path(config_path) if config_path else find_default_settings()
    if path is None:
        return RunSettings()
    return load_settings(str(path))


def _split_csv(value: Optional[str]) -> Tuple[str, ...]:
    if not value:
        return tuple()
    parts = [part.strip() for part in value.split(",") if part.strip()]
    return tuple(parts)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
