"""reprcheck command line interface."""

from __future__ import annotations

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from reprcheck.application.lints import all_lint_pass_types, find_lint_pass
from reprcheck.application.reporters import (
    ConsoleConfig,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from reprcheck.application.services import ReprChecker
from reprcheck.domain.exceptions import ReprCheckError
from reprcheck.domain.model.configuration import LintConfig
from reprcheck.domain.model.enums import Applicability
from reprcheck.domain.ports.reporter import ReporterProtocol
from reprcheck.infrastructure.adapters import TreeSitterRustParser
from reprcheck.infrastructure.config import find_config, load_config, parse_level

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="reprcheck",
    help="Lint Rust structs ending in a zero-sized array without a repr attribute.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
err_console = Console(stderr=True)


class OutputFormat(str, Enum):
    console = "console"
    text = "text"
    json = "json"


def _make_reporter(output_format: OutputFormat) -> ReporterProtocol:
    if output_format is OutputFormat.json:
        return JSONReporter(sys.stdout)
    if output_format is OutputFormat.text:
        return PlainTextReporter(sys.stdout)
    return ConsoleReporter(ConsoleConfig(force_terminal=sys.stdout.isatty()), sys.stdout)


def _resolve_config(config_file: Path | None, paths: list[Path], level: str | None) -> LintConfig:
    if config_file is None and paths:
        config_file = find_config(paths[0].resolve())

    config = load_config(config_file) if config_file is not None else LintConfig()
    if config_file is not None:
        logger.info("using configuration %s", config_file)

    if level is not None:
        config = LintConfig(level=parse_level(level), directive=config.directive, exclude=config.exclude)
    return config


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@app.command("check")
def check(
    paths: Annotated[list[Path], typer.Argument(help="Rust files or directories to lint.")],
    output_format: Annotated[
        OutputFormat, typer.Option("--format", "-f", help="Output format.")
    ] = OutputFormat.console,
    level: Annotated[
        str | None, typer.Option(help="Override the lint level (allow, warn, deny, forbid).")
    ] = None,
    config_file: Annotated[
        Path | None, typer.Option("--config", help="reprcheck.toml or pyproject.toml to read.")
    ] = None,
    fix: Annotated[bool, typer.Option(help="Rewrite files with the suggested edits.")] = False,
    allow_maybe_incorrect: Annotated[
        bool, typer.Option(help="With --fix, also apply edits that may be incorrect.")
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log progress to stderr.")] = False,
) -> None:
    """Lint Rust sources and report structs that need a repr attribute."""
    _configure_logging(verbose)
    try:
        config = _resolve_config(config_file, paths, level)
        checker = ReprChecker.from_config(TreeSitterRustParser(), config, reporter=_make_reporter(output_format))

        applicability = {Applicability.MACHINE_APPLICABLE}
        if allow_maybe_incorrect:
            applicability.add(Applicability.MAYBE_INCORRECT)

        result = checker.check_paths(paths, fix=fix, fix_applicability=frozenset(applicability))
    except (ReprCheckError, FileNotFoundError) as e:
        err_console.print(f"[bold red]error[/bold red]: {e}")
        raise typer.Exit(code=2) from e

    if fix and not allow_maybe_incorrect and result.diagnostics and not result.fixed_files:
        err_console.print("[dim]no edit applied: suggestions may be incorrect, use --allow-maybe-incorrect[/dim]")

    if not result.passed:
        raise typer.Exit(code=1)


@app.command("explain")
def explain(
    lint: Annotated[str | None, typer.Argument(help="Lint name; lists all lints when omitted.")] = None,
) -> None:
    """Explain a lint."""
    console = Console()
    if lint is None:
        for lint_pass in all_lint_pass_types():
            console.print(
                f"[cyan]clippy::{lint_pass.name}[/cyan] "
                f"({lint_pass.group.value}, default {lint_pass.default_level.value})"
            )
        return

    lint_pass = find_lint_pass(lint)
    if lint_pass is None:
        err_console.print(f"[bold red]error[/bold red]: unknown lint {lint!r}")
        raise typer.Exit(code=2)

    console.print(f"[bold cyan]clippy::{lint_pass.name}[/bold cyan]")
    console.print(f"group: {lint_pass.group.value}, default level: {lint_pass.default_level.value}")
    console.print()
    console.print(lint_pass.description)


def main() -> None:
    app()
