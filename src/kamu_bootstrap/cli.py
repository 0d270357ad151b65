"""Workspace bootstrap entrypoint."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from .config import get_settings, load_plan
from .errors import BootstrapError
from .logging_utils import LOG_LEVELS, setup_logging
from .runner import CommandRunner, DryRunRunner, SubprocessRunner
from .sequencer import BootstrapSequencer
from .workspace import Workspace

app = typer.Typer(help="Bootstrap the Web3 trading demo workspace with kamu")

logger = logging.getLogger(__name__)


@app.command("bootstrap")
def bootstrap(
    workspace: Optional[Path] = typer.Option(
        None,
        "--workspace",
        "-w",
        file_okay=False,
        help="Workspace root; defaults to $KAMU_WORKSPACE or the current directory.",
    ),
    kamu_bin: Optional[str] = typer.Option(None, "--kamu-bin", help="kamu executable; defaults to $KAMU_BIN."),
    plan: Optional[Path] = typer.Option(
        None,
        "--plan",
        "-p",
        dir_okay=False,
        help="YAML plan overriding the built-in demo datasets.",
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the commands without running them."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level."),
    log_format: Optional[str] = typer.Option(None, "--log-format", help="plain or json."),
) -> None:
    try:
        settings = get_settings()
    except ValidationError as exc:
        typer.echo(f"Invalid environment settings: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    fmt = (log_format or settings.log_format).lower()
    if fmt not in ("plain", "json"):
        raise typer.BadParameter("must be 'plain' or 'json'", param_hint="--log-format")
    level = (log_level or settings.log_level).upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(f"must be one of {', '.join(LOG_LEVELS)}", param_hint="--log-level")
    setup_logging(level, fmt)

    root = workspace if workspace is not None else settings.kamu_workspace
    executable = kamu_bin or settings.kamu_bin
    target = Workspace(root=root)

    runner: CommandRunner
    if dry_run:
        runner = DryRunRunner(executable=executable)
    else:
        runner = SubprocessRunner(executable=executable)

    try:
        sequencer = BootstrapSequencer(
            target,
            runner,
            plan=load_plan(plan),
            reset_workspace=not dry_run,
        )
        if dry_run:
            typer.echo(f"rm -rf {target.metadata_path}")
        sequencer.run()
    except BootstrapError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=exc.exit_code) from exc


def main() -> None:
    app()


if __name__ == "__main__":
    main()
