"""
sanitize — CLI entrypoint.

Usage:
    sanitize --system linux
    sanitize -s solaris -p gcc4 --prepend-path ~/bin
    sanitize -s solaris -p sundev --dry-run --json
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import NoReturn

import click

from sanitize import __version__
from sanitize.core.config.loader import ConfigError
from sanitize.core.errors import SanitizeError, UsageError
from sanitize.core.observability.logging_config import setup_logging_from_env


class SanitizeCommand(click.Command):
    """Command whose usage errors exit with status 1 instead of click's 2."""

    def make_context(self, info_name, args, parent=None, **extra):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            e.exit_code = 1
            raise


@click.command(
    cls=SanitizeCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__version__, "--version", "-v", prog_name="sanitize")
@click.option(
    "--system",
    "-s",
    default=None,
    metavar="<linux|solaris>",
    help="Target operating system (required unless set in the config file).",
)
@click.option(
    "--profile",
    "-p",
    "profiles",
    multiple=True,
    metavar="NAME",
    help="Toolchain profile to layer in (ghc, sunstudio, gcc3, gcc4, sundev). Repeatable.",
)
@click.option(
    "--prepend-path",
    "prepend_paths",
    multiple=True,
    metavar="DIR",
    help="Directory to put at the front of PATH. Repeatable.",
)
@click.option(
    "--append-path",
    "append_paths",
    multiple=True,
    metavar="DIR",
    help="Directory to put at the end of PATH. Repeatable.",
)
@click.option("--strict-profiles", is_flag=True, help="Fail on unknown profiles instead of skipping them.")
@click.option("--shell", "shell_path", default=None, metavar="PATH", help="Shell to run (default: $SHELL).")
@click.option(
    "--fork/--no-fork",
    default=None,
    help="Run the shell as a child and wait for it, leaving this environment untouched.",
)
@click.option("--dry-run", is_flag=True, help="Print the sanitized environment instead of starting a shell.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Print the dry run as JSON (implies --dry-run).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to .sanitize.yml (default: $SANITIZE_CONFIG or auto-detect).",
)
@click.option("--verbose", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.pass_context
def cli(
    ctx: click.Context,
    system: str | None,
    profiles: tuple[str, ...],
    prepend_paths: tuple[str, ...],
    append_paths: tuple[str, ...],
    strict_profiles: bool,
    shell_path: str | None,
    fork: bool | None,
    dry_run: bool,
    as_json: bool,
    config_path: str | None,
    verbose: bool,
    quiet: bool,
    debug: bool,
) -> None:
    """Start a shell with a sanitized environment.

    PATH is rebuilt from the target system's defaults plus any profiles
    and explicit entries, LD_LIBRARY_PATH is removed, and SANITIZED=1 is
    set so the tool refuses to nest.
    """
    setup_logging_from_env(debug=debug, verbose=verbose, quiet=quiet)

    from sanitize.adapters.shell.launcher import check_guard, launch
    from sanitize.core.use_cases.prepare import prepare

    try:
        check_guard()
        plan = prepare(
            system,
            profiles,
            prepend_paths,
            append_paths,
            strict_profiles=strict_profiles,
            shell=shell_path,
            fork=fork,
            config_path=Path(config_path) if config_path else None,
        )
    except UsageError as e:
        _usage_error(ctx, str(e))
    except (SanitizeError, ConfigError) as e:
        _fail(e)

    if dry_run or as_json:
        if as_json:
            click.echo(json.dumps(plan.to_dict(), indent=2))
        else:
            _print_plan(plan)
        return

    try:
        code = launch(plan.shell, plan.overrides, fork=plan.fork, argv=plan.argv)
    except SanitizeError as e:
        _fail(e)

    sys.exit(code)


def _print_plan(plan) -> None:
    """Human-readable dry run output."""
    click.secho(f"\n🧼 Sanitized environment for {plan.system}", fg="cyan", bold=True)
    if plan.profiles:
        click.echo(f"   Profiles: {', '.join(plan.profiles)}")
    if plan.config_path:
        click.echo(f"   Config:   {plan.config_path}")
    click.echo(f"   Shell:    {' '.join(plan.argv)}")
    click.echo()

    click.secho("   PATH:", fg="white", bold=True)
    for entry in plan.path:
        click.echo(f"     • {entry}")
    click.echo()

    click.secho("   Set:", fg="white", bold=True)
    for name, value in plan.overrides.variables.items():
        if name == "PATH":
            continue
        click.echo(f"     {name}={value}")
    click.echo()

    click.secho("   Unset:", fg="white", bold=True)
    for name in plan.overrides.removed:
        click.echo(f"     {name}")
    click.echo()


def _usage_error(ctx: click.Context, message: str) -> NoReturn:
    err = click.UsageError(message, ctx)
    err.exit_code = 1
    raise err


def _fail(err: SanitizeError | ConfigError) -> NoReturn:
    click.secho(f"Error: {err}", fg="red", err=True)
    sys.exit(err.exit_code)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
