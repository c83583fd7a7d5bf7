"""
Shell launcher — apply the overrides and become the shell.

Shell flavor is taken from the basename of the shell path.  Each known
flavor gets the flags that stop it from sourcing the user's startup
files, which would otherwise put back everything we just removed.

Two modes:
    exec: the current process turns into the shell (default).
    fork: a child execs the shell; the parent waits, leaving the
          invoking environment untouched, and reports the exit code.
"""

from __future__ import annotations

import logging
import os
import signal
import sys
from collections.abc import Mapping, MutableMapping
from enum import Enum
from typing import NoReturn

import click

from sanitize.core.errors import ExecFailure, GuardViolation
from sanitize.core.models.environment import EnvironmentOverrides
from sanitize.core.observability.logging_config import flush_logging

logger = logging.getLogger(__name__)

DEFAULT_SHELL = "/bin/sh"

# Marker variable set by a previous run
GUARD_VARIABLE = "SANITIZED"

# Keyboard signals the waiting parent leaves to the interactive shell
_PARENT_IGNORED_SIGNALS = (signal.SIGINT, signal.SIGQUIT)


class ShellFlavor(str, Enum):
    BASH = "bash"
    ZSH = "zsh"
    UNKNOWN = "unknown"


_NO_RC_FLAGS: dict[ShellFlavor, tuple[str, ...]] = {
    ShellFlavor.BASH: ("--noprofile", "--norc"),
    ShellFlavor.ZSH: ("-f",),
    ShellFlavor.UNKNOWN: (),
}


def detect_flavor(shell_path: str) -> ShellFlavor:
    """Classify a shell by its executable name."""
    name = os.path.basename(shell_path.rstrip("/"))
    if name.endswith("bash"):
        return ShellFlavor.BASH
    if name.endswith("zsh"):
        return ShellFlavor.ZSH
    return ShellFlavor.UNKNOWN


def resolve_shell(explicit: str | None = None, environ: Mapping[str, str] | None = None) -> str:
    """Pick the shell to run: explicit choice, then $SHELL, then /bin/sh."""
    if explicit:
        return explicit
    environ = os.environ if environ is None else environ
    shell = environ.get("SHELL")
    if not shell:
        logger.warning("SHELL is not set, falling back to %s", DEFAULT_SHELL)
        return DEFAULT_SHELL
    return shell


def shell_command(shell_path: str) -> list[str]:
    """Build the argv used to start ``shell_path`` without rc files."""
    flavor = detect_flavor(shell_path)
    if flavor == ShellFlavor.UNKNOWN:
        logger.warning("Unknown shell type found, blindly executing %s", shell_path)
    return [shell_path, *_NO_RC_FLAGS[flavor]]


def is_sanitized(environ: Mapping[str, str]) -> bool:
    return environ.get(GUARD_VARIABLE) == "1"


def check_guard(environ: Mapping[str, str] | None = None) -> None:
    """Raise GuardViolation if we are already inside a sanitized shell."""
    environ = os.environ if environ is None else environ
    if is_sanitized(environ):
        raise GuardViolation(
            f"Environment is already sanitized ({GUARD_VARIABLE}=1), "
            "refusing to start a nested shell."
        )


def exec_shell(
    shell_path: str,
    overrides: EnvironmentOverrides,
    environ: MutableMapping[str, str],
    argv: list[str] | None = None,
) -> NoReturn:
    """Apply ``overrides`` to ``environ`` and replace this process with the shell.

    Raises:
        ExecFailure: If the shell could not be executed.
    """
    argv = argv or shell_command(shell_path)
    overrides.apply(environ)

    click.echo(f'Entering shell "{shell_path}" with sanitized environment.')
    logger.debug("exec %s", argv)
    flush_logging()
    sys.stdout.flush()
    sys.stderr.flush()

    try:
        os.execve(shell_path, argv, dict(environ))
    except OSError as e:
        raise ExecFailure(shell_path, e) from e
    # execve only comes back by raising
    raise AssertionError("unreachable")


def launch(
    shell_path: str,
    overrides: EnvironmentOverrides,
    *,
    environ: MutableMapping[str, str] | None = None,
    fork: bool = False,
    argv: list[str] | None = None,
) -> int:
    """Start ``shell_path`` inside the sanitized environment.

    Without ``fork`` this never returns on success.  With ``fork`` the
    parent returns the shell's exit code once it terminates.  ``argv``
    defaults to ``shell_command(shell_path)``.

    Raises:
        GuardViolation: If ``environ`` is already sanitized.
        ExecFailure: If exec fails in the current process (non-fork mode).
    """
    environ = os.environ if environ is None else environ
    check_guard(environ)

    if not fork:
        exec_shell(shell_path, overrides, environ, argv)

    # Ignored before fork so a Ctrl-C typed at the child cannot kill the parent
    saved = _set_handlers(signal.SIG_IGN)
    try:
        pid = os.fork()
        if pid == 0:
            _set_handlers(signal.SIG_DFL)
            code = 1
            try:
                exec_shell(shell_path, overrides, environ, argv)
            except ExecFailure as e:
                click.secho(f"Error: {e}", fg="red", err=True)
                code = e.exit_code
            finally:
                os._exit(code)

        logger.debug("Waiting for shell pid %d", pid)
        _, status = os.waitpid(pid, 0)
    finally:
        for signum, handler in saved.items():
            signal.signal(signum, handler)

    code = _exit_code(status)
    click.echo("Left sanitized environment.")
    return code


def _exit_code(status: int) -> int:
    """Turn a wait status into a shell-style exit code."""
    code = os.waitstatus_to_exitcode(status)
    if code < 0:  # killed by signal
        return 128 - code
    return code


def _set_handlers(handler) -> dict[int, object]:
    """Install ``handler`` for the keyboard signals; return the previous ones."""
    return {signum: signal.signal(signum, handler) for signum in _PARENT_IGNORED_SIGNALS}
