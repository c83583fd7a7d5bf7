"""
Error taxonomy — every failure the tool can report to the user.

All errors are terminal: the CLI prints the message and exits with
``exit_code``.  Nothing is retried and nothing in the process
environment is mutated before one of these is raised.
"""

from __future__ import annotations


class SanitizeError(Exception):
    """Base class for user-visible failures."""

    exit_code: int = 1


class UsageError(SanitizeError):
    """Bad or missing command-line input."""


class UnsupportedPlatformError(UsageError):
    """The target system is missing or not one we know how to sanitize."""

    def __init__(self, platform_id: str | None, supported: list[str]) -> None:
        self.platform_id = platform_id
        self.supported = supported
        choices = ", ".join(supported)
        if not platform_id:
            msg = f"No target system given (expected one of: {choices})."
        else:
            msg = f"Operating system '{platform_id}' unsupported (expected one of: {choices})."
        super().__init__(msg)


class UnknownProfileError(UsageError):
    """A profile name was not recognized and the policy is strict."""

    def __init__(self, profile_id: str, supported: list[str]) -> None:
        self.profile_id = profile_id
        super().__init__(
            f"Unknown profile '{profile_id}' (expected one of: {', '.join(supported)})."
        )


class GuardViolation(SanitizeError):
    """Refusing to nest: the current environment is already sanitized."""


class ExecFailure(SanitizeError):
    """The shell executable could not be launched."""

    def __init__(self, shell_path: str, cause: OSError) -> None:
        self.shell_path = shell_path
        self.cause = cause
        # Same convention as POSIX shells: 127 = not found, 126 = not executable
        self.exit_code = 127 if isinstance(cause, FileNotFoundError) else 126
        super().__init__(f"Cannot execute shell {shell_path}: {cause.strerror or cause}")
