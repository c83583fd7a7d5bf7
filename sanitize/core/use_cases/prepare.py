"""
Prepare use case — merge config file and flags into a launch plan.

Layering rules:
    system, shell     flag wins over config
    profiles, paths   config entries first, then flag entries
    profile policy    --strict-profiles forces strict, else config
    fork              --fork/--no-fork wins over config
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from sanitize.adapters.shell.launcher import resolve_shell, shell_command
from sanitize.core.config.loader import load_config, resolve_config_path
from sanitize.core.models.environment import EnvironmentOverrides, PathList
from sanitize.core.models.profile import ProfilePolicy
from sanitize.core.services.environment_builder import build

logger = logging.getLogger(__name__)


@dataclass
class LaunchPlan:
    """Everything needed to start the sanitized shell."""

    system: str
    profiles: list[str]
    path: PathList
    overrides: EnvironmentOverrides
    shell: str
    fork: bool = False
    policy: ProfilePolicy = ProfilePolicy.SKIP
    config_path: Path | None = None
    argv: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "system": self.system,
            "profiles": self.profiles,
            "path": self.path,
            "environment": self.overrides.to_dict(),
            "shell": self.shell,
            "argv": self.argv,
            "fork": self.fork,
            "profile_policy": self.policy.value,
            "config_path": str(self.config_path) if self.config_path else None,
        }


def prepare(
    system: str | None = None,
    profiles: Sequence[str] = (),
    prepend_paths: Sequence[str] = (),
    append_paths: Sequence[str] = (),
    *,
    strict_profiles: bool = False,
    shell: str | None = None,
    fork: bool | None = None,
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> LaunchPlan:
    """Resolve configuration and build the sanitized environment.

    Raises:
        ConfigError: If the config file is missing or invalid.
        UnsupportedPlatformError: If no usable system was given.
        UnknownProfileError: Under the strict profile policy.
    """
    resolved_path = resolve_config_path(config_path)
    config = load_config(resolved_path)

    target = system or config.system
    all_profiles = [*config.profiles, *profiles]
    policy = ProfilePolicy.STRICT if strict_profiles else config.unknown_profile

    path, overrides = build(
        target,
        all_profiles,
        [*config.prepend_path, *prepend_paths],
        [*config.append_path, *append_paths],
        policy=policy,
    )

    shell_path = resolve_shell(shell or config.shell, environ)

    return LaunchPlan(
        system=overrides.get("SANITIZED_OS", ""),
        profiles=all_profiles,
        path=path,
        overrides=overrides,
        shell=shell_path,
        fork=config.fork if fork is None else fork,
        policy=policy,
        config_path=resolved_path,
        argv=shell_command(shell_path),
    )
