"""
Environment overrides — the finished product of the builder.

The builder never touches ``os.environ``.  It returns one of these, and
the launcher applies it exactly once, right before exec.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Ordered directories for PATH; earlier entries win in shell lookup.
PathList = list[str]

PATH_SEPARATOR = ":"

# Variables that are always stripped from a sanitized environment
REMOVED_VARIABLES: tuple[str, ...] = ("LD_LIBRARY_PATH",)


class EnvironmentOverrides(BaseModel):
    """Variables to set and variables to remove.

    ``variables`` always contains ``SANITIZED``, ``SANITIZED_OS`` and
    ``PATH``; ``CPPFLAGS``/``LDFLAGS`` only when some flags were collected.
    """

    model_config = ConfigDict(frozen=True)

    variables: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    removed: tuple[str, ...] = REMOVED_VARIABLES

    @field_validator("variables", mode="after")
    @classmethod
    def read_only_variables(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @property
    def path(self) -> PathList:
        raw = self.variables.get("PATH", "")
        return raw.split(PATH_SEPARATOR) if raw else []

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.variables.get(name, default)

    def apply(self, environ: MutableMapping[str, str]) -> None:
        """Write the overrides into ``environ`` in place."""
        for name in self.removed:
            environ.pop(name, None)
        for name, value in self.variables.items():
            environ[name] = value

    def merged(self, base: Mapping[str, str]) -> dict[str, str]:
        """Return a copy of ``base`` with the overrides applied."""
        env = dict(base)
        self.apply(env)
        return env

    def to_dict(self) -> dict:
        return {
            "set": dict(self.variables),
            "unset": list(self.removed),
            "path": self.path,
        }
