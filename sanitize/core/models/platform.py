"""
Platform model — the operating systems we know how to sanitize.

Each platform carries a base PATH and base compiler flags.  The actual
values live in the catalog (``sanitize.core.data.catalog``); this module
only defines their shape.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class TargetPlatform(str, Enum):
    """Target operating system identifier."""

    LINUX = "linux"
    SOLARIS = "solaris"

    @classmethod
    def names(cls) -> list[str]:
        return [p.value for p in cls]

    @classmethod
    def lookup(cls, name: str | None) -> TargetPlatform | None:
        """Resolve a user-supplied name, or None if it is not a platform."""
        if not name:
            return None
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


class PlatformDefaults(BaseModel):
    """Base PATH and compiler flags for one platform."""

    model_config = ConfigDict(frozen=True)

    path: tuple[str, ...] = ()
    cppflags: tuple[str, ...] = ()
    ldflags: tuple[str, ...] = ()
