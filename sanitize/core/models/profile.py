"""
Profile model — toolchain presets layered on top of a platform.

A profile never replaces the platform defaults; it contributes deltas:
directories to put in front of or behind the base PATH, and extra
preprocessor/linker flags.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Profile(str, Enum):
    """Named toolchain preset."""

    GHC = "ghc"
    SUNSTUDIO = "sunstudio"
    GCC3 = "gcc3"
    GCC4 = "gcc4"
    SUNDEV = "sundev"

    @classmethod
    def names(cls) -> list[str]:
        return [p.value for p in cls]

    @classmethod
    def lookup(cls, name: str) -> Profile | None:
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


class ProfilePolicy(str, Enum):
    """What to do with a profile name we do not recognize."""

    SKIP = "skip"      # warn and continue without it
    STRICT = "strict"  # fail with a usage error


class ProfileDelta(BaseModel):
    """Path and flag contributions of one profile on one platform."""

    model_config = ConfigDict(frozen=True)

    prepend: tuple[str, ...] = ()
    append: tuple[str, ...] = ()
    cppflags: tuple[str, ...] = ()
    ldflags: tuple[str, ...] = ()
