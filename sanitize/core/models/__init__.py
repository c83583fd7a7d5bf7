"""
Domain models — Pydantic types for the sanitizer.

All models are re-exported here for convenient access:

    from sanitize.core.models import TargetPlatform, Profile, EnvironmentOverrides
"""

from sanitize.core.models.environment import (
    PATH_SEPARATOR,
    REMOVED_VARIABLES,
    EnvironmentOverrides,
    PathList,
)
from sanitize.core.models.platform import PlatformDefaults, TargetPlatform
from sanitize.core.models.profile import Profile, ProfileDelta, ProfilePolicy

__all__ = [
    # environment.py
    "EnvironmentOverrides",
    "PATH_SEPARATOR",
    "PathList",
    "REMOVED_VARIABLES",
    # platform.py
    "PlatformDefaults",
    "TargetPlatform",
    # profile.py
    "Profile",
    "ProfileDelta",
    "ProfilePolicy",
]
