"""
Environment builder — layered PATH and flag construction.

Pure data transformation: platform defaults, then each profile in the
order requested, then the user's explicit path entries.  Final PATH
order is::

    user prepend → profile prepend → platform defaults → profile append → user append

Nothing here reads or writes the process environment.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sanitize.core.data.catalog import platform_defaults, profile_delta
from sanitize.core.errors import UnknownProfileError, UnsupportedPlatformError
from sanitize.core.models.environment import PATH_SEPARATOR, EnvironmentOverrides, PathList
from sanitize.core.models.platform import TargetPlatform
from sanitize.core.models.profile import Profile, ProfilePolicy

logger = logging.getLogger(__name__)


def resolve_platform(platform_id: str | None) -> TargetPlatform:
    """Map a system name to a platform or raise UnsupportedPlatformError."""
    platform = TargetPlatform.lookup(platform_id)
    if platform is None:
        raise UnsupportedPlatformError(platform_id, TargetPlatform.names())
    return platform


def resolve_profiles(
    profile_ids: Iterable[str],
    policy: ProfilePolicy = ProfilePolicy.SKIP,
) -> list[Profile]:
    """Map profile names to profiles, keeping order and duplicates.

    Unknown names are dropped with a warning, or rejected when the
    policy is strict.
    """
    profiles: list[Profile] = []
    for name in profile_ids:
        profile = Profile.lookup(name)
        if profile is None:
            if policy == ProfilePolicy.STRICT:
                raise UnknownProfileError(name, Profile.names())
            logger.warning("Unknown profile '%s', ignoring it.", name)
            continue
        profiles.append(profile)
    return profiles


def build(
    platform_id: str | None,
    profile_ids: Iterable[str] = (),
    prepend_paths: Iterable[str] = (),
    append_paths: Iterable[str] = (),
    policy: ProfilePolicy = ProfilePolicy.SKIP,
) -> tuple[PathList, EnvironmentOverrides]:
    """Build the sanitized PATH and the environment overrides.

    Args:
        platform_id: Target system name (``linux``, ``solaris``).
        profile_ids: Profile names, applied in the given order.
        prepend_paths: Directories placed ahead of everything else.
        append_paths: Directories placed after everything else.
        policy: How to treat unrecognized profile names.

    Returns:
        (path_list, overrides)

    Raises:
        UnsupportedPlatformError: If ``platform_id`` is missing or unknown.
        UnknownProfileError: If a profile is unknown and policy is strict.
    """
    platform = resolve_platform(platform_id)
    profiles = resolve_profiles(profile_ids, policy)
    base = platform_defaults(platform)

    profile_prepend: list[str] = []
    profile_append: list[str] = []
    cppflags: list[str] = list(base.cppflags)
    ldflags: list[str] = list(base.ldflags)

    for profile in profiles:
        delta = profile_delta(profile, platform)
        if delta is None:
            logger.warning(
                "Profile '%s' has no settings for %s, skipping.",
                profile.value, platform.value,
            )
            continue
        logger.debug("Applying profile %s on %s", profile.value, platform.value)
        profile_prepend.extend(delta.prepend)
        profile_append.extend(delta.append)
        cppflags.extend(delta.cppflags)
        ldflags.extend(delta.ldflags)

    path: PathList = [
        *[p for p in prepend_paths if p],
        *profile_prepend,
        *base.path,
        *profile_append,
        *[p for p in append_paths if p],
    ]

    variables: dict[str, str] = {
        "SANITIZED": "1",
        "SANITIZED_OS": platform.value,
        "PATH": PATH_SEPARATOR.join(path),
    }
    if cppflags:
        variables["CPPFLAGS"] = " ".join(cppflags)
    if ldflags:
        variables["LDFLAGS"] = " ".join(ldflags)

    logger.info(
        "Built %s environment: %d path entries, profiles=%s",
        platform.value, len(path), [p.value for p in profiles],
    )
    return path, EnvironmentOverrides(variables=variables)
