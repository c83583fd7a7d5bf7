"""
Static catalog of platform defaults and profile deltas.

Lookups are plain dict access keyed by the enums; a (profile, platform)
pair that is missing from ``PROFILE_DELTAS`` means the profile does not
apply to that platform.
"""

from __future__ import annotations

from sanitize.core.models.platform import PlatformDefaults, TargetPlatform
from sanitize.core.models.profile import Profile, ProfileDelta

PLATFORM_DEFAULTS: dict[TargetPlatform, PlatformDefaults] = {
    TargetPlatform.LINUX: PlatformDefaults(
        path=("/usr/sbin", "/usr/bin", "/sbin", "/bin"),
    ),
    TargetPlatform.SOLARIS: PlatformDefaults(
        path=("/opt/csw/bin", "/bin", "/usr/bin", "/usr/sbin"),
        cppflags=("-I/opt/csw/include",),
        ldflags=("-L/opt/csw/lib", "-R/opt/csw/lib"),
    ),
}

PROFILE_DELTAS: dict[tuple[Profile, TargetPlatform], ProfileDelta] = {
    (Profile.GHC, TargetPlatform.LINUX): ProfileDelta(
        prepend=("/pkgs/ghc/current/bin",),
    ),
    (Profile.GHC, TargetPlatform.SOLARIS): ProfileDelta(
        prepend=("/pkgs/gcc/gcc-4.1.0/bin", "/pkgs/ghc/current/bin"),
    ),
    (Profile.SUNSTUDIO, TargetPlatform.SOLARIS): ProfileDelta(
        prepend=("/opt/SUNWspro/bin",),
        append=("/usr/ccs/bin",),
    ),
    (Profile.GCC3, TargetPlatform.SOLARIS): ProfileDelta(
        prepend=("/opt/csw/gcc3/bin",),
        cppflags=("-I/opt/csw/gcc3/include",),
        ldflags=("-L/opt/csw/gcc3/lib", "-R/opt/csw/gcc3/lib"),
    ),
    (Profile.GCC4, TargetPlatform.SOLARIS): ProfileDelta(
        prepend=("/opt/csw/gcc4/bin",),
        cppflags=("-I/opt/csw/gcc4/include",),
        ldflags=("-L/opt/csw/gcc4/lib", "-R/opt/csw/gcc4/lib"),
    ),
    (Profile.SUNDEV, TargetPlatform.SOLARIS): ProfileDelta(
        prepend=("/opt/SUNWspro/bin",),
        append=("/usr/ccs/bin", "/usr/sfw/bin"),
        cppflags=("-I/usr/sfw/include",),
        ldflags=("-L/usr/sfw/lib", "-R/usr/sfw/lib"),
    ),
}


def platform_defaults(platform: TargetPlatform) -> PlatformDefaults:
    return PLATFORM_DEFAULTS[platform]


def profile_delta(profile: Profile, platform: TargetPlatform) -> ProfileDelta | None:
    """Return the delta for ``profile`` on ``platform``, or None if it does not apply."""
    return PROFILE_DELTAS.get((profile, platform))
