"""
Tests for domain models — lookups, overrides application, immutability.
"""

import pytest
from pydantic import ValidationError

from sanitize.core.models import (
    REMOVED_VARIABLES,
    EnvironmentOverrides,
    PlatformDefaults,
    Profile,
    ProfileDelta,
    ProfilePolicy,
    TargetPlatform,
)


class TestTargetPlatform:
    def test_names(self):
        assert TargetPlatform.names() == ["linux", "solaris"]

    def test_lookup(self):
        assert TargetPlatform.lookup("linux") is TargetPlatform.LINUX
        assert TargetPlatform.lookup(" Solaris ") is TargetPlatform.SOLARIS

    @pytest.mark.parametrize("name", ["plan9", "", None, "bsd"])
    def test_lookup_unknown(self, name):
        assert TargetPlatform.lookup(name) is None

    def test_defaults_are_frozen(self):
        d = PlatformDefaults(path=("/bin",))
        with pytest.raises(ValidationError):
            d.path = ("/usr/bin",)


class TestProfile:
    def test_names(self):
        assert Profile.names() == ["ghc", "sunstudio", "gcc3", "gcc4", "sundev"]

    def test_lookup(self):
        assert Profile.lookup("GCC4") is Profile.GCC4
        assert Profile.lookup("clang") is None

    def test_policy_values(self):
        assert ProfilePolicy("skip") is ProfilePolicy.SKIP
        assert ProfilePolicy("strict") is ProfilePolicy.STRICT

    def test_empty_delta(self):
        delta = ProfileDelta()
        assert delta.prepend == ()
        assert delta.ldflags == ()


class TestEnvironmentOverrides:
    def _overrides(self) -> EnvironmentOverrides:
        return EnvironmentOverrides(
            variables={
                "SANITIZED": "1",
                "SANITIZED_OS": "linux",
                "PATH": "/usr/bin:/bin",
            }
        )

    def test_removes_ld_library_path_by_default(self):
        assert EnvironmentOverrides().removed == REMOVED_VARIABLES
        assert "LD_LIBRARY_PATH" in REMOVED_VARIABLES

    def test_path(self):
        assert self._overrides().path == ["/usr/bin", "/bin"]
        assert EnvironmentOverrides().path == []

    def test_apply_in_place(self):
        env = {"PATH": "/evil", "LD_LIBRARY_PATH": "/evil/lib", "HOME": "/home/u"}
        self._overrides().apply(env)
        assert env["PATH"] == "/usr/bin:/bin"
        assert env["SANITIZED"] == "1"
        assert env["HOME"] == "/home/u"
        assert "LD_LIBRARY_PATH" not in env

    def test_apply_without_ld_library_path(self):
        env: dict[str, str] = {}
        self._overrides().apply(env)
        assert env["SANITIZED_OS"] == "linux"

    def test_merged_leaves_base_alone(self):
        base = {"LD_LIBRARY_PATH": "/x", "TERM": "xterm"}
        env = self._overrides().merged(base)
        assert "LD_LIBRARY_PATH" in base
        assert "LD_LIBRARY_PATH" not in env
        assert env["TERM"] == "xterm"

    def test_to_dict(self):
        d = self._overrides().to_dict()
        assert d["set"]["SANITIZED"] == "1"
        assert d["unset"] == ["LD_LIBRARY_PATH"]
        assert d["path"] == ["/usr/bin", "/bin"]

    def test_variables_read_only(self):
        overrides = self._overrides()
        with pytest.raises(TypeError):
            overrides.variables["PATH"] = "/tmp/evil"
        assert overrides.path == ["/usr/bin", "/bin"]

    def test_variables_detached_from_input(self):
        source = {"SANITIZED": "1"}
        overrides = EnvironmentOverrides(variables=source)
        source["SANITIZED"] = "0"
        assert overrides.get("SANITIZED") == "1"

    def test_to_dict_is_a_plain_copy(self):
        overrides = self._overrides()
        d = overrides.to_dict()
        d["set"]["PATH"] = "/tmp"
        assert overrides.get("PATH") == "/usr/bin:/bin"
        assert type(d["set"]) is dict

    def test_frozen(self):
        with pytest.raises(ValidationError):
            self._overrides().removed = ()
