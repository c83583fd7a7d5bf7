"""
Tests for the prepare use case — layering config file and flags.
"""

import textwrap

import pytest

from sanitize.core.config.loader import ConfigError
from sanitize.core.errors import UnknownProfileError, UnsupportedPlatformError
from sanitize.core.models import ProfilePolicy
from sanitize.core.use_cases.prepare import prepare

BASH = {"SHELL": "/bin/bash"}


class TestPrepareWithoutConfig:
    def test_flags_only(self):
        plan = prepare("linux", [], ["/opt/x/bin"], [], environ=BASH)
        assert plan.system == "linux"
        assert plan.path[0] == "/opt/x/bin"
        assert plan.shell == "/bin/bash"
        assert plan.argv == ["/bin/bash", "--noprofile", "--norc"]
        assert plan.fork is False
        assert plan.policy == ProfilePolicy.SKIP
        assert plan.config_path is None

    def test_missing_system(self):
        with pytest.raises(UnsupportedPlatformError):
            prepare(None, environ=BASH)

    def test_strict_profiles(self):
        with pytest.raises(UnknownProfileError):
            prepare("linux", ["nope"], strict_profiles=True, environ=BASH)

    def test_shell_flag_wins(self):
        plan = prepare("linux", shell="/bin/zsh", environ=BASH)
        assert plan.argv == ["/bin/zsh", "-f"]

    def test_to_dict(self):
        d = prepare("solaris", ["gcc4"], environ=BASH).to_dict()
        assert d["system"] == "solaris"
        assert d["profiles"] == ["gcc4"]
        assert d["path"][0] == "/opt/csw/gcc4/bin"
        assert d["environment"]["set"]["SANITIZED"] == "1"
        assert d["environment"]["unset"] == ["LD_LIBRARY_PATH"]
        assert d["profile_policy"] == "skip"
        assert d["config_path"] is None


class TestPrepareWithConfig:
    @pytest.fixture
    def solaris_config(self, config_file):
        return config_file(textwrap.dedent("""\
            system: solaris
            profiles: [ghc]
            prepend_path: [/cfg/first]
            append_path: [/cfg/last]
            fork: true
            shell: /bin/zsh
        """))

    def test_config_supplies_defaults(self, solaris_config):
        plan = prepare(config_path=solaris_config, environ=BASH)
        assert plan.system == "solaris"
        assert plan.profiles == ["ghc"]
        assert plan.path[0] == "/cfg/first"
        assert plan.path[1:3] == ["/pkgs/gcc/gcc-4.1.0/bin", "/pkgs/ghc/current/bin"]
        assert plan.path[-1] == "/cfg/last"
        assert plan.fork is True
        assert plan.shell == "/bin/zsh"
        assert plan.config_path == solaris_config

    def test_config_discovered_from_cwd(self, solaris_config):
        plan = prepare(environ=BASH)
        assert plan.system == "solaris"
        assert plan.config_path == solaris_config.resolve()

    def test_flags_layer_over_config(self, solaris_config):
        plan = prepare(
            "linux",
            ["gcc4"],
            ["/cli/first"],
            ["/cli/last"],
            shell="/bin/bash",
            fork=False,
            config_path=solaris_config,
            environ=BASH,
        )
        assert plan.system == "linux"
        assert plan.profiles == ["ghc", "gcc4"]
        assert plan.path[:3] == ["/cfg/first", "/cli/first", "/pkgs/ghc/current/bin"]
        assert plan.path[-2:] == ["/cfg/last", "/cli/last"]
        assert plan.fork is False
        assert plan.shell == "/bin/bash"

    def test_strict_policy_from_config(self, config_file):
        path = config_file("system: linux\nunknown_profile: strict\n")
        with pytest.raises(UnknownProfileError):
            prepare(profiles=["nope"], config_path=path, environ=BASH)

    def test_bad_config(self, config_file):
        with pytest.raises(ConfigError):
            prepare("linux", config_path=config_file("fork: [1, 2]\n"), environ=BASH)
