"""Tests for user home and package home discovery."""

from pathlib import Path

from toolchain.capabilities import POSIX, WINDOWS, MappingEnvironment
from toolchain.config import HomeSource, LocatorSettings
from toolchain.home import PackageHome, home_dir, package_home


class TestHomeDir:
    """Tests for home_dir."""

    def test_posix_home_variable(self):
        env = MappingEnvironment({"HOME": "/home/ferris"})
        assert home_dir(env, POSIX) == Path("/home/ferris")

    def test_posix_passwd_fallback(self):
        env = MappingEnvironment({})
        result = home_dir(env, POSIX, passwd_lookup=lambda: "/home/from-passwd")
        assert result == Path("/home/from-passwd")

    def test_posix_empty_home_uses_fallback(self):
        env = MappingEnvironment({"HOME": ""})
        result = home_dir(env, POSIX, passwd_lookup=lambda: "/home/from-passwd")
        assert result == Path("/home/from-passwd")

    def test_posix_no_home(self):
        env = MappingEnvironment({})
        assert home_dir(env, POSIX, passwd_lookup=None) is None
        assert home_dir(env, POSIX, passwd_lookup=lambda: None) is None

    def test_windows_userprofile(self):
        env = MappingEnvironment(
            {"USERPROFILE": "C:\\Users\\ferris", "HOME": "/ignored"},
            case_insensitive=True,
        )
        assert home_dir(env, WINDOWS) == Path("C:\\Users\\ferris")

    def test_windows_homedrive_homepath(self):
        env = MappingEnvironment({"HOMEDRIVE": "D:", "HOMEPATH": "\\Users\\ferris"})
        assert home_dir(env, WINDOWS) == Path("D:\\Users\\ferris")

    def test_windows_nothing_set(self):
        env = MappingEnvironment({"HOME": "/home/ferris"})
        assert home_dir(env, WINDOWS) is None

    def test_malformed_home(self):
        env = MappingEnvironment({"HOME": "/home/\udcff"})
        assert home_dir(env, POSIX, passwd_lookup=None) is None


class TestPackageHome:
    """Tests for package_home."""

    def test_override_variable(self):
        env = MappingEnvironment({"CARGO_HOME": "/opt/cargo", "HOME": "/home/ferris"})
        home = package_home(env, POSIX)
        assert home == PackageHome(path=Path("/opt/cargo"), source=HomeSource.ENV)

    def test_override_used_verbatim(self):
        env = MappingEnvironment({"CARGO_HOME": "relative/cargo"})
        assert package_home(env, POSIX).path == Path("relative/cargo")

    def test_default_from_user_home(self):
        env = MappingEnvironment({"HOME": "/home/ferris"})
        home = package_home(env, POSIX)
        assert home.path == Path("/home/ferris/.cargo")
        assert home.source == HomeSource.DEFAULT

    def test_home_lookup_injected(self):
        home = package_home(
            MappingEnvironment({}), POSIX, home_lookup=lambda: Path("/srv/user")
        )
        assert home.path == Path("/srv/user/.cargo")

    def test_no_source(self):
        home = package_home(MappingEnvironment({}), POSIX, home_lookup=lambda: None)
        assert home is None

    def test_malformed_override_is_not_found(self):
        env = MappingEnvironment({"CARGO_HOME": "/opt/\udcff", "HOME": "/home/ferris"})
        assert package_home(env, POSIX) is None

    def test_empty_override_used_verbatim(self):
        """An empty override is still set: no fallback to ~/.cargo."""
        env = MappingEnvironment({"CARGO_HOME": "", "HOME": "/home/ferris"})
        home = package_home(env, POSIX)
        assert home == PackageHome(path=Path(""), source=HomeSource.ENV)

    def test_custom_settings(self):
        settings = LocatorSettings(home_var="RUSTUP_HOME", home_subdir=".rustup")
        env = MappingEnvironment({"CARGO_HOME": "/opt/cargo", "HOME": "/home/ferris"})
        assert package_home(env, POSIX, settings).path == Path("/home/ferris/.rustup")

    def test_repr(self):
        home = PackageHome(path=Path("/opt/cargo"), source=HomeSource.ENV)
        assert "source='env'" in repr(home)
