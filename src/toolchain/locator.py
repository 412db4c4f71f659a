"""
toolchain.locator - Layered executable lookup.

Three places are checked for an executable, in order:

1. ``$PATH/<name>`` - every PATH directory in order, first regular file wins.
   Example: for cargo, each PATH entry joined with ``cargo``.
2. ``$<NAME>`` - the executable name upper-cased; its value is trusted as
   the path without an existence check. Example: ``$CARGO``, ``$RUSTC``.
3. ``$CARGO_HOME/bin/<name>`` (only for the package-home entry points),
   where CARGO_HOME defaults to ``~/.cargo``.

Absence is never an error: every stage returns None when it finds nothing.

Example:
    >>> from toolchain import ToolLocator
    >>> from toolchain.capabilities import MappingEnvironment
    >>> locator = ToolLocator(env=MappingEnvironment({"RUSTC": "/opt/rustc"}))
    >>> locator.resolve("rustc")
    PosixPath('/opt/rustc')
"""

from __future__ import annotations

import logging
import os
import string
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from toolchain.capabilities import (
    Environment,
    FileSystem,
    Host,
    LocalFileSystem,
    ProcessEnvironment,
)
from toolchain.config.defaults import PATH_VAR
from toolchain.config.settings import LocatorSettings
from toolchain.exceptions import ExecutableNotFoundError, InvalidExecutableNameError
from toolchain.home import PackageHome, home_dir, package_home
from toolchain.probe import probe_file, to_path

logger = logging.getLogger(__name__)

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


class Stage(Enum):
    """Lookup stage that produced a hit."""

    PATH = "path"
    ENV = "env"
    PACKAGE_HOME = "package_home"


@dataclass(frozen=True)
class Lookup:
    """A successful lookup and where it came from."""

    name: str
    path: Path
    stage: Stage


def env_var_name(name: str) -> str:
    """Override variable for an executable: the name in ASCII upper case."""
    return name.translate(_ASCII_UPPER)


class ToolLocator:
    """Finds executables over injected environment, filesystem and platform.

    A locator keeps no state between calls; every lookup reads the
    environment and filesystem afresh.

    Args:
        env: Environment to read (default: the live process environment).
        fs: Filesystem to probe (default: the local one).
        host: Platform conventions (default: the running platform).
        settings: Package-home fallback settings.
        home_lookup: Supplies the user home directory (default: home_dir()
            over ``env`` and ``host``).
    """

    def __init__(
        self,
        env: Environment | None = None,
        fs: FileSystem | None = None,
        host: Host | None = None,
        settings: LocatorSettings | None = None,
        home_lookup: Callable[[], Path | None] | None = None,
    ):
        self.env = env or ProcessEnvironment()
        self.fs = fs or LocalFileSystem()
        self.host = host or Host.current()
        self.settings = settings or LocatorSettings()
        self._home_lookup = home_lookup

    def __repr__(self) -> str:
        return (
            f"ToolLocator(env={self.env!r}, fs={self.fs!r}, "
            f"host={self.host!r}, settings={self.settings!r})"
        )

    def _check_name(self, name: str) -> None:
        if not name:
            raise InvalidExecutableNameError(name, "name is empty")
        if "\x00" in name:
            raise InvalidExecutableNameError(name, "contains NUL")
        for sep in self.host.path_separators:
            if sep in name:
                raise InvalidExecutableNameError(
                    name, f"contains path separator {sep!r}"
                )

    # -- primitives ---------------------------------------------------------

    def probe_file(self, path: str | os.PathLike[str]) -> Path | None:
        """Return ``path`` or ``path`` + exe suffix if it is a regular file."""
        return probe_file(path, fs=self.fs, host=self.host)

    def home_dir(self) -> Path | None:
        """Get the user home directory."""
        if self._home_lookup is not None:
            return self._home_lookup()
        return home_dir(self.env, self.host)

    def package_home(self) -> PackageHome | None:
        """Resolve the package-manager home directory."""
        return package_home(
            self.env, self.host, self.settings, home_lookup=self.home_dir
        )

    # -- stages -------------------------------------------------------------

    def search_path(self, name: str) -> Path | None:
        """Find ``name`` in the PATH directories, first listed wins."""
        self._check_name(name)
        value = self.env.get(PATH_VAR)
        if not value:
            return None

        for entry in self.host.split_path_list(value):
            candidate = to_path(os.path.join(entry, name))
            if candidate is None:
                continue
            found = self.probe_file(candidate)
            if found is not None:
                logger.debug(f"Found {name} in PATH: {found}")
                return found
        return None

    def search_env_var(self, name: str) -> Path | None:
        """Read ``name``'s override variable, trusting its value as the path."""
        self._check_name(name)
        var = env_var_name(name)
        value = self.env.get(var)
        if value is None:
            return None
        path = to_path(value)
        if path is None:
            logger.debug(f"Ignoring malformed {var} value")
            return None
        logger.debug(f"Using {name} from {var}: {path}")
        return path

    def search_package_home(self, name: str) -> Path | None:
        """Look for ``name`` in ``<package home>/bin``."""
        self._check_name(name)
        home = self.package_home()
        if home is None:
            return None
        found = self.probe_file(home.path / self.settings.bin_dir / name)
        if found is not None:
            logger.debug(f"Found {name} in package home: {found}")
        return found

    # -- orchestration ------------------------------------------------------

    def _stages(
        self, package_home: bool
    ) -> list[tuple[Stage, Callable[[str], Path | None]]]:
        stages = [
            (Stage.PATH, self.search_path),
            (Stage.ENV, self.search_env_var),
        ]
        if package_home:
            stages.append((Stage.PACKAGE_HOME, self.search_package_home))
        return stages

    def lookup(self, name: str, *, package_home: bool = False) -> Lookup | None:
        """Run the stages in order and report which one matched.

        Args:
            name: Executable name (e.g. "cargo").
            package_home: Also try the package-home fallback.

        Returns:
            Lookup with the path and stage, or None if no stage matched.
        """
        self._check_name(name)
        for stage, search in self._stages(package_home):
            path = search(name)
            if path is not None:
                return Lookup(name=name, path=path, stage=stage)
        logger.debug(f"{name} not found")
        return None

    def resolve(self, name: str) -> Path | None:
        """Find ``name`` in PATH, then via its override variable."""
        found = self.lookup(name)
        return found.path if found else None

    def resolve_with_package_home(self, name: str) -> Path | None:
        """Like resolve(), falling back to the package home's bin directory."""
        found = self.lookup(name, package_home=True)
        return found.path if found else None

    def require(self, name: str, *, package_home: bool = True) -> Path:
        """Resolve ``name`` or raise.

        Raises:
            ExecutableNotFoundError: If no stage finds the executable.
        """
        found = self.lookup(name, package_home=package_home)
        if found is None:
            raise ExecutableNotFoundError(
                name,
                searched=[stage.value for stage, _ in self._stages(package_home)],
            )
        return found.path


# Module-level entry points over the live process environment. A fresh
# locator per call keeps every lookup reading current state.


def resolve(name: str) -> Path | None:
    """Find ``name`` in PATH, then via its override variable."""
    return ToolLocator().resolve(name)


def resolve_with_package_home(name: str) -> Path | None:
    """Find ``name`` in PATH, its override variable, then the package home."""
    return ToolLocator().resolve_with_package_home(name)


def search_path(name: str) -> Path | None:
    return ToolLocator().search_path(name)


def search_env_var(name: str) -> Path | None:
    return ToolLocator().search_env_var(name)


def search_package_home(name: str) -> Path | None:
    return ToolLocator().search_package_home(name)


def require(name: str, *, package_home: bool = True) -> Path:
    """Resolve ``name`` or raise ExecutableNotFoundError."""
    return ToolLocator().require(name, package_home=package_home)
