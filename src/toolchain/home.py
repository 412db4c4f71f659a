"""
Home directory discovery.

User home:
- macOS/Linux: $HOME, else the password database entry for the current user
- Windows: %USERPROFILE%, else %HOMEDRIVE%%HOMEPATH%

Package home priority (highest to lowest):
1. Override variable (CARGO_HOME by default) - used verbatim
2. Default ({user_home}/.cargo)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from toolchain.capabilities import Environment, Host, ProcessEnvironment
from toolchain.config.settings import HomeSource, LocatorSettings
from toolchain.probe import to_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackageHome:
    """Resolved package-manager home directory."""

    path: Path
    source: HomeSource

    def __repr__(self) -> str:
        return f"PackageHome(path={self.path!r}, source={self.source.value!r})"


def _passwd_home() -> str | None:
    """Home directory of the current user from the password database."""
    if os.name == "nt":
        return None
    import pwd

    try:
        return pwd.getpwuid(os.getuid()).pw_dir
    except KeyError:
        return None


def home_dir(
    env: Environment | None = None,
    host: Host | None = None,
    passwd_lookup: Callable[[], str | None] | None = _passwd_home,
) -> Path | None:
    """Get the current user's home directory.

    Args:
        env: Environment to read (default: the process environment).
        host: Platform conventions (default: the running platform).
        passwd_lookup: Fallback used on POSIX hosts when HOME is unset.
            Pass None to disable it.

    Returns:
        Path to the home directory, or None if it cannot be determined.
    """
    env = env or ProcessEnvironment()
    host = host or Host.current()

    if host.is_windows:
        profile = env.get("USERPROFILE")
        if profile:
            return to_path(profile)
        drive = env.get("HOMEDRIVE")
        homepath = env.get("HOMEPATH")
        if drive and homepath:
            return to_path(drive + homepath)
        return None

    home = env.get("HOME")
    if home:
        return to_path(home)
    if passwd_lookup is None:
        return None
    fallback = passwd_lookup()
    return to_path(fallback) if fallback else None


def package_home(
    env: Environment | None = None,
    host: Host | None = None,
    settings: LocatorSettings | None = None,
    home_lookup: Callable[[], Path | None] | None = None,
) -> PackageHome | None:
    """Resolve the package-manager home directory.

    Args:
        env: Environment to read (default: the process environment).
        host: Platform conventions (default: the running platform).
        settings: Override variable and default subdirectory.
        home_lookup: Supplies the user home (default: home_dir()).

    Returns:
        PackageHome with its source, or None if neither source is usable.
    """
    env = env or ProcessEnvironment()
    settings = settings or LocatorSettings()

    override = env.get(settings.home_var)
    if override is not None:
        path = to_path(override)
        if path is not None:
            logger.debug(f"Using package home from {settings.home_var}: {path}")
            return PackageHome(path=path, source=HomeSource.ENV)
        logger.debug(f"Ignoring malformed {settings.home_var} value")
        return None

    if home_lookup is None:
        user_home = home_dir(env, host)
    else:
        user_home = home_lookup()
    if user_home is None:
        logger.debug("No user home directory; package home unavailable")
        return None

    path = user_home / settings.home_subdir
    logger.debug(f"Using default package home: {path}")
    return PackageHome(path=path, source=HomeSource.DEFAULT)
