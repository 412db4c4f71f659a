"""
toolchain.capabilities - Read-only views of the process and platform.

Lookups never touch ``os.environ`` or the filesystem directly; they go
through the small interfaces defined here so hosts and tests can hand in
deterministic replacements.

Classes:
    Host: Platform conventions (executable suffix, PATH separator).
    Environment: Protocol for reading environment variables.
    ProcessEnvironment: Live view of ``os.environ``.
    MappingEnvironment: Fixed mapping, for tests and sandboxed hosts.
    FileSystem: Protocol for the regular-file check.
    LocalFileSystem: ``os.stat`` backed implementation.

Example:
    >>> from toolchain.capabilities import WINDOWS, MappingEnvironment
    >>> env = MappingEnvironment({"Path": "C:/bin"}, case_insensitive=True)
    >>> env.get("PATH")
    'C:/bin'
    >>> WINDOWS.split_path_list('"C:/a;b";C:/c')
    ['C:/a;b', 'C:/c']
"""

from __future__ import annotations

import os
import stat
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class Host:
    """Platform conventions that change how executables are found.

    Attributes:
        exe_suffix: Suffix executables conventionally carry ("" if none).
        path_list_separator: Separator between PATH entries.
        is_windows: True for Windows-like hosts (backslash paths, quoted
            PATH entries, USERPROFILE home).
    """

    exe_suffix: str
    path_list_separator: str
    is_windows: bool = False

    @classmethod
    def current(cls) -> Host:
        """Describe the running interpreter's platform."""
        return WINDOWS if os.name == "nt" else POSIX

    @property
    def path_separators(self) -> tuple[str, ...]:
        """Characters that separate path components."""
        return ("/", "\\") if self.is_windows else ("/",)

    def split_path_list(self, value: str) -> list[str]:
        """Split a PATH-style value into directory entries.

        Empty entries are dropped. On Windows-like hosts double quotes are
        removed and separators inside quotes do not split.
        """
        if not self.is_windows:
            return [entry for entry in value.split(self.path_list_separator) if entry]

        entries: list[str] = []
        current: list[str] = []
        quoted = False
        for ch in value:
            if ch == '"':
                quoted = not quoted
            elif ch == self.path_list_separator and not quoted:
                entries.append("".join(current))
                current = []
            else:
                current.append(ch)
        entries.append("".join(current))
        return [entry for entry in entries if entry]


POSIX = Host(exe_suffix="", path_list_separator=":")
WINDOWS = Host(exe_suffix=".exe", path_list_separator=";", is_windows=True)


@runtime_checkable
class Environment(Protocol):
    """Protocol for reading environment variables."""

    def get(self, name: str) -> str | None:
        """Return the variable's value, or None if unset."""
        ...


class ProcessEnvironment:
    """Environment backed by ``os.environ``, read at call time."""

    def get(self, name: str) -> str | None:
        return os.environ.get(name)

    def __repr__(self) -> str:
        return "ProcessEnvironment()"


class MappingEnvironment:
    """Environment backed by a fixed mapping.

    Args:
        values: Variable names to values. Copied on construction.
        case_insensitive: Match names ignoring case, as Windows does.
    """

    def __init__(
        self,
        values: Mapping[str, str] | None = None,
        *,
        case_insensitive: bool = False,
    ):
        self._case_insensitive = case_insensitive
        self._values = {
            self._key(name): value for name, value in (values or {}).items()
        }

    def _key(self, name: str) -> str:
        return name.upper() if self._case_insensitive else name

    def get(self, name: str) -> str | None:
        return self._values.get(self._key(name))

    def __repr__(self) -> str:
        return f"MappingEnvironment({sorted(self._values)!r})"


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for the one filesystem question lookups ask."""

    def is_file(self, path: Path) -> bool:
        """True if ``path`` exists and is a regular file (symlinks followed)."""
        ...


class LocalFileSystem:
    """FileSystem backed by ``os.stat``.

    Every stat failure (missing file, permission denied, malformed path)
    reads as "not a file".
    """

    def is_file(self, path: Path) -> bool:
        try:
            st = os.stat(path)
        except (OSError, ValueError):
            return False
        return stat.S_ISREG(st.st_mode)

    def __repr__(self) -> str:
        return "LocalFileSystem()"
