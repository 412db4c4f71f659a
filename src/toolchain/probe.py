"""
Binary probing: does a candidate path denote a usable executable?
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from toolchain.capabilities import FileSystem, Host, LocalFileSystem

logger = logging.getLogger(__name__)


def to_path(value: str | os.PathLike[str]) -> Path | None:
    """Convert a string to a Path if it is a well-formed path.

    Values containing NUL, or text that cannot be encoded as UTF-8 (such as
    undecodable environment bytes surfaced as surrogate escapes), are
    rejected.

    Returns:
        The Path, or None if the value is not a usable path.
    """
    text = os.fspath(value)
    if "\x00" in text:
        return None
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return Path(text)


def with_exe_suffix(path: Path, suffix: str) -> Path | None:
    """Replace (or add) the final extension of ``path`` with ``suffix``.

    Returns None when there is no suffix convention or the path has no
    final component to carry one.
    """
    if not suffix or not path.name or path.name == "..":
        return None
    if path.name.endswith("."):
        # "foo." has an empty extension, which the suffix replaces
        return path.with_name(path.name[:-1] + suffix)
    return path.with_suffix(suffix)


def probe_file(
    path: str | os.PathLike[str],
    *,
    fs: FileSystem | None = None,
    host: Host | None = None,
) -> Path | None:
    """Return the first usable file among ``path`` and ``path`` + exe suffix.

    Args:
        path: Candidate path, with or without the executable suffix.
        fs: Filesystem to query (default: the local one).
        host: Platform conventions (default: the running platform).

    Returns:
        The candidate that is a regular file, or None if neither is.
    """
    fs = fs or LocalFileSystem()
    host = host or Host.current()

    candidate = to_path(path)
    if candidate is None:
        return None

    candidates = [candidate]
    suffixed = with_exe_suffix(candidate, host.exe_suffix)
    if suffixed is not None:
        candidates.append(suffixed)

    for it in candidates:
        if fs.is_file(it):
            return it
    logger.debug(f"No file at {candidate}")
    return None
