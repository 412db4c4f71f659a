"""Pytest configuration for toolchain tests."""

import os

import pytest

from toolchain.capabilities import POSIX, MappingEnvironment


class FakeFileSystem:
    """FileSystem that knows a fixed set of regular files and records probes."""

    def __init__(self, files=()):
        self.files = {str(f) for f in files}
        self.probed = []

    def is_file(self, path):
        self.probed.append(str(path))
        return str(path) in self.files


@pytest.fixture
def make_bin(tmp_path):
    """Create an empty regular file at tmp_path/<relpath> and return its path."""

    def _make(relpath):
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("")
        return path

    return _make


@pytest.fixture
def path_env():
    """Build a POSIX MappingEnvironment with PATH set from directories."""

    def _make(*dirs, **extra):
        values = dict(extra)
        if dirs:
            values["PATH"] = POSIX.path_list_separator.join(str(d) for d in dirs)
        return MappingEnvironment(values)

    return _make


@pytest.fixture
def fake_fs():
    return FakeFileSystem


@pytest.fixture
def clean_env(monkeypatch):
    """Process environment with no lookup-related variables set."""
    for name in list(os.environ):
        if name.upper() in {"PATH", "CARGO_HOME", "HOME", "USERPROFILE"}:
            monkeypatch.delenv(name, raising=False)
    return monkeypatch
