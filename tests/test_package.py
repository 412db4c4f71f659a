"""Tests for the public package surface."""

import toolchain


def test_entry_points_exported():
    for name in (
        "resolve",
        "resolve_with_package_home",
        "probe_file",
        "search_path",
        "search_env_var",
        "search_package_home",
    ):
        assert callable(getattr(toolchain, name))


def test_all_names_resolve():
    for name in toolchain.__all__:
        assert hasattr(toolchain, name), name


def test_version():
    assert toolchain.__version__
