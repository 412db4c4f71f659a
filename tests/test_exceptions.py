"""Tests for the toolchain exception hierarchy."""

import pytest

from toolchain.exceptions import (
    ExecutableNotFoundError,
    InvalidExecutableNameError,
    ToolchainError,
)


class TestHierarchy:
    """All toolchain exceptions inherit from ToolchainError."""

    def test_not_found_is_toolchain_error(self):
        assert isinstance(ExecutableNotFoundError("cargo"), ToolchainError)

    def test_invalid_name_is_value_error(self):
        error = InvalidExecutableNameError("bin/cargo", "contains path separator '/'")
        assert isinstance(error, ToolchainError)
        assert isinstance(error, ValueError)
        assert error.name == "bin/cargo"
        assert "bin/cargo" in str(error)


class TestExecutableNotFoundError:
    """Tests for ExecutableNotFoundError."""

    def test_message_lists_stages(self):
        error = ExecutableNotFoundError("cargo", searched=["path", "env"])
        assert str(error) == "Executable not found: cargo (searched: path, env)"

    def test_default_suggestion(self):
        error = ExecutableNotFoundError("rustc")
        assert "RUSTC" in error.suggestion
        assert error.searched == []

    def test_custom_suggestion(self):
        error = ExecutableNotFoundError("cargo", suggestion="Run rustup")
        assert error.suggestion == "Run rustup"

    def test_to_dict(self):
        error = ExecutableNotFoundError("cargo", searched=["path"])
        result = error.to_dict()
        assert result["type"] == "ExecutableNotFoundError"
        assert result["name"] == "cargo"
        assert result["searched"] == ["path"]
        assert result["message"] == str(error)

    def test_can_be_caught_as_base(self):
        with pytest.raises(ToolchainError):
            raise ExecutableNotFoundError("cargo")
