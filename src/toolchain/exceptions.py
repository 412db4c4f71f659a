"""
Custom exceptions for toolchain.

All toolchain exceptions inherit from ToolchainError for easy catching.
A missing executable is not an error for the lookup functions; they return
None. ExecutableNotFoundError is only raised by require().
"""

from __future__ import annotations

from typing import Any


class ToolchainError(Exception):
    """Base exception for all toolchain errors."""

    pass


class InvalidExecutableNameError(ToolchainError, ValueError):
    """The executable name is empty or looks like a path."""

    def __init__(self, name: str, reason: str):
        super().__init__(f"Invalid executable name {name!r}: {reason}")
        self.name = name
        self.reason = reason


class ExecutableNotFoundError(ToolchainError):
    """No lookup stage produced a usable executable.

    Attributes:
        name: Executable name that was looked up
        searched: Stage names consulted, in order
        suggestion: Recommended remediation steps
    """

    def __init__(
        self,
        name: str,
        *,
        searched: list[str] | None = None,
        suggestion: str = "",
    ):
        self.name = name
        self.searched = searched or []
        self.suggestion = suggestion or (
            f"Install {name}, add its directory to PATH, "
            f"or set {name.upper()} to its full path"
        )
        stages = ", ".join(self.searched) or "nothing"
        super().__init__(f"Executable not found: {name} (searched: {stages})")
        self.message = str(self)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a structured dict for error reporting."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "name": self.name,
            "searched": list(self.searched),
            "suggestion": self.suggestion,
        }
