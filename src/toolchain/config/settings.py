"""
Locator settings for the package-home fallback.

The defaults target cargo's layout (~/.cargo/bin). Hosts that ship other
toolchains can point the fallback elsewhere:

    >>> from toolchain.config import LocatorSettings
    >>> settings = LocatorSettings(home_var="RUSTUP_HOME", home_subdir=".rustup")
    >>> settings.home_var
    'RUSTUP_HOME'
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from toolchain.config.defaults import BIN_DIR, DEFAULT_HOME_SUBDIR, DEFAULT_HOME_VAR


class HomeSource(Enum):
    """Source of the package home directory."""

    ENV = "env"
    DEFAULT = "default"


class LocatorSettings(BaseModel):
    """Where the package-home fallback looks for binaries."""

    model_config = ConfigDict(frozen=True)

    home_var: str = Field(
        default=DEFAULT_HOME_VAR,
        description="Environment variable that overrides the package home",
    )
    home_subdir: str = Field(
        default=DEFAULT_HOME_SUBDIR,
        description="Subdirectory of the user home used as the default package home",
    )
    bin_dir: str = Field(
        default=BIN_DIR,
        description="Directory under the package home holding binaries",
    )

    @field_validator("home_var")
    @classmethod
    def _check_var_name(cls, v: str) -> str:
        if not v:
            raise ValueError("home_var must not be empty")
        if "=" in v or "\x00" in v:
            raise ValueError(f"home_var is not a valid variable name: {v!r}")
        return v

    @field_validator("home_subdir", "bin_dir")
    @classmethod
    def _check_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be empty")
        return v
