"""
Configuration for toolchain.

Contains default variable names and the settings model for the
package-home fallback.
"""

from toolchain.config.defaults import (
    BIN_DIR,
    DEFAULT_HOME_SUBDIR,
    DEFAULT_HOME_VAR,
    PATH_VAR,
)
from toolchain.config.settings import HomeSource, LocatorSettings

__all__ = [
    "BIN_DIR",
    "DEFAULT_HOME_SUBDIR",
    "DEFAULT_HOME_VAR",
    "PATH_VAR",
    # Settings
    "HomeSource",
    "LocatorSettings",
]
