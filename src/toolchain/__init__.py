"""
toolchain - Locate companion executables such as cargo and rustc.

Lookups check PATH, then a per-tool override variable (``$CARGO`` for
``cargo``), then optionally the package-manager home (``$CARGO_HOME/bin``).
"""

from toolchain.capabilities import (
    POSIX,
    WINDOWS,
    Environment,
    FileSystem,
    Host,
    LocalFileSystem,
    MappingEnvironment,
    ProcessEnvironment,
)
from toolchain.config import HomeSource, LocatorSettings
from toolchain.exceptions import (
    ExecutableNotFoundError,
    InvalidExecutableNameError,
    ToolchainError,
)
from toolchain.home import PackageHome, home_dir, package_home
from toolchain.locator import (
    Lookup,
    Stage,
    ToolLocator,
    env_var_name,
    require,
    resolve,
    resolve_with_package_home,
    search_env_var,
    search_package_home,
    search_path,
)
from toolchain.probe import probe_file

__all__ = [
    # Entry points
    "resolve",
    "resolve_with_package_home",
    "probe_file",
    "search_path",
    "search_env_var",
    "search_package_home",
    "require",
    "home_dir",
    "package_home",
    # Locator
    "ToolLocator",
    "Lookup",
    "Stage",
    "PackageHome",
    "env_var_name",
    # Capabilities
    "Host",
    "POSIX",
    "WINDOWS",
    "Environment",
    "ProcessEnvironment",
    "MappingEnvironment",
    "FileSystem",
    "LocalFileSystem",
    # Config
    "HomeSource",
    "LocatorSettings",
    # Errors
    "ToolchainError",
    "InvalidExecutableNameError",
    "ExecutableNotFoundError",
]

__version__ = "0.1.0"
