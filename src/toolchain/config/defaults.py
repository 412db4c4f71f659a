"""
Default configuration values for toolchain.

Note: the package home is resolved by toolchain/home.py, which honors the
override variable named here before falling back to the user home.
"""

# Environment variable that overrides the package-manager home
DEFAULT_HOME_VAR = "CARGO_HOME"

# Subdirectory of the user home used when the override is unset
DEFAULT_HOME_SUBDIR = ".cargo"

# Directory under the package home holding installed binaries
BIN_DIR = "bin"

# Variable listing executable search directories
PATH_VAR = "PATH"
