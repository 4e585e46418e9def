# topmark:header:start
#
#   project      : CStore
#   file         : constants.py
#   file_relpath : src/cstore/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CStore Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    CSTORE_VERSION: str = get_version("cstore")
except PackageNotFoundError:
    # Running from a source checkout without an installed distribution.
    CSTORE_VERSION = "0.0.0"

# Environment variable naming the user's home directory:
ENV_HOME: Final[str] = "HOME"

# Environment variable used to force the library log level:
ENV_LOG_LEVEL: Final[str] = "CSTORE_LOG_LEVEL"

# Owner-only permissions for base directories created by a Manager:
DIR_MODE: Final[int] = 0o700

# All store files are read and written as UTF-8 text:
FILE_ENCODING: Final[str] = "utf-8"
