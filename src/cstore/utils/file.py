# topmark:header:start
#
#   file         : file.py
#   file_relpath : src/cstore/utils/file.py
#   project      : CStore
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Directory helpers for CStore."""

import os
from pathlib import Path

from cstore.constants import DIR_MODE, ENV_HOME
from cstore.logging import get_logger

logger = get_logger(__name__)


def create_dir(path: "str | os.PathLike[str]") -> Path:
    """Create ``path`` and any missing parents with owner-only permissions.

    An existing directory is left untouched, including its permissions.

    Args:
        path (str | os.PathLike[str]): Directory to create.

    Returns:
        Path: The directory path.

    Raises:
        OSError: If the directory cannot be created (other than because it
            already exists), or ``path`` exists and is not a directory.
    """
    dir_path = Path(path)
    if not dir_path.exists():
        # Path.mkdir(parents=True) ignores `mode` for parents; create each level.
        missing = [p for p in (dir_path, *dir_path.parents) if not p.exists()]
        for p in reversed(missing):
            p.mkdir(mode=DIR_MODE, exist_ok=True)
        logger.debug("Created directory %s", dir_path)
    elif not dir_path.is_dir():
        raise NotADirectoryError(f"not a directory: {dir_path}")
    return dir_path


def home_dir_path(*parts: str) -> Path:
    """Return a path below the user's home directory.

    The home directory is read from the ``HOME`` environment variable.

    Args:
        *parts (str): Path components appended to the home directory.

    Returns:
        Path: ``$HOME/<parts...>``.

    Raises:
        KeyError: If ``HOME`` is not set.
    """
    return Path(os.environ[ENV_HOME], *parts)
