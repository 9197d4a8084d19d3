#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Install path resolution for the ToolGit helper library."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from provide.foundation import logger

from toolgit.config.defaults import (
    BIN_DIR_NAME,
    HELPER_SCRIPT_NAME,
    LIB_DIR_PARTS,
    PREFIX_DIR_NAME,
    SOURCE_SCRIPT_PARTS,
)
from toolgit.exceptions import DestinationWriteError, HomeDirectoryError


@dataclass(frozen=True)
class InstallPaths:
    """Every location the installer reads from or writes to."""

    home: Path
    prefix: Path
    lib_dir: Path
    bin_dir: Path
    source: Path  # relative to the working directory
    library: Path  # installed copy of the helper script

    @classmethod
    def for_home(cls, home: Path) -> InstallPaths:
        """Build the install layout rooted at ``home``."""
        prefix = home / PREFIX_DIR_NAME
        lib_dir = prefix.joinpath(*LIB_DIR_PARTS)
        return cls(
            home=home,
            prefix=prefix,
            lib_dir=lib_dir,
            bin_dir=prefix / BIN_DIR_NAME,
            source=Path(*SOURCE_SCRIPT_PARTS),
            library=lib_dir / HELPER_SCRIPT_NAME,
        )


def resolve_home() -> Path:
    """Return the invoking user's home directory.

    Raises:
        HomeDirectoryError: If the OS cannot report a home directory.
    """
    try:
        return Path.home()
    except (RuntimeError, KeyError, OSError) as e:
        raise HomeDirectoryError(f"cannot determine home directory: {e}") from e


def require_parent_dir(path: Path) -> None:
    """Refuse to write ``path`` unless its directory already exists.

    Raises:
        DestinationWriteError: If the parent directory is missing.
    """
    if not path.parent.is_dir():
        raise DestinationWriteError(f"cannot write {path}: no such directory {path.parent}")


def resolve_install_paths(home: Path | None = None) -> InstallPaths:
    """Resolve the install layout, looking up the home directory when not given."""
    if home is None:
        home = resolve_home()
    paths = InstallPaths.for_home(home)
    logger.debug(
        "Resolved install paths",
        lib_dir=str(paths.lib_dir),
        bin_dir=str(paths.bin_dir),
        library=str(paths.library),
    )
    return paths


# 🛠️📦🔚
