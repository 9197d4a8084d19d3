#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Wrapper script generation for discovered helper functions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from provide.foundation import logger
from provide.foundation.file import atomic_write
from provide.foundation.platform import is_windows

from toolgit.config.defaults import (
    DEFAULT_WRAPPER_PERMS,
    POSIX_INTERPRETER,
    WINDOWS_WRAPPER_SUFFIX,
)
from toolgit.exceptions import DestinationWriteError
from toolgit.paths import require_parent_dir


class HostFamily(Enum):
    """Operating system families that need different wrapper syntax."""

    POSIX = "posix"
    WINDOWS = "windows"


def detect_host_family() -> HostFamily:
    """Resolve the host family for the running interpreter."""
    return HostFamily.WINDOWS if is_windows() else HostFamily.POSIX


@dataclass(frozen=True)
class Wrapper:
    """A generated wrapper file for one helper function."""

    function: str
    path: Path
    content: str


def render_wrapper(function: str, library: Path, bin_dir: Path, family: HostFamily) -> Wrapper:
    """Build the wrapper that sources ``library`` and calls ``function``."""
    if family is HostFamily.WINDOWS:
        return Wrapper(
            function=function,
            path=bin_dir / f"{function}{WINDOWS_WRAPPER_SUFFIX}",
            content=f"@echo off\n{POSIX_INTERPRETER} -c \"source '{library}' && {function} %*\"",
        )

    return Wrapper(
        function=function,
        path=bin_dir / function,
        content=f"#!/usr/bin/env {POSIX_INTERPRETER}\nsource '{library}'\n{function} \"$@\"",
    )


def write_wrapper(wrapper: Wrapper, family: HostFamily) -> Path:
    """Write ``wrapper`` to disk, making it executable on POSIX hosts.

    The bin directory must already exist; names containing a path separator
    are not given directories of their own.

    Raises:
        DestinationWriteError: If the file cannot be written.
    """
    require_parent_dir(wrapper.path)
    mode = DEFAULT_WRAPPER_PERMS if family is HostFamily.POSIX else None
    try:
        atomic_write(wrapper.path, wrapper.content.encode("utf-8", errors="surrogateescape"), mode=mode)
    except OSError as e:
        raise DestinationWriteError(f"cannot write wrapper {wrapper.path}: {e}") from e

    logger.debug("Wrote wrapper", function=wrapper.function, path=str(wrapper.path))
    return wrapper.path


# 🛠️📦🔚
