#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Installation of the git helper library and its command wrappers."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from provide.foundation import logger
from provide.foundation.console import pout
from provide.foundation.file import atomic_write
from provide.foundation.file.directory import ensure_dir

from toolgit.config.defaults import (
    DEFAULT_DIR_PERMS,
    DEFAULT_EXAMPLE_COMMAND,
    DEFAULT_LIBRARY_PERMS,
    HELPER_SCRIPT_NAME,
)
from toolgit.discovery import decode_script, discover_functions
from toolgit.exceptions import DestinationWriteError, DirectoryCreationError, SourceReadError
from toolgit.paths import InstallPaths, require_parent_dir, resolve_install_paths
from toolgit.wrappers import HostFamily, detect_host_family, render_wrapper, write_wrapper


@dataclass
class InstallResult:
    """Outcome of a completed installation."""

    paths: InstallPaths
    functions: list[str] = field(default_factory=list)
    wrappers: list[Path] = field(default_factory=list)


class Installer:
    """Installs ``git_helpers.sh`` and generates one wrapper per ``gh_`` function.

    Every step runs to completion before the next starts, and the first failure
    propagates as an ``InstallError`` subclass. Re-running after fixing the
    cause is the only recovery path.
    """

    def __init__(self, paths: InstallPaths | None = None, host_family: HostFamily | None = None) -> None:
        self.paths = paths if paths is not None else resolve_install_paths()
        self.host_family = host_family if host_family is not None else detect_host_family()

    def run(self) -> InstallResult:
        """Perform the full installation and print progress."""
        logger.info(
            "Starting installation",
            library=str(self.paths.library),
            host_family=self.host_family.value,
        )
        result = InstallResult(paths=self.paths)

        self.prepare_directories()
        data = self.install_library()

        result.functions = discover_functions(decode_script(data))
        for function in result.functions:
            wrapper = render_wrapper(function, self.paths.library, self.paths.bin_dir, self.host_family)
            result.wrappers.append(write_wrapper(wrapper, self.host_family))
            pout(f"🛠 Created wrapper: {wrapper.path}")

        self.report_completion(result)
        logger.info("Installation complete", wrappers=len(result.wrappers))
        return result

    def prepare_directories(self) -> None:
        """Create the library and wrapper directories if they are missing."""
        for directory in (self.paths.lib_dir, self.paths.bin_dir):
            try:
                ensure_dir(directory, mode=DEFAULT_DIR_PERMS)
            except OSError as e:
                raise DirectoryCreationError(f"cannot create directory {directory}: {e}") from e

    def install_library(self) -> bytes:
        """Copy the helper script into the library directory, returning its bytes."""
        source = self.paths.source
        try:
            data = source.read_bytes()
        except OSError as e:
            raise SourceReadError(f"cannot read {source}: {e}") from e

        destination = self.paths.library
        require_parent_dir(destination)
        try:
            atomic_write(destination, data, mode=DEFAULT_LIBRARY_PERMS)
        except OSError as e:
            raise DestinationWriteError(f"cannot write {destination}: {e}") from e

        logger.debug("Installed helper library", source=str(source), destination=str(destination), size=len(data))
        pout(f"📦 {HELPER_SCRIPT_NAME} installed to: {destination}")
        return data

    def report_completion(self, result: InstallResult) -> None:
        pout("✅ ToolGit installation complete!")
        pout(f"💡 Make sure {self.paths.bin_dir} is in your PATH.")
        pout(f"💡 You can now run gh_* commands directly, e.g., {example_command(result.functions)}")


def example_command(functions: list[str]) -> str:
    """Pick the command shown in the completion hint."""
    if DEFAULT_EXAMPLE_COMMAND in functions or not functions:
        return DEFAULT_EXAMPLE_COMMAND
    return functions[0]


def install(paths: InstallPaths | None = None, host_family: HostFamily | None = None) -> InstallResult:
    """Install the helper library and wrappers for the current user."""
    return Installer(paths=paths, host_family=host_family).run()


# 🛠️📦🔚
