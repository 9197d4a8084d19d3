#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""ToolGit installer: git helper library setup and wrapper generation."""

from __future__ import annotations

from provide.foundation.utils import get_version

from toolgit.discovery import discover_functions
from toolgit.exceptions import (
    ConfigurationError,
    DestinationWriteError,
    DirectoryCreationError,
    HomeDirectoryError,
    InstallError,
    SourceReadError,
    ToolGitError,
)
from toolgit.installer import InstallResult, Installer, install
from toolgit.paths import InstallPaths, resolve_install_paths
from toolgit.wrappers import HostFamily, Wrapper, detect_host_family, render_wrapper

__version__ = get_version("toolgit", caller_file=__file__)

__all__ = [
    "ConfigurationError",
    "DestinationWriteError",
    "DirectoryCreationError",
    "HomeDirectoryError",
    "HostFamily",
    "InstallError",
    "InstallPaths",
    "InstallResult",
    "Installer",
    "SourceReadError",
    "ToolGitError",
    "Wrapper",
    "__version__",
    "detect_host_family",
    "discover_functions",
    "install",
    "render_wrapper",
    "resolve_install_paths",
]

# 🛠️📦🔚
