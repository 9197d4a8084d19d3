#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for ToolGit."""

from __future__ import annotations

from provide.foundation.errors import FoundationError


class ToolGitError(FoundationError):
    """Base exception for all ToolGit errors."""

    pass


class ConfigurationError(ToolGitError):
    """Raised when a TOOLGIT_* environment setting is invalid."""

    pass


class InstallError(ToolGitError):
    """Raised when any installation step fails."""

    pass


class HomeDirectoryError(InstallError):
    """Raised when the user's home directory cannot be determined."""

    pass


class DirectoryCreationError(InstallError):
    """Raised when the library or wrapper directory cannot be created."""

    pass


class SourceReadError(InstallError):
    """Raised when the helper script cannot be read."""

    pass


class DestinationWriteError(InstallError):
    """Raised when the installed library or a wrapper cannot be written."""

    pass


# 🛠️📦🔚
