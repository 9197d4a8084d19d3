#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for the ToolGit installer."""

from __future__ import annotations

# =================================
# Install layout
# =================================
PREFIX_DIR_NAME = ".local"
LIB_DIR_PARTS = ("lib", "ToolGit")
BIN_DIR_NAME = "bin"

HELPER_SCRIPT_NAME = "git_helpers.sh"
SOURCE_SCRIPT_PARTS = (".", "bin", HELPER_SCRIPT_NAME)

# =================================
# File permissions defaults
# =================================
DEFAULT_DIR_PERMS = 0o755  # rwxr-xr-x
DEFAULT_LIBRARY_PERMS = 0o644  # rw-r--r--
DEFAULT_WRAPPER_PERMS = 0o755  # rwxr-xr-x

# =================================
# Function discovery
# =================================
FUNCTION_PREFIX = "gh_"
PARAMETER_LIST_MARKER = "()"

# =================================
# Wrapper templates
# =================================
POSIX_INTERPRETER = "bash"
WINDOWS_WRAPPER_SUFFIX = ".bat"

# Used in the completion hint when the script defines no gh_help.
DEFAULT_EXAMPLE_COMMAND = "gh_help"

# =================================
# Logging defaults
# =================================
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_SETUP_LOG_LEVEL = "WARNING"

# 🛠️📦🔚
