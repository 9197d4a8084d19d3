#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""ToolGit configuration: install-layout constants and env-driven runtime settings."""

from __future__ import annotations

from toolgit.config.runtime import ToolGitRuntimeConfig, parse_log_level

__all__ = [
    "ToolGitRuntimeConfig",
    "parse_log_level",
]

# 🛠️📦🔚
