#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Textual discovery of ``gh_`` shell functions in the helper script.

Matching is a prefix/substring heuristic, not a shell parse: a trimmed line
counts when it starts with ``gh_`` and contains ``()`` anywhere. Comments or
string literals that happen to match are reported too. Names are neither
deduplicated nor validated; wrapper filenames depend on them exactly.
"""

from __future__ import annotations

from toolgit.config.defaults import FUNCTION_PREFIX, PARAMETER_LIST_MARKER


def decode_script(data: bytes) -> str:
    """Decode script bytes for scanning without failing on invalid UTF-8."""
    return data.decode("utf-8", errors="surrogateescape")


def match_function_name(line: str) -> str | None:
    """Return the function name declared on ``line``, or None if it does not match."""
    line = line.strip()
    if not line.startswith(FUNCTION_PREFIX) or PARAMETER_LIST_MARKER not in line:
        return None
    return line.split("(")[0]


def discover_functions(content: str) -> list[str]:
    """Return every matching function name in line order, duplicates included."""
    names = []
    for line in content.split("\n"):
        name = match_function_name(line)
        if name is not None:
            names.append(name)
    return names


# 🛠️📦🔚
