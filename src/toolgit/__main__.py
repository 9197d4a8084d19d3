#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Allow ``python -m toolgit`` to run the installer."""

from __future__ import annotations

from toolgit.cli import main

if __name__ == "__main__":
    main()

# 🛠️📦🔚
