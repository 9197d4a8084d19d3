#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Test paths.py - install layout resolution."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from toolgit.exceptions import HomeDirectoryError, InstallError
from toolgit.paths import InstallPaths, resolve_home, resolve_install_paths


@pytest.mark.unit
class TestInstallPaths:
    """Test the computed install layout."""

    def test_layout_under_home(self, tmp_path: Path) -> None:
        """Test every path hangs off ~/.local."""
        paths = InstallPaths.for_home(tmp_path)

        assert paths.home == tmp_path
        assert paths.prefix == tmp_path / ".local"
        assert paths.lib_dir == tmp_path / ".local" / "lib" / "ToolGit"
        assert paths.bin_dir == tmp_path / ".local" / "bin"
        assert paths.library == paths.lib_dir / "git_helpers.sh"

    def test_source_is_relative(self, tmp_path: Path) -> None:
        """Test the source script is read relative to the working directory."""
        paths = InstallPaths.for_home(tmp_path)
        assert not paths.source.is_absolute()
        assert paths.source == Path("bin") / "git_helpers.sh"

    def test_resolve_uses_home_environment(self, fake_home: Path) -> None:
        """Test the home directory comes from the OS."""
        assert resolve_install_paths().home == fake_home

    def test_resolve_with_explicit_home(self, tmp_path: Path) -> None:
        """Test an explicit home skips the lookup."""
        with patch("toolgit.paths.resolve_home") as mock_resolve:
            paths = resolve_install_paths(tmp_path)
        mock_resolve.assert_not_called()
        assert paths.home == tmp_path


@pytest.mark.unit
class TestResolveHome:
    """Test home directory lookup failures."""

    def test_home_unavailable(self) -> None:
        """Test a missing home directory becomes HomeDirectoryError."""
        with patch.object(Path, "home", side_effect=RuntimeError("Could not determine home directory.")):
            with pytest.raises(HomeDirectoryError, match="Could not determine home directory"):
                resolve_home()

    def test_is_install_error(self) -> None:
        """Test callers can catch every step failure as InstallError."""
        assert issubclass(HomeDirectoryError, InstallError)


# 🛠️📦🔚
