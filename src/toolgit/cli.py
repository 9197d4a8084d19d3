#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""ToolGit command-line interface entrypoint."""

from __future__ import annotations

import os
import sys

from attrs import evolve
import click
from provide.foundation import TelemetryConfig, get_hub, logger
from provide.foundation.console import pout
from provide.foundation.utils import get_version

from toolgit.config import ToolGitRuntimeConfig
from toolgit.exceptions import ConfigurationError, ToolGitError
from toolgit.installer import Installer

# Set up Windows Unicode support early
if sys.platform == "win32":
    # Progress lines carry emoji
    if not os.environ.get("PYTHONIOENCODING"):
        os.environ["PYTHONIOENCODING"] = "utf-8"
    if not os.environ.get("PYTHONUTF8"):
        os.environ["PYTHONUTF8"] = "1"

__version__ = get_version("toolgit", caller_file=__file__)


def setup_telemetry() -> None:
    """Initialize Foundation logging from TOOLGIT_* environment settings.

    Raises:
        ConfigurationError: If a TOOLGIT_* log level is not recognized.
    """
    try:
        toolgit_config = ToolGitRuntimeConfig.from_env()
    except ValueError as e:
        raise ConfigurationError(str(e)) from e

    # Read by Foundation while it sets itself up
    os.environ["FOUNDATION_SETUP_LOG_LEVEL"] = toolgit_config.setup_log_level

    base_telemetry = TelemetryConfig.from_env()

    telemetry_config = evolve(
        base_telemetry,
        service_name="toolgit",
        logging=evolve(
            base_telemetry.logging,
            default_level=toolgit_config.log_level,  # type: ignore[arg-type]
        ),
    )

    # Foundation auto-initializes on import; force replaces that setup.
    hub = get_hub()
    hub.initialize_foundation(telemetry_config, force=True)


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="toolgit-install",
    message="%(prog)s version %(version)s",
)
def cli() -> None:
    """Install git_helpers.sh and a wrapper command for each gh_* function.

    Reads ./bin/git_helpers.sh, copies it to ~/.local/lib/ToolGit and writes
    the wrappers to ~/.local/bin.

    Configure logging via environment variables:
    - TOOLGIT_LOG_LEVEL: Set log level (trace, debug, info, warning, error)
    - TOOLGIT_SETUP_LOG_LEVEL: Control Foundation's initialization logs
    """
    try:
        setup_telemetry()
        Installer().run()
    except ToolGitError as e:
        logger.error("Installation failed", error=str(e), error_type=type(e).__name__)
        pout(f"❌ Error: {e}")
        raise click.Abort() from e


main = cli

if __name__ == "__main__":
    cli()

# 🛠️📦🔚
