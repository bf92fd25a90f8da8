"""Options shared by commands that resolve a host."""

from __future__ import annotations

import typer

__all__ = ["ARCH_OPTION", "CONFIG_OPTION", "OS_OPTION", "VERBOSE_OPTION"]

OS_OPTION = typer.Option(
    None,
    "--os",
    help="Raw OS name to resolve instead of the current host (e.g. 'Windows 11').",
)
ARCH_OPTION = typer.Option(
    None,
    "--arch",
    help="Raw architecture name to resolve instead of the current host (e.g. 'aarch64').",
)
CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="Config file (default: ./natplat.toml if present).",
)
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Show raw host strings.")
