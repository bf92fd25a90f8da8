"""Info command - show the resolved platform, architecture and suffixes."""

from __future__ import annotations

from pathlib import Path

import typer

from natplat.cli.commands._options import ARCH_OPTION, CONFIG_OPTION, OS_OPTION, VERBOSE_OPTION
from natplat.cli.context import build_context
from natplat.core.errors import ErrorCode
from natplat.output.console import Style
from natplat.platform.detection import Platform, PlatformInfo


def info_payload(info: PlatformInfo) -> dict[str, object]:
    """Machine-readable description of a resolved host."""
    platform = info.platform
    return {
        "platform": str(platform),
        "arch": str(info.arch),
        "executable_suffix": platform.executable_suffix,
        "shared_library_suffix": platform.shared_library_suffix,
        "static_library_suffix": platform.static_library_suffix,
        "is_unix": platform.is_unix,
        "is_64bit": info.is_64bit,
    }


def info(
    os_name: str | None = OS_OPTION,
    os_arch: str | None = ARCH_OPTION,
    config: Path | None = CONFIG_OPTION,
    as_json: bool = typer.Option(False, "--json", help="Print JSON."),
    strict: bool = typer.Option(
        False, "--strict", help="Exit with an error if the platform is unknown."
    ),
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show platform, architecture and native file suffixes."""
    ctx = build_context(os_name=os_name, os_arch=os_arch, config_path=config, verbose=verbose)
    console = ctx.console
    resolved = ctx.platform

    if as_json:
        console.json(info_payload(resolved))
    else:
        console.field("platform", str(resolved.platform))
        console.field("arch", str(resolved.arch))
        console.field("executable", _suffix(resolved.platform.executable_suffix))
        console.field("shared lib", _suffix(resolved.platform.shared_library_suffix))
        console.field("static lib", _suffix(resolved.platform.static_library_suffix))

    if resolved.platform is Platform.UNKNOWN:
        if strict:
            console.error(f"unrecognized OS name: {ctx.probe.os_name!r}")
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
        if not as_json:
            console.print(f"unrecognized OS name: {ctx.probe.os_name!r}", Style.DIM)


def _suffix(value: str) -> str:
    return value or "(none)"
