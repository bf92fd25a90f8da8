"""Name command - compute a platform-specific file name."""

from __future__ import annotations

from pathlib import Path

import typer

from natplat.cli.commands._options import ARCH_OPTION, CONFIG_OPTION, OS_OPTION, VERBOSE_OPTION
from natplat.cli.context import build_context
from natplat.core.errors import ErrorCode
from natplat.platform.detection import NameKind

_KINDS = ", ".join(str(k) for k in NameKind)


def parse_kind(value: str) -> NameKind | None:
    """Parse a kind name; accepts the enum value or its member name."""
    normalized = value.strip().lower().replace("-", "_")
    for kind in NameKind:
        if normalized in (kind.value, kind.name.lower()):
            return kind
    return None


def name(
    kind: str = typer.Argument(..., help=f"One of: {_KINDS}."),
    path: str = typer.Argument(..., help="Script, executable or library name/path."),
    os_name: str | None = OS_OPTION,
    os_arch: str | None = ARCH_OPTION,
    config: Path | None = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Print the native file name of PATH for the resolved platform."""
    ctx = build_context(os_name=os_name, os_arch=os_arch, config_path=config, verbose=verbose)

    parsed = parse_kind(kind)
    if parsed is None:
        ctx.console.error(f"unknown kind: {kind!r} (expected one of: {_KINDS})")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    ctx.console.print(ctx.platform.platform.file_name(path, parsed))
