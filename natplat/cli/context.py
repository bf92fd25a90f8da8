from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from natplat.core.config import DEFAULT_CONFIG_NAME, Config, load_config, load_config_or_default
from natplat.core.errors import ErrorCode
from natplat.core.result import Err
from natplat.output.console import ConsoleProtocol, RichConsole, Style
from natplat.platform.detection import (
    PlatformInfo,
    detect,
    host_probe,
    resolve_arch,
    resolve_platform,
)
from natplat.platform.host import HostProbe


@dataclass(frozen=True, slots=True)
class CLIContext:
    platform: PlatformInfo
    probe: HostProbe
    console: ConsoleProtocol


def _load(config_path: Path | None, console: ConsoleProtocol) -> Config:
    if config_path is None:
        return load_config_or_default(Path.cwd() / DEFAULT_CONFIG_NAME)

    result = load_config(config_path)
    if isinstance(result, Err):
        console.error(result.error.message)
        raise typer.Exit(code=int(ErrorCode.IO_ERROR))
    return result.value


def build_context(
    *,
    os_name: str | None = None,
    os_arch: str | None = None,
    config_path: Path | None = None,
    verbose: bool = False,
    console: ConsoleProtocol | None = None,
) -> CLIContext:
    """Resolve the host to report on.

    Precedence per raw string: command-line option, then config file, then
    the probed host (which itself honours the environment overrides).
    """
    out = console if console is not None else RichConsole()
    config = _load(config_path, out)

    # The same probe detect() resolves from, so --verbose shows what was used.
    probe = host_probe()
    name = os_name or config.host.os_name
    arch = os_arch or config.host.os_arch

    if name is None and arch is None:
        info = detect()
    else:
        probe = HostProbe(
            os_name=name if name is not None else probe.os_name,
            os_arch=arch if arch is not None else probe.os_arch,
            os_name_source=probe.os_name_source if name is None else "override",
            os_arch_source=probe.os_arch_source if arch is None else "override",
        )
        platform = resolve_platform(probe.os_name)
        info = PlatformInfo(platform=platform, arch=resolve_arch(platform, probe.os_arch))

    if verbose:
        out.print(f"probe: {probe}", Style.DIM)

    return CLIContext(platform=info, probe=probe, console=out)
