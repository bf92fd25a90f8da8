"""Raw host strings consumed by platform and architecture detection.

The resolvers in `detection` expect host property names in their canonical
spelling ("Linux", "Windows 11", "Darwin", "amd64", "aarch64", ...). This
module is the only place that talks to the running interpreter to obtain
them.
"""

from __future__ import annotations

import os as _os
import platform as _platform
import sys as _sys
from dataclasses import dataclass
from typing import Literal

__all__ = [
    "ENV_OS_ARCH",
    "ENV_OS_NAME",
    "HostProbe",
    "probe_host",
    "read_os_arch",
    "read_os_name",
]

ENV_OS_NAME = "NATPLAT_OS_NAME"
ENV_OS_ARCH = "NATPLAT_OS_ARCH"

# "override" marks values supplied by the caller (CLI option or config file).
Source = Literal["host", "env", "override"]

# Python spells these differently from the canonical host property names.
_ARCH_ALIASES = {
    "arm64": "aarch64",
}


@dataclass(frozen=True, slots=True)
class HostProbe:
    """Raw OS name and architecture strings, with where each came from."""

    os_name: str
    os_arch: str
    os_name_source: Source = "host"
    os_arch_source: Source = "host"

    def __str__(self) -> str:
        return (
            f"os_name={self.os_name!r} ({self.os_name_source}), "
            f"os_arch={self.os_arch!r} ({self.os_arch_source})"
        )


def _env_override(name: str) -> str | None:
    value = _os.environ.get(name, "").strip()
    return value or None


def _is_windows_host() -> bool:
    return _sys.platform.lower().startswith(("win32", "cygwin", "msys"))


def read_os_name() -> str:
    """Return the host OS name as reported by the interpreter."""
    # NOTE: avoid platform.system() on Windows.
    # It may call platform.uname(), which may query WMI (slow/hangs on some machines).
    if _is_windows_host():
        return "Windows"
    return _platform.system()


def read_os_arch() -> str:
    """Return the host machine name, mapped to its canonical spelling."""
    if _is_windows_host():
        machine = (
            _os.environ.get("PROCESSOR_ARCHITEW6432")
            or _os.environ.get("PROCESSOR_ARCHITECTURE")
            or ""
        )
    else:
        machine = _platform.machine()
    return _ARCH_ALIASES.get(machine.lower(), machine)


def probe_host() -> HostProbe:
    """Read the raw host strings, honouring environment overrides.

    `NATPLAT_OS_NAME` and `NATPLAT_OS_ARCH` replace the probed values when
    set to a non-empty string.
    """
    os_name = _env_override(ENV_OS_NAME)
    os_arch = _env_override(ENV_OS_ARCH)
    return HostProbe(
        os_name=os_name if os_name is not None else read_os_name(),
        os_arch=os_arch if os_arch is not None else read_os_arch(),
        os_name_source="host" if os_name is None else "env",
        os_arch_source="host" if os_arch is None else "env",
    )
