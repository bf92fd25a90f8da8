"""Platform and architecture detection.

This module provides the `Platform` and `Arch` enums, pure resolvers mapping
raw host strings onto them, and process-wide accessors for the current host.
The accessors resolve lazily on first call and return the same member for
the rest of the process, even when called from several threads at once.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from natplat.core.once import once

from .host import HostProbe, probe_host
from .naming import unix_library_name, with_extension

__all__ = [
    "Platform",
    "Arch",
    "LibraryKind",
    "NameKind",
    "PlatformInfo",
    "current_arch",
    "current_platform",
    "detect",
    "host_probe",
    "resolve_arch",
    "resolve_platform",
    "is_freebsd",
    "is_linux",
    "is_macos",
    "is_windows",
]


class LibraryKind(Enum):
    """Kind of native library."""

    SHARED = "shared"
    STATIC = "static"

    def __str__(self) -> str:
        return self.value


class NameKind(Enum):
    """Kind of native file whose name a platform can compute."""

    SCRIPT = "script"
    EXECUTABLE = "executable"
    SHARED_LIBRARY = "shared"
    STATIC_LIBRARY = "static"

    def __str__(self) -> str:
        return self.value


class Platform(Enum):
    """Operating system family.

    Each member carries the naming rules of its family. Members are the
    only instances that exist, so identity comparison is safe.
    """

    UNKNOWN = "unknown"
    FREEBSD = "freebsd"
    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"

    def __str__(self) -> str:
        return self.family_name

    @property
    def family_name(self) -> str:
        """Lowercase, stable name of this family."""
        return self.value

    @property
    def is_unix(self) -> bool:
        return self in (Platform.FREEBSD, Platform.LINUX, Platform.MACOS)

    # -- executables and scripts ------------------------------------------

    @property
    def executable_suffix(self) -> str:
        """Suffix of executables including the dot, or "" if none."""
        return ".exe" if self is Platform.WINDOWS else ""

    def script_name(self, script_path: str) -> str:
        """Convert a script path to this platform's native script form.

        Example: script_name("bin/run.sh") -> "bin/run.bat" on Windows,
        unchanged elsewhere.
        """
        if self is Platform.WINDOWS:
            return with_extension(script_path, ".bat")
        return script_path

    def executable_name(self, executable_path: str) -> str:
        """Example: executable_name("ninja") -> "ninja.exe" on Windows."""
        if self is Platform.WINDOWS:
            return with_extension(executable_path, self.executable_suffix)
        return executable_path

    # -- libraries ----------------------------------------------------------

    @property
    def shared_library_suffix(self) -> str:
        """Suffix of shared libraries including the dot."""
        if self is Platform.FREEBSD:
            return Platform.LINUX.shared_library_suffix
        return {
            Platform.UNKNOWN: "",
            Platform.LINUX: ".so",
            Platform.MACOS: ".dylib",
            Platform.WINDOWS: ".dll",
        }[self]

    @property
    def static_library_suffix(self) -> str:
        """Suffix of static libraries including the dot."""
        if self is Platform.FREEBSD:
            return Platform.LINUX.static_library_suffix
        return {
            Platform.UNKNOWN: "",
            Platform.LINUX: ".a",
            Platform.MACOS: ".a",
            Platform.WINDOWS: ".lib",
        }[self]

    def shared_library_name(self, library_name: str) -> str:
        """Example: "foo" -> "libfoo.so" on Linux, "foo.dll" on Windows."""
        return self._library_name(library_name, self.shared_library_suffix)

    def static_library_name(self, library_name: str) -> str:
        """Example: "foo" -> "libfoo.a" on Linux, "foo.lib" on Windows."""
        return self._library_name(library_name, self.static_library_suffix)

    def library_name(self, library_name: str, kind: LibraryKind) -> str:
        if kind is LibraryKind.SHARED:
            return self.shared_library_name(library_name)
        return self.static_library_name(library_name)

    def file_name(self, path: str, kind: NameKind) -> str:
        """Dispatch to the naming rule for `kind`."""
        match kind:
            case NameKind.SCRIPT:
                return self.script_name(path)
            case NameKind.EXECUTABLE:
                return self.executable_name(path)
            case NameKind.SHARED_LIBRARY:
                return self.shared_library_name(path)
            case NameKind.STATIC_LIBRARY:
                return self.static_library_name(path)

    def _library_name(self, library_name: str, suffix: str) -> str:
        if self is Platform.UNKNOWN:
            return library_name
        if self is Platform.WINDOWS:
            return with_extension(library_name, suffix)
        return unix_library_name(library_name, suffix)


class Arch(Enum):
    """CPU architecture."""

    X64 = auto()
    X86 = auto()
    ARM64 = auto()
    ARM32 = auto()
    PPC64LE = auto()
    RISCV64 = auto()
    UNKNOWN = auto()

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def is_64bit(self) -> bool:
        return self in (Arch.X64, Arch.ARM64, Arch.PPC64LE, Arch.RISCV64)


@dataclass(frozen=True, slots=True)
class PlatformInfo:
    """Platform and architecture of a host.

    Use `detect()` for the current host.
    """

    platform: Platform
    arch: Arch

    @property
    def is_windows(self) -> bool:
        return self.platform is Platform.WINDOWS

    @property
    def is_linux(self) -> bool:
        return self.platform is Platform.LINUX

    @property
    def is_macos(self) -> bool:
        return self.platform is Platform.MACOS

    @property
    def is_freebsd(self) -> bool:
        return self.platform is Platform.FREEBSD

    @property
    def is_unix(self) -> bool:
        return self.platform.is_unix

    @property
    def is_64bit(self) -> bool:
        return self.arch.is_64bit

    def __str__(self) -> str:
        return f"{self.platform}-{self.arch}"


def resolve_platform(os_name: str) -> Platform:
    """Map a raw OS name onto a Platform. First match wins, never raises."""
    if os_name == "FreeBSD":
        return Platform.FREEBSD
    # "Unit" is matched as a bare prefix on purpose.
    if os_name.startswith(("Linux", "SunOS", "Unit")):
        return Platform.LINUX
    if os_name.startswith(("Mac OS X", "Darwin")):
        return Platform.MACOS
    if os_name.startswith("Windows"):
        return Platform.WINDOWS
    return Platform.UNKNOWN


def resolve_arch(platform: Platform, os_arch: str) -> Arch:
    """Map a raw architecture name onto an Arch, using the rules of `platform`.

    A recognized platform always yields its fallback for unrecognized
    strings; only Platform.UNKNOWN yields Arch.UNKNOWN.
    """
    arch = os_arch.lower()
    match platform:
        case Platform.FREEBSD:
            return Arch.X64
        case Platform.LINUX:
            if arch.startswith(("arm", "aarch64")):
                if "64" in arch or arch.startswith("armv8"):
                    return Arch.ARM64
                return Arch.ARM32
            if arch.startswith("ppc"):
                return Arch.PPC64LE
            if arch.startswith("riscv"):
                return Arch.RISCV64
            return Arch.X64
        case Platform.MACOS:
            return Arch.ARM64 if arch.startswith("aarch64") else Arch.X64
        case Platform.WINDOWS:
            if "64" in arch:
                return Arch.ARM64 if arch.startswith("aarch64") else Arch.X64
            return Arch.X86
        case Platform.UNKNOWN:
            return Arch.UNKNOWN


@once
def host_probe() -> HostProbe:
    """Raw host strings behind `current_platform` and `current_arch`.

    Read once, so the platform and the architecture always come from the
    same probe.
    """
    return probe_host()


@once
def current_platform() -> Platform:
    """Platform of the running host (resolved once per process)."""
    return resolve_platform(host_probe().os_name)


@once
def current_arch() -> Arch:
    """Architecture of the running host (resolved once per process)."""
    return resolve_arch(current_platform(), host_probe().os_arch)


@once
def detect() -> PlatformInfo:
    """Complete platform information for the running host (resolved once)."""
    return PlatformInfo(platform=current_platform(), arch=current_arch())


def is_windows() -> bool:
    return current_platform() is Platform.WINDOWS


def is_linux() -> bool:
    return current_platform() is Platform.LINUX


def is_macos() -> bool:
    return current_platform() is Platform.MACOS


def is_freebsd() -> bool:
    return current_platform() is Platform.FREEBSD
