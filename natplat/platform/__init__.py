"""Platform abstraction layer."""

from .detection import (
    Arch,
    LibraryKind,
    NameKind,
    Platform,
    PlatformInfo,
    current_arch,
    current_platform,
    detect,
    host_probe,
    is_freebsd,
    is_linux,
    is_macos,
    is_windows,
    resolve_arch,
    resolve_platform,
)
from .host import (
    HostProbe,
    probe_host,
)
from .naming import (
    remove_extension,
    unix_library_name,
    with_extension,
)

__all__ = [
    # detection
    "Arch",
    "LibraryKind",
    "NameKind",
    "Platform",
    "PlatformInfo",
    "current_arch",
    "current_platform",
    "detect",
    "host_probe",
    "is_freebsd",
    "is_linux",
    "is_macos",
    "is_windows",
    "resolve_arch",
    "resolve_platform",
    # host
    "HostProbe",
    "probe_host",
    # naming
    "remove_extension",
    "unix_library_name",
    "with_extension",
]
