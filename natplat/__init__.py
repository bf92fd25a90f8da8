"""Host platform and architecture identification with native file naming."""

from natplat.platform import (
    Arch,
    Platform,
    PlatformInfo,
    current_arch,
    current_platform,
    detect,
)

__version__ = "1.0.0"

__all__ = [
    "Arch",
    "Platform",
    "PlatformInfo",
    "current_arch",
    "current_platform",
    "detect",
    "__version__",
]
