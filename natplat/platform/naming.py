"""String rules for native file names.

Both helpers operate on plain strings rather than `Path` objects: callers
pass names that may not exist on disk yet, may carry foreign separators,
and must come back with their spelling untouched.
"""

from __future__ import annotations

__all__ = [
    "remove_extension",
    "unix_library_name",
    "with_extension",
]


def unix_library_name(name: str, suffix: str) -> str:
    """Apply the `lib<name><suffix>` convention.

    The `lib` prefix goes in front of the last path segment, so directory
    components are kept. A name already ending with `suffix` is returned
    unchanged.

    Example:
        unix_library_name("dir/foo", ".so") -> "dir/libfoo.so"
    """
    if name.endswith(suffix):
        return name
    directory, sep, base = name.rpartition("/")
    return f"{directory}{sep}lib{base}{suffix}"


def remove_extension(path: str) -> str:
    """Strip the file extension, ignoring dots inside directory names."""
    name_start = max(path.rfind("/"), path.rfind("\\"))
    dot = path.rfind(".")
    if dot > name_start:
        return path[:dot]
    return path


def with_extension(path: str, extension: str) -> str:
    """Force `extension` onto `path`, replacing any existing one.

    The already-suffixed check is case-insensitive and keeps the input's
    casing: with_extension("RUN.BAT", ".bat") -> "RUN.BAT".
    """
    if path.lower().endswith(extension.lower()):
        return path
    return remove_extension(path) + extension
