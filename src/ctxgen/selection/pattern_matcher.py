"""Exact-string matching of names and root-relative paths against user patterns."""

from pathlib import Path
from typing import AbstractSet

from ctxgen.types import PathType


def normalize_pattern(pattern: str) -> str:
    """Convert the backslashes of a user pattern to forward slashes.

    Nothing else is touched: leading ``/`` or ``./`` and surrounding whitespace are
    part of the pattern and will not match a root-relative path.

    Example:
        >>> normalize_pattern("src\\\\main")
        'src/main'
        >>> normalize_pattern("./docs")
        './docs'
    """
    return pattern.replace("\\", "/")


def matches_name_or_path(relative_path: str, name: str, patterns: AbstractSet[str]) -> bool:
    """Check a filesystem entry against a set of name/path patterns.

    An entry matches when any pattern is:

    - its bare name (``App.txt`` matches ``src/main/App.txt`` and ``App.txt`` anywhere),
    - its full relative path, or
    - a directory prefix of its relative path (``src/main`` matches everything below it).

    Matching is exact and case-sensitive; there is no globbing. Blank patterns never match.

    Args:
        relative_path: Forward-slash path of the entry relative to the analysis root.
        name: The entry's own name (last path component).
        patterns: The user patterns.

    Returns:
        bool: True if any pattern matches.

    Example:
        >>> matches_name_or_path("src/main/App.txt", "App.txt", {"src/main"})
        True
        >>> matches_name_or_path("src/main/App.txt", "App.txt", {"src"})
        True
        >>> matches_name_or_path("other/App.txt", "App.txt", {"src"})
        False
        >>> matches_name_or_path("srcfoo/a.txt", "a.txt", {"src"})
        False
    """
    if not patterns:
        return False
    if name in patterns:
        return True

    relative_path = relative_path.replace("\\", "/")
    if relative_path in patterns:
        return True

    for pattern in patterns:
        if not pattern.strip():
            continue
        norm = normalize_pattern(pattern)
        if relative_path == norm:
            return True
        prefix = norm if norm.endswith("/") else norm + "/"
        if relative_path.startswith(prefix):
            return True
    return False


def extension_of(name: str) -> str:
    """Return the lower-cased extension of a file name, including the dot.

    Everything from the last dot on counts as the extension, so dot-files such as
    ``.gitignore`` have themselves as extension. Names without a dot have none.

    Example:
        >>> extension_of("App.JAVA")
        '.java'
        >>> extension_of("archive.tar.gz")
        '.gz'
        >>> extension_of(".gitignore")
        '.gitignore'
        >>> extension_of("Makefile")
        ''
    """
    idx = name.rfind(".")
    return name[idx:].lower() if idx >= 0 else ""


def name_of(relative_path: str) -> str:
    """Return the last component of a forward-slash relative path."""
    return relative_path.rstrip("/").rsplit("/", 1)[-1]


def relativize(root: PathType, path: PathType) -> str:
    """Return ``path`` relative to ``root`` as a forward-slash string.

    Falls back to the bare name of ``path`` when it does not lie under ``root``.

    Example:
        >>> relativize("/work/project", "/work/project/src/App.java")
        'src/App.java'
        >>> relativize("/work/project", "/elsewhere/App.java")
        'App.java'
    """
    path = Path(path)
    try:
        return path.relative_to(Path(root)).as_posix()
    except ValueError:
        return path.name
