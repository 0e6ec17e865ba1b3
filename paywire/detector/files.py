"""File-list predicates shared by the ecosystem detectors."""

from collections.abc import Iterable


def has_suffix(files: Iterable[str], *suffixes: str) -> bool:
    """True if any path ends with one of the given suffixes."""
    return any(f.endswith(suffixes) for f in files)


def has_file_named(files: Iterable[str], name: str) -> bool:
    """True if any path's basename is exactly `name`.

    Accepts both "/" and "\\" separators since agents report paths from
    whatever OS they run on.
    """
    for f in files:
        basename = f.replace("\\", "/").rsplit("/", 1)[-1]
        if basename == name:
            return True
    return False
