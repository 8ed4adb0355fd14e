"""Optional path fragments: parent, file name, file stem, extension.

``pathlib`` reports a missing fragment as ``""`` or as the path itself
(``PurePath("/").parent == PurePath("/")``). These accessors return ``None``
instead, so an absent fragment can't be mistaken for a value. They only split
strings and never touch the filesystem.
"""

import os
from pathlib import PurePath

from .types import PathInput


def _pure(path: PathInput) -> PurePath:
    if isinstance(path, PurePath):
        return path
    return PurePath(os.fsdecode(path))


def parent(path: PathInput) -> str | None:
    """Return the parent path, or None for a root, anchor or empty path.

    A bare relative name like ``"abc"`` has the empty parent ``""``; pathlib's
    ``"."`` is only kept when the input itself starts with a ``.`` component.
    """
    p = _pure(path)
    up = p.parent
    if up == p:
        return None
    if not up.parts:
        if os.fsdecode(path).startswith(("./", "." + os.sep)):
            return "."
        return ""
    return str(up)


def file_name(path: PathInput) -> str | None:
    """Return the final component, or None if it is empty or ``..``."""
    name = _pure(path).name
    if not name or name == "..":
        return None
    return name


def _split_name(name: str) -> tuple[str, str | None]:
    # ".bashrc" has no extension; "foo." has an empty one.
    if name.startswith(".") and name.count(".") == 1:
        return name, None
    stem, dot, ext = name.rpartition(".")
    if not dot:
        return name, None
    return stem, ext


def file_stem(path: PathInput) -> str | None:
    """Return the file name without its extension, or None if there is no name."""
    name = file_name(path)
    if name is None:
        return None
    return _split_name(name)[0]


def extension(path: PathInput) -> str | None:
    """Return the text after the last dot of the file name, if any."""
    name = file_name(path)
    if name is None:
        return None
    return _split_name(name)[1]
