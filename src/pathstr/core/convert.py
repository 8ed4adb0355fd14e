"""Fallible conversion of native path values to utf-8 text.

Python keeps paths that are not valid text in a lossless native form: on
POSIX, undecodable bytes become lone surrogates (``surrogateescape``), and on
Windows unpaired UTF-16 units stay as lone surrogates. ``str(path)`` happily
returns such strings, and they only blow up later when written or sent
somewhere. The helpers here check the value up front and raise
``InvalidUtf8Error`` instead.

Example:
    text = try_to_str(Path("abc/def/ghi.xyz"))  # "abc/def/ghi.xyz"
    ext = try_to_str_opt(extension(Path("README")))  # None
    try_to_str(b"\\xf0\\x90\\x80")  # raises InvalidUtf8Error
"""

import os

from .exceptions import InvalidUtf8Error
from .types import PathInput


def _native(path: PathInput) -> str:
    """Return the platform-native string form of a path value."""
    if path is None:
        raise TypeError("expected str, bytes or os.PathLike, not None")
    return os.fsdecode(path)


def display(path: PathInput) -> str:
    """Render a path for humans, substituting U+FFFD for non-text data.

    The result is lossy and only meant for diagnostics.
    """
    native = _native(path)
    try:
        raw = os.fsencode(native)
    except UnicodeEncodeError:
        # Surrogates outside the escape range (e.g. a str built by hand).
        raw = native.encode("utf-8", "surrogatepass")
    return raw.decode("utf-8", "replace")


def _validate(native: str) -> str:
    try:
        native.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidUtf8Error(display(native)) from None
    return native


def try_to_str(path: PathInput) -> str:
    """Convert a path to text, failing if it is not valid utf-8.

    Args:
        path: str, bytes or path-like object

    Returns:
        The text form of the path. A ``str`` argument is returned as-is.

    Raises:
        InvalidUtf8Error: path contains data with no text interpretation
    """
    return _validate(_native(path))


def try_to_str_opt(fragment: PathInput | None) -> str | None:
    """Convert an optional path fragment to optional text.

    ``None`` (an absent parent, name, stem or extension) maps to ``None``
    and is never an error.

    Raises:
        InvalidUtf8Error: fragment is present but not valid utf-8
    """
    if fragment is None:
        return None
    return _validate(_native(fragment))
