"""Fallible conversion of filesystem paths to utf-8 text."""

try:
    from importlib.metadata import version

    __version__ = version("pathstr")
except Exception:
    __version__ = "unknown"

from .core.convert import display, try_to_str, try_to_str_opt
from .core.exceptions import InvalidUtf8Error, PathStrError
from .core.fragments import extension, file_name, file_stem, parent

__all__ = [
    "__version__",
    "display",
    "extension",
    "file_name",
    "file_stem",
    "parent",
    "try_to_str",
    "try_to_str_opt",
    "InvalidUtf8Error",
    "PathStrError",
]
