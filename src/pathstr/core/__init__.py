"""Core logic for pathstr (independent of CLI)."""

__all__ = [
    "convert",
    "fragments",
    "models",
    "config",
    "types",
    "exceptions",
]
