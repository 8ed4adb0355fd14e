"""Exception hierarchy for pathstr."""


class PathStrError(Exception):
    """Base exception for all pathstr errors."""

    pass


class ConfigError(PathStrError):
    """Configuration or environment error."""

    pass


class InvalidUtf8Error(PathStrError):
    """A path value contains data with no valid utf-8 text interpretation.

    Only the lossy display rendering of the offending value is kept. It is
    meant for error reporting and must not be used as converted output.
    """

    __slots__ = ("_display",)

    def __init__(self, display: str) -> None:
        super().__init__(display)
        self._display = display

    @property
    def display(self) -> str:
        """Lossy, human-readable rendering of the offending path."""
        return self._display

    def __str__(self) -> str:
        return f"Invalid utf-8 encoding: {self._display}"

    def __repr__(self) -> str:
        return f"InvalidUtf8Error({self._display!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidUtf8Error):
            return NotImplemented
        return self._display == other._display

    def __hash__(self) -> int:
        return hash((InvalidUtf8Error, self._display))

    def __reduce__(self):
        return (InvalidUtf8Error, (self._display,))
