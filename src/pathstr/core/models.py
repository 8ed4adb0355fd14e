"""Pydantic models describing conversion outcomes for reporting."""

from typing import Literal

from pydantic import BaseModel, Field

from . import fragments
from .convert import display, try_to_str, try_to_str_opt
from .exceptions import InvalidUtf8Error
from .types import PathInput

FragmentStatus = Literal["ok", "absent", "error"]


class ConversionReport(BaseModel):
    """Outcome of converting one full path to text."""

    path: str = Field(description="Lossy display rendering of the input path")
    text: str | None = Field(default=None, description="Converted text, if valid")
    error: str | None = Field(default=None, description="Error message, if invalid")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def from_path(cls, path: PathInput) -> "ConversionReport":
        try:
            return cls(path=display(path), text=try_to_str(path))
        except InvalidUtf8Error as e:
            return cls(path=display(path), error=str(e))


class FragmentValue(BaseModel):
    """Outcome of converting one optional path fragment."""

    status: FragmentStatus
    text: str | None = None
    error: str | None = None


class FragmentReport(BaseModel):
    """Parent, file name, file stem and extension of a path, as text."""

    path: str = Field(description="Lossy display rendering of the input path")
    parent: FragmentValue
    file_name: FragmentValue
    file_stem: FragmentValue
    extension: FragmentValue

    @property
    def ok(self) -> bool:
        return all(value.status != "error" for _, value in self.items())

    def items(self) -> list[tuple[str, FragmentValue]]:
        return [
            ("parent", self.parent),
            ("file_name", self.file_name),
            ("file_stem", self.file_stem),
            ("extension", self.extension),
        ]

    @classmethod
    def from_path(cls, path: PathInput) -> "FragmentReport":
        return cls(
            path=display(path),
            parent=_fragment_value(fragments.parent(path)),
            file_name=_fragment_value(fragments.file_name(path)),
            file_stem=_fragment_value(fragments.file_stem(path)),
            extension=_fragment_value(fragments.extension(path)),
        )


def _fragment_value(fragment: PathInput | None) -> FragmentValue:
    try:
        text = try_to_str_opt(fragment)
    except InvalidUtf8Error as e:
        return FragmentValue(status="error", error=str(e))
    if text is None:
        return FragmentValue(status="absent")
    return FragmentValue(status="ok", text=text)
