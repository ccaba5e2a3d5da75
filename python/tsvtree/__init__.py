from enum import StrEnum
from typing import Any, TypeAlias

from .pointer import ROOT, UNSET

__all__ = [
    "ROOT",
    "UNSET",
    "Label",
    "Line",
    "Lines",
    "clone",
    "MalformedRecordError",
    "InvalidPointerError",
    "IndexOutOfRangeError",
]


class Label(StrEnum):
    """Transition from a line to the line after it.

    The values are the single characters of the pdf-struct annotation format.
    """

    CONTINUOUS = "c"  # same paragraph, the line break means nothing
    ADDRESS = "a"  # same paragraph, the line break matters
    BLOCK = "b"  # new paragraph in the same block
    SAME_LEVEL = "s"  # new sibling block
    INDENTED_BLOCK = "d"  # next line is the first child of this one
    DELETE = "e"
    IGNORE = "x"
    UNLABELED = ""

    @property
    def structural(self) -> bool:
        return self in (Label.SAME_LEVEL, Label.INDENTED_BLOCK)


class Line:
    __slots__ = ("text", "pointer", "label", "indent")

    def __init__(
        self,
        text: str,
        pointer: int = UNSET,
        label: Label | str = Label.UNLABELED,
        indent: int = 0,
    ):
        self.text = text
        self.pointer = pointer
        self.label = Label(label)
        self.indent = indent

    def copy(self) -> "Line":
        return Line(self.text, self.pointer, self.label, self.indent)

    def __eq__(self, other: Any) -> bool:
        match other:
            case Line():
                return (
                    self.text == other.text
                    and self.pointer == other.pointer
                    and self.label == other.label
                    and self.indent == other.indent
                )
        return NotImplemented

    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        return f"<Line#{self.indent} {self.pointer}:{self.label}={self.text}>"


Lines: TypeAlias = list[Line]


def clone(lines: Lines) -> Lines:
    return [line.copy() for line in lines]


# ------------------------------------------------------------------------------ errors


class MalformedRecordError(ValueError):
    """A TSV record is not `text<TAB>pointer<TAB>label`."""


class InvalidPointerError(ValueError):
    """A pointer refers forward, to its own line, or below `ROOT`."""


class IndexOutOfRangeError(IndexError):
    """An edit targeted a line that is not in the sequence."""
