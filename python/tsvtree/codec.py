"""Conversions between the two views of one outline.

The pointer view (`pointer` + `label` per line) is what the TSV file stores;
the indent view (`indent` per line) is what edits work on. Both functions
return a new sequence and leave their argument alone.

With `inert` (the default) deleted and ignored lines can't keep a block open:
a block holding nothing else is flattened onto its opener's level before
pointers are derived. Without it they nest like any other line.
"""

from . import InvalidPointerError, Label, Lines, clone
from .pointer import ROOT, UNSET, Blocks

__all__ = ["INERT", "indent_from_pointers", "pointers_from_indent"]

INERT = (Label.DELETE, Label.IGNORE)


def indent_from_pointers(lines: Lines) -> Lines:
    """Derive every `indent` from the pointer and label of the line before it."""
    return _indent(clone(lines))


def pointers_from_indent(lines: Lines, *, inert: bool = True) -> Lines:
    """Derive every `pointer` (and the opener labels) from adjacent indents."""
    return _point(clone(lines), inert=inert)


def _check(pointer: int, index: int) -> None:
    if pointer > index:
        raise InvalidPointerError(
            f"line {index + 1}: pointer {pointer} is not an earlier line"
        )
    if pointer < ROOT:
        raise InvalidPointerError(f"line {index + 1}: pointer {pointer} is below root")


def _indent(lines: Lines) -> Lines:
    current = 0
    for index, line in enumerate(lines):
        if index:
            previous = lines[index - 1]
            if previous.label == Label.INDENTED_BLOCK:
                current += 1
            elif previous.pointer > UNSET:
                current = lines[previous.pointer - 1].indent + 1
                if current > previous.indent + 1:
                    raise InvalidPointerError(
                        f"line {index}: pointer {previous.pointer} puts the next"
                        f" line {current - previous.indent} levels deeper"
                    )
            elif previous.pointer == ROOT:
                current = 0
        _check(line.pointer, index)
        line.indent = current
    return lines


def _lift(lines: Lines) -> Lines:
    for index, opener in enumerate(lines):
        end = index + 1
        while end < len(lines) and lines[end].indent > opener.indent:
            end += 1
        block = lines[index + 1 : end]
        if block and all(line.label in INERT for line in block):
            for line in block:
                line.indent = opener.indent
    return lines


def _point(lines: Lines, *, inert: bool = True) -> Lines:
    if lines and lines[0].indent:
        raise AssertionError("first line can't be indented")
    if inert:
        _lift(lines)
    blocks = Blocks()
    for index in range(1, len(lines)):
        line = lines[index - 1]
        match lines[index].indent - line.indent:
            case 0:
                line.pointer = UNSET
                if line.label == Label.INDENTED_BLOCK:
                    line.label = Label.SAME_LEVEL
            case 1:
                line.pointer = UNSET
                line.label = Label.INDENTED_BLOCK
                blocks.more(index)  # the 1-indexed reference to `line`
            case step if step < 0:
                blocks.less(-step)
                line.pointer = blocks.top()
                # the pointer decides where the next line goes, not the label
                if line.label == Label.INDENTED_BLOCK:
                    line.label = Label.SAME_LEVEL
            case step:
                raise AssertionError(
                    f"line {index + 1} is {step} levels deeper than line {index}"
                    f" @{blocks.path().getvalue()}"
                )
    return lines
