"""Edits invoked by an annotation UI on the line at `target`.

Every edit works on a clone and finishes with a full re-encode, so the
argument stays valid as an undo snapshot. Declined edits return the
argument itself. The `inert` keyword is passed on to the re-encode: see
`codec` for what it does to deleted and ignored lines.
"""

import logging

from . import IndexOutOfRangeError, Label, Lines, clone
from .codec import _point

__all__ = [
    "demote_descendants",
    "insert_break",
    "delete",
    "exclude",
    "join",
    "increase_indent",
    "decrease_indent",
    "relabel",
]

logger = logging.getLogger(__name__)


def _target(lines: Lines, target: int) -> None:
    if not 0 <= target < len(lines):
        raise IndexOutOfRangeError(f"line {target} not in [0, {len(lines)})")


def demote_descendants(lines: Lines, target: int) -> Lines:
    """Move the children of an opener at `target` up one level, in place.

    Used before `target` stops opening a block, so its children become its
    siblings instead of hanging under nothing.
    """
    opener = lines[target]
    if opener.label != Label.INDENTED_BLOCK:
        return lines
    index = target + 1
    while index < len(lines) and lines[index].indent > opener.indent:
        lines[index].indent -= 1
        index += 1
    return lines


def relabel(
    lines: Lines, target: int, label: Label | str, *, inert: bool = True
) -> Lines:
    """Give `target` a transition label that does not open a block."""
    _target(lines, target)
    label = Label(label)
    if label == Label.INDENTED_BLOCK:
        raise ValueError("blocks are opened by indenting the next line")
    lines = demote_descendants(clone(lines), target)
    lines[target].label = label
    logger.debug("line %d relabeled %r", target, label.value)
    return _point(lines, inert=inert)


def insert_break(lines: Lines, target: int, *, inert: bool = True) -> Lines:
    return relabel(lines, target, Label.SAME_LEVEL, inert=inert)


def delete(lines: Lines, target: int, *, inert: bool = True) -> Lines:
    return relabel(lines, target, Label.DELETE, inert=inert)


def exclude(lines: Lines, target: int, *, inert: bool = True) -> Lines:
    return relabel(lines, target, Label.IGNORE, inert=inert)


def join(lines: Lines, target: int, *, inert: bool = True) -> Lines:
    """Backspace: continue the paragraph of `target` into the next line."""
    _target(lines, target)
    lines = demote_descendants(clone(lines), target)
    lines[target].label = Label.CONTINUOUS
    after = target + 1
    if after < len(lines) and lines[after].indent != lines[target].indent:
        lines[after].indent = lines[target].indent
    return _point(lines, inert=inert)


def increase_indent(lines: Lines, target: int, *, inert: bool = True) -> Lines:
    _target(lines, target)
    # nothing deeper than one level below the previous line
    if target == 0 or lines[target - 1].indent < lines[target].indent:
        logger.debug("line %d can't be indented further", target)
        return lines
    lines = clone(lines)
    lines[target].indent += 1
    lines[target].label = Label.SAME_LEVEL
    return _point(lines, inert=inert)


def decrease_indent(lines: Lines, target: int, *, inert: bool = True) -> Lines:
    _target(lines, target)
    if target == len(lines) - 1 or lines[target].indent == 0:
        logger.debug("line %d can't be dedented", target)
        return lines
    lines = demote_descendants(clone(lines), target)
    lines[target].indent -= 1
    lines[target].label = Label.SAME_LEVEL
    return _point(lines, inert=inert)
