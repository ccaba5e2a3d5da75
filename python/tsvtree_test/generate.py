from collections.abc import Callable
from random import choice, choices, randrange

from tsvtree import Label, Line, Lines
from tsvtree.codec import pointers_from_indent
from tsvtree import edit

printable = bytes(it for it in range(32, 127)).decode()
caller_labels = tuple(it for it in Label if not it.structural)


def relabel(lines: Lines, target: int, *, inert: bool = True) -> Lines:
    label = choice((Label.SAME_LEVEL, *caller_labels))
    return edit.relabel(lines, target, label, inert=inert)


edits: tuple[Callable[..., Lines], ...] = (
    edit.insert_break,
    edit.delete,
    edit.exclude,
    edit.join,
    edit.increase_indent,
    edit.decrease_indent,
    relabel,
)


class Random:
    "single thread only"

    def __init__(self, *, longest=40, deepest=6, inert=True) -> None:
        self.longest = longest
        self.deepest = deepest
        self.inert = inert
        self.text = printable

    def _text(self) -> str:
        return "".join(choices(self.text, k=randrange(60)))

    def _label(self) -> Label:
        # mostly structural, like a real annotated document
        return choice((Label.SAME_LEVEL, Label.SAME_LEVEL, *caller_labels))

    def indents(self) -> list[int]:
        indents = [0] if self.longest else []
        for loop in range(1, randrange(self.longest + 1)):
            match randrange(3):
                case 0 if indents[-1] < self.deepest:
                    indents.append(indents[-1] + 1)
                case 1:
                    indents.append(randrange(indents[-1] + 1))
                case _:
                    indents.append(indents[-1])
        return indents

    def lines(self) -> Lines:
        """A consistent sequence: random indents, then encoded."""
        lines = [Line(self._text(), 0, self._label(), it) for it in self.indents()]
        return pointers_from_indent(lines, inert=self.inert)

    def edit(self, lines: Lines) -> tuple[Callable[..., Lines], int]:
        return choice(edits), randrange(len(lines))
