from io import StringIO
from typing import Final

# a pointer is 1-indexed: positive `p` refers back to line `p - 1`
ROOT: Final = -1
UNSET: Final = 0


class Blocks:
    """Block openers that are still open, innermost last.

    Entries are pointer values (1-indexed line references) so `top` can be
    stored in a line's pointer field unchanged.
    """

    __slots__ = ("_open",)

    def __init__(self):
        self._open = list[int]()

    def more(self, reference: int) -> None:
        if reference <= UNSET:
            raise AssertionError("block reference must be 1-indexed")
        if self._open and reference <= self._open[-1]:
            raise AssertionError("block reference must follow its parent")
        self._open.append(reference)

    def less(self, levels: int = 1) -> None:
        if levels > len(self._open):
            raise AssertionError("indent can't go negative")
        del self._open[len(self._open) - levels :]

    def top(self) -> int:
        return self._open[-1] if self._open else ROOT

    def __len__(self) -> int:
        return len(self._open)

    def __repr__(self) -> str:
        return f"<Blocks {len(self)} @{self.path().getvalue()}>"

    def path(self, into: StringIO | None = None) -> StringIO:
        if into is None:
            into = StringIO()
        for reference in self._open:
            into.write("/")
            into.write(str(reference))
        return into
