import re
from io import StringIO
from typing import Any

from . import Label, Line, Lines, MalformedRecordError
from .codec import _indent

__all__ = ["TSV", "parse", "dump"]

_POINTER = re.compile(r"-?[0-9]+")


class TSV:
    """Codec for `text<TAB>pointer<TAB>label` records, one per line.

    Any malformed record fails the whole decode; all of them are reported.
    Single thread only.
    """

    __slots__ = ("_errors", "_count")

    def __init__(self):
        self._errors = list[str]()
        self._count: int = 0

    # -------------------------------------------------------------------------- errors

    def _error(self, message: str) -> str:
        match self._errors:
            case []:
                return message
            case _:
                return f"{message}:\n\t" + "\n\t".join(self._errors)

    def _errors_add(self, *parts: Any) -> None:
        message = StringIO()
        if self._count:
            message.write(f"#{self._count}: ")
        message.write(" ".join(str(part) for part in parts))
        self._errors.append(message.getvalue())

    # -------------------------------------------------------------------------- decode

    def decode(self, tsv: str) -> Lines:
        """Parse records, then derive the indent view from their pointers."""
        self._errors.clear()
        self._count = 0
        try:
            lines = Lines()
            for raw in tsv.split("\n"):
                self._count += 1
                raw = raw.rstrip("\r\n")
                if not raw or raw.isspace():
                    continue
                line = self._record(raw)
                if line is not None:
                    lines.append(line)
            if self._errors:
                raise MalformedRecordError(self._error("malformed records"))
            return _indent(lines)
        finally:
            self._errors.clear()
            self._count = 0

    def _record(self, raw: str) -> Line | None:
        match raw.split("\t"):
            case [text, pointer, label]:
                if not _POINTER.fullmatch(pointer):
                    self._errors_add("pointer", repr(pointer))
                elif label not in Label:
                    self._errors_add("label", repr(label))
                else:
                    return Line(text, int(pointer), Label(label))
            case fields:
                self._errors_add(len(fields), "fields")
        return None

    # -------------------------------------------------------------------------- encode

    def encode(self, lines: Lines) -> str:
        self._errors.clear()
        self._count = 0
        try:
            write = StringIO()
            for line in lines:
                self._count += 1
                if "\t" in line.text or "\n" in line.text:
                    self._errors_add("text has a tab or newline")
                    continue
                if self._count > 1:
                    write.write("\n")
                write.write(f"{line.text}\t{line.pointer}\t{line.label}")
            if self._errors:
                raise MalformedRecordError(self._error("can't be encoded"))
            return write.getvalue()
        finally:
            self._errors.clear()
            self._count = 0


def parse(tsv: str) -> Lines:
    return TSV().decode(tsv)


def dump(lines: Lines) -> str:
    return TSV().encode(lines)
