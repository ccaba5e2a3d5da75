from cProfile import Profile
from collections.abc import Callable
from pathlib import Path
from time import perf_counter_ns
from typing import Any, NamedTuple

import ruamel.yaml
from ruamel.yaml.comments import CommentedSeq
from ruamel.yaml.scanner import ScannerError

from tsvtree import Lines
from tsvtree.codec import indent_from_pointers, pointers_from_indent
from tsvtree.tsv import TSV
import tsvtree.yaml


class Views(NamedTuple):
    lines: Lines
    indents: list[int]
    pointers: list[tuple[int, str]]
    tsv: str


class Timer:
    def __init__(self, denominator: "Timer|None" = None):
        self.total = 0
        self.count = 0
        self.start = 0
        self.denom = denominator

    def __enter__(self):
        self.start = perf_counter_ns()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.total += perf_counter_ns() - self.start
        self.count += 1

    @property
    def avg(self) -> float:
        return self.total / self.count if self.count else 0

    @property
    def mul(self) -> float:
        denom = self.denom
        if denom is None:
            return 0
        denom = denom.avg
        if denom == 0:
            return 0
        return round(self.avg / denom, 2)


class TimedTSV:
    def __init__(self, pstats: Path | None, *, inert: bool = True):
        self.decode_timer = Timer()
        self.encode_timer = Timer()
        self.indent_timer = Timer()
        self.point_timer = Timer(self.indent_timer)
        self.edit_timer = Timer(self.point_timer)
        self.memory = TSV()
        self.inert = inert
        self.pstats = pstats
        self.profile = Profile(builtins=False) if pstats else None

    def decode(self, tsv: str) -> Lines:
        with self.profile if self.profile else self.decode_timer:
            return self.memory.decode(tsv)

    def encode(self, lines: Lines) -> str:
        with self.profile if self.profile else self.encode_timer:
            return self.memory.encode(lines)

    def indent(self, lines: Lines) -> Lines:
        with self.profile if self.profile else self.indent_timer:
            return indent_from_pointers(lines)

    def point(self, lines: Lines) -> Lines:
        with self.profile if self.profile else self.point_timer:
            return pointers_from_indent(lines, inert=self.inert)

    def edit(self, operation: Callable[..., Lines], lines: Lines, *args: Any) -> Lines:
        with self.profile if self.profile else self.edit_timer:
            return operation(lines, *args, inert=self.inert)

    def timers(self) -> None:
        print("   tsvtree")
        if self.pstats and self.profile:
            self.profile.dump_stats(self.pstats)
            print(f"\t(written to {self.pstats})")
        else:
            print(f"\tdecode = {self.decode_timer.avg}")
            print(f"\tencode = {self.encode_timer.avg}")
            print(f"\tindent = {self.indent_timer.avg}")
            print(f"\t point = {self.point_timer.avg}  ({self.point_timer.mul})")
            print(f"\t  edit = {self.edit_timer.avg}  ({self.edit_timer.mul})")

    def views(self, lines: Lines) -> Views:
        indents = [line.indent for line in lines]
        pointers = [(line.pointer, line.label.value) for line in lines]
        return Views(lines, indents, pointers, self.encode(lines))


class TimedRuamel:
    def __init__(self):
        self.translate_timer = Timer()
        self.load_timer = Timer(self.translate_timer)
        self.buffer = tsvtree.yaml.YAML()
        self.ruamel = ruamel.yaml.YAML(typ="rt")

    def load(self, value: bytes | None) -> Any:
        if value is not None:
            self.buffer.seek(0)
            self.buffer.truncate()
            self.buffer.write(value)
        self.buffer.seek(0)
        return self.ruamel.load(self.buffer)

    def __bytes__(self) -> bytes:
        self.buffer.seek(0)
        return self.buffer.getvalue()

    def translate(self, lines: Lines) -> CommentedSeq:
        with self.translate_timer:
            self.buffer.encode(lines)
        try:
            with self.load_timer:
                result = self.load(None)
        except ScannerError:
            print(bytes(self).decode())
            raise
        if not isinstance(result, CommentedSeq):
            raise AssertionError(f"expected CommentedSeq, got: {type(result)}")
        return result

    def timers(self) -> None:
        print("   ruamel.yaml RT")
        print(f"\t trans = {self.translate_timer.avg}")
        print(f"\t  load = {self.load_timer.avg}  ({self.load_timer.mul})")
