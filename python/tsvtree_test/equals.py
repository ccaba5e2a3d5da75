from typing import Any, NamedTuple, TypeVar

from deepdiff import DeepDiff
from ruamel.yaml.comments import CommentedMap, CommentedSeq

from tsvtree import Lines

T = TypeVar("T")


class Flat(NamedTuple):
    line: int
    text: str
    label: str
    indent: int


def _flatten_ruamel(seq: Any, depth: int, into: list[Flat]) -> None:
    match seq:
        case CommentedSeq():
            for item in seq:
                if not isinstance(item, CommentedMap):
                    raise ValueError(f"unexpected type: {type(item)}")
                into.append(Flat(item["line"], str(item["text"]), str(item["label"]), depth))
                if "block" in item:
                    _flatten_ruamel(item["block"], depth + 1, into)
        case _:
            raise ValueError(f"unexpected type: {type(seq)}")


def flatten_ruamel(outline: CommentedSeq) -> list[Flat]:
    flat = list[Flat]()
    _flatten_ruamel(outline, 0, flat)
    return flat


def flatten(lines: Lines) -> list[Flat]:
    return [
        Flat(index + 1, line.text, line.label.value, line.indent)
        for index, line in enumerate(lines)
    ]


def diff_any(was: T, now: T) -> bool:
    if was == now:
        return False
    print()
    print(DeepDiff(was, now, verbose_level=2).pretty())
    return True


def diff_translate(was: Lines, now: CommentedSeq) -> bool:
    return diff_any(flatten(was), flatten_ruamel(now))
