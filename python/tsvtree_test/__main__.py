import logging
import sys
from pathlib import Path
from typing import Annotated

from rich.logging import RichHandler
from rich.progress import track
from typer import Typer, Exit, Option

from tsvtree import clone
from . import TimedTSV, TimedRuamel, unit_tests
from .equals import diff_any, diff_translate
from .generate import Random


def FAILED(message: str):
    print(f"FAILED {message}", file=sys.stderr)
    raise Exit(code=1)


app = Typer()
profile_option = Option(
    help="write profile stats here (fail if already exists)",
    file_okay=False,
    dir_okay=False,
)
loops_option = Option(
    help="number of repetitions",
    min=0,
)
longest_option = Option(
    help="limit the number of lines in a generated random document",
    min=0,
)
deepest_option = Option(
    help="limit the nesting depth of a generated random document",
    min=0,
)
edits_option = Option(
    help="number of random edits applied to each generated document",
    min=0,
)
inert_option = Option(
    "--inert/--in-tree",
    help="flatten blocks that hold only deleted or ignored lines",
)
verbose_option = Option(
    "--verbose",
    "-v",
    help="log every edit, including declined ones",
)


@app.command(
    help="""Run unit tests, then exercise the API with random documents.

    Without the `pstats` option broad timing information is gathered and the
    ruamel.yaml outline translation is included. The `pstats` option switches to
    detailed cProfile stats, focused only on the tsvtree library (ruamel.yaml
    translation is skipped).""",
)
def main(
    pstats: Annotated[Path | None, profile_option] = None,
    loops: Annotated[int, loops_option] = 250,
    longest: Annotated[int, longest_option] = 40,
    deepest: Annotated[int, deepest_option] = 6,
    edits: Annotated[int, edits_option] = 20,
    inert: Annotated[bool, inert_option] = True,
    verbose: Annotated[bool, verbose_option] = False,
):
    if pstats and pstats.exists():
        FAILED(f"won't overwrite: {pstats}")

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s: %(message)s",
            handlers=[RichHandler(rich_tracebacks=True, show_time=False)],
        )

    if unit_tests.problem_count():
        FAILED("unit tests")

    random = Random(longest=longest, deepest=deepest, inert=inert)
    memory = TimedTSV(pstats, inert=inert)
    ruamel = None if pstats else TimedRuamel()

    if loops:
        for loop in track(range(loops)):
            lines = random.lines()
            views = memory.views(lines)

            if diff_any(views.indents, memory.views(memory.indent(lines)).indents):
                FAILED("indent from pointers")

            if diff_any(views.pointers, memory.views(memory.point(lines)).pointers):
                FAILED("pointers from indent twice")

            if diff_any(views, memory.views(memory.decode(views.tsv))):
                FAILED("encode then decode")

            for count in range(edits if lines else 0):
                operation, target = random.edit(lines)
                snapshot = clone(lines)
                edited = memory.edit(operation, lines, target)
                if diff_any(snapshot, lines):
                    FAILED(f"{operation.__name__} changed its argument")
                was = memory.views(edited).indents
                if diff_any(was, memory.views(memory.indent(edited)).indents):
                    FAILED(f"{operation.__name__} left pointers inconsistent")
                lines = edited

            if ruamel:
                if diff_translate(lines, ruamel.translate(lines)):
                    FAILED("YAML translate")

        memory.timers()
        if ruamel:
            ruamel.timers()


if __name__ == "__main__":
    app()
