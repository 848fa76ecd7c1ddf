"""``aoc-next``: set up the next Advent of Code day directory."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

from invoke import Context
from invoke.exceptions import UnexpectedExit

from aocnext.collaborators import BrowserOpener, CargoInitializer
from aocnext.config import Season
from aocnext.log import get_logger, setup_logging
from aocnext.scaffold import DayScaffolder

log = get_logger(__name__)

USAGE = """\
Usage: {prog}

Sets up the next Advent of Code day directory.
"""


def build_scaffolder() -> DayScaffolder:
    return DayScaffolder(Season(), CargoInitializer(Context()), BrowserOpener())


def main(
    argv: Optional[Sequence[str]] = None,
    scaffolder: Optional[DayScaffolder] = None,
) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if argv:
        print(USAGE.format(prog=os.path.basename(sys.argv[0]) or "aoc-next"))
        return 0

    setup_logging()
    if scaffolder is None:
        scaffolder = build_scaffolder()

    try:
        scaffolder.scaffold_next()
    except UnexpectedExit as exc:
        # cargo has already printed its own error.
        return exc.result.exited or 1
    except OSError as exc:
        log.error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
