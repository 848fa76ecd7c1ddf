"""Find the first missing day directory and create it."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from aocnext.collaborators import ProjectInitializer, UrlOpener
from aocnext.config import Season
from aocnext.log import get_logger
from aocnext.templates import render_launch_config

log = get_logger(__name__)


def directory_name_for(day_number: int, prefix: str = "day") -> str:
    return f"{prefix}{day_number:02d}"


class DayScaffolder:
    """Creates day directories under ``root`` for one season.

    Steps run in order and stop at the first failure. Nothing already
    written is removed, so a failed day is left for manual cleanup and
    is treated as existing on the next run.
    """

    def __init__(
        self,
        season: Season,
        initializer: ProjectInitializer,
        opener: UrlOpener,
        root: Optional[Path] = None,
    ):
        self.season = season
        self.initializer = initializer
        self.opener = opener
        self.root = Path.cwd() if root is None else Path(root)

    def directory_for(self, day_number: int) -> Path:
        return self.root / directory_name_for(day_number, self.season.prefix)

    def find_next_unscaffolded_day(self) -> Optional[int]:
        for day_number in self.season.days():
            if not self.directory_for(day_number).exists():
                return day_number
        return None

    def scaffold(self, day_number: int) -> Path:
        day_dir = self.directory_for(day_number)
        log.debug("creating project", day=day_number, path=str(day_dir))
        self.initializer.create(day_dir, self.season.edition)

        launch = day_dir / "launch.json"
        launch.write_text(render_launch_config(day_dir.name), encoding="utf-8")
        log.debug("wrote launch config", path=str(launch))

        input_dir = day_dir / "input"
        input_dir.mkdir()
        input_file = input_dir / "input.txt"
        input_file.touch(exist_ok=True)

        log.info(f"Save the day's input into {day_dir.name}/input/input.txt")
        # Input is per-account and needs a logged-in browser session.
        self.opener.open(self.season.input_url(day_number))
        return day_dir

    def scaffold_next(self) -> Optional[int]:
        day_number = self.find_next_unscaffolded_day()
        if day_number is None:
            log.info("You've already created the last day!")
            return None
        self.scaffold(day_number)
        return day_number
