"""Scaffold the next Advent of Code day."""

from aocnext.config import Season
from aocnext.scaffold import DayScaffolder, directory_name_for

__all__ = ["DayScaffolder", "Season", "directory_name_for"]
