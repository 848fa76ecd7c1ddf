import os
from invoke import task

from aocnext import DayScaffolder, Season, directory_name_for
from aocnext.collaborators import BrowserOpener, CargoInitializer
from aocnext.log import setup_logging


@task
def newday(c):
    setup_logging()
    DayScaffolder(Season(), CargoInitializer(c), BrowserOpener()).scaffold_next()


@task
def run(c, day, release=False):

    try:
        day_dir = directory_name_for(int(day))
    except ValueError:
        raise SystemExit(f"Not a day number: {day}")

    if not os.path.exists(f"{day_dir}/input/input.txt"):
        raise SystemExit(f"No input for {day_dir}, run `invoke newday` first")

    with c.cd(day_dir):
        c.run(f"cargo run {'--release ' if release else ''}< input/input.txt")
