"""The build tool and the browser, behind small interfaces."""

from __future__ import annotations

import shlex
import webbrowser
from pathlib import Path
from typing import Protocol

from invoke import Context


class ProjectInitializer(Protocol):
    def create(self, path: Path, edition: str) -> None: ...


class UrlOpener(Protocol):
    def open(self, url: str) -> bool: ...


class CargoInitializer:
    """Creates a binary crate with ``cargo new``.

    A non-zero exit from cargo raises :class:`invoke.exceptions.UnexpectedExit`.
    """

    def __init__(self, context: Context):
        self.context = context

    def command(self, path: Path, edition: str) -> str:
        return f"cargo new --bin {shlex.quote(str(path))} --edition {edition} --vcs none"

    def create(self, path: Path, edition: str) -> None:
        self.context.run(self.command(path, edition))


class BrowserOpener:
    def open(self, url: str) -> bool:
        return webbrowser.open(url)
