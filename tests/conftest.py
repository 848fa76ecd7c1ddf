import pytest

from aocnext import DayScaffolder, Season
from aocnext.log import setup_logging


@pytest.fixture(autouse=True, scope="session")
def logging_configured():
    setup_logging()


class FakeInitializer:
    """Stands in for cargo: creates the crate directory and records calls."""

    def __init__(self, error=None, extra=()):
        self.calls = []
        self.error = error
        self.extra = extra

    def create(self, path, edition):
        self.calls.append((path, edition))
        if self.error is not None:
            raise self.error
        (path / "src").mkdir(parents=True)
        (path / "Cargo.toml").write_text(f'[package]\nname = "{path.name}"\n')
        (path / "src" / "main.rs").write_text('fn main() {}\n')
        for name in self.extra:
            (path / name).write_text("")


class FakeOpener:
    def __init__(self):
        self.urls = []

    def open(self, url):
        self.urls.append(url)
        return True


@pytest.fixture
def initializer():
    return FakeInitializer()


@pytest.fixture
def opener():
    return FakeOpener()


@pytest.fixture
def season():
    return Season()


@pytest.fixture
def scaffolder(tmp_path, season, initializer, opener):
    return DayScaffolder(season, initializer, opener, root=tmp_path)


def tree(root):
    return sorted(str(p.relative_to(root)) for p in root.rglob("*"))
