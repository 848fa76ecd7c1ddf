"""Season configuration."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field


class Season(BaseModel):
    """One edition of the puzzle series. Immutable for the life of a run."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(default=2021, ge=2015)
    total_days: int = Field(default=25, ge=1)
    edition: str = "2021"
    site: str = "adventofcode.com"
    prefix: str = "day"

    def days(self) -> Iterator[int]:
        return iter(range(1, self.total_days + 1))

    def input_url(self, day_number: int) -> str:
        return f"https://{self.site}/{self.year}/day/{day_number}/input"
