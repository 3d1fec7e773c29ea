"""Data models for the fixture scheduler."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Competitor:
    """A competitor in the roster.

    Identity is the full (name, country, group) triple, so the same name in
    two groups is two different competitors.
    """
    name: str
    country: str
    group: int


@dataclass(frozen=True)
class Fixture:
    """One directed fixture: home hosts away."""
    home: Competitor
    away: Competitor

    def involves(self, competitor: Competitor) -> bool:
        return competitor in (self.home, self.away)

    def opponent(self, competitor: Competitor) -> Competitor:
        if competitor == self.home:
            return self.away
        return self.home

    def reversed(self) -> "Fixture":
        """The return leg of this fixture."""
        return Fixture(home=self.away, away=self.home)


class EngineState(Enum):
    PENDING = "pending"
    COMPLETED = "completed"


DEFAULT_GROUPS = (1, 2, 3, 4)
