"""Per-competitor home/away counts against each group."""

from fixturecsp.models import Competitor


class GroupBalanceTracker:
    """Home/away fixture counts per competitor, broken down by opposing group.

    Counters are stored by roster index; record() is the only mutator and is
    called once per committed fixture.
    """

    def __init__(self):
        self._index: dict[Competitor, int] = {}
        self._groups: list[int] = []
        self._counts: list[dict[int, list[int]]] = []

    def initialize(self, competitors: list[Competitor], group_range):
        """Zero every competitor against every group in group_range.

        Raises ValueError for a competitor whose own group is not in range.
        """
        self._groups = list(group_range)
        self._index = {}
        self._counts = []
        for c in competitors:
            if c in self._index:
                continue
            if c.group not in self._groups:
                raise ValueError(
                    f"{c.name} is in group {c.group}, outside groups {self._groups}"
                )
            self._index[c] = len(self._counts)
            self._counts.append({g: [0, 0] for g in self._groups})

    @property
    def groups(self) -> list[int]:
        return list(self._groups)

    def record(self, home: Competitor, away: Competitor):
        """Count one fixture: home hosts away."""
        self._counts[self._index[home]][away.group][0] += 1
        self._counts[self._index[away]][home.group][1] += 1

    def counts(self, competitor: Competitor, group: int) -> tuple[int, int]:
        home, away = self._counts[self._index[competitor]][group]
        return home, away

    def home_count(self, competitor: Competitor, group: int) -> int:
        return self.counts(competitor, group)[0]

    def away_count(self, competitor: Competitor, group: int) -> int:
        return self.counts(competitor, group)[1]

    def table(self, competitor: Competitor) -> dict[int, tuple[int, int]]:
        """All groups for one competitor as {group: (home, away)}."""
        return {g: (h, a) for g, (h, a)
                in self._counts[self._index[competitor]].items()}

    def totals(self, competitor: Competitor) -> tuple[int, int]:
        """Total (home, away) across every group."""
        row = self._counts[self._index[competitor]].values()
        return sum(h for h, _ in row), sum(a for _, a in row)
