"""Scheduling engine for the fixture scheduler.

One greedy, first-fit pass over the roster:
1. Snapshot the roster in input order.
2. For each competitor, scan its remaining candidates in roster order and
   pair it with the first one the constraints accept.
3. Each accepted pairing commits both legs (home and return fixture),
   records both in the balance tracker, and removes the pair from each
   other's domain so they never meet again in this run.

There is no backtracking. A competitor whose candidates are all rejected or
already used keeps no fixture of its own; that is an expected outcome, not
an error.
"""

from fixturecsp.balance import GroupBalanceTracker
from fixturecsp.constraints import ConstraintSet
from fixturecsp.domains import DomainStore
from fixturecsp.models import DEFAULT_GROUPS, Competitor, EngineState, Fixture


class SchedulingEngine:
    def __init__(self, competitors: list[Competitor],
                 groups=DEFAULT_GROUPS,
                 constraints: ConstraintSet | None = None):
        self.constraints = constraints if constraints is not None else ConstraintSet()
        self.domains = DomainStore()
        self.domains.initialize(competitors)
        self.balance = GroupBalanceTracker()
        self.balance.initialize(self.domains.competitors, groups)
        self.fixtures: list[Fixture] = []
        self.state = EngineState.PENDING

    @property
    def competitors(self) -> list[Competitor]:
        return self.domains.competitors

    def _ordered_candidates(self, competitor: Competitor) -> list[Competitor]:
        return sorted(self.domains.candidates_of(competitor),
                      key=self.domains.index_of)

    def _commit(self, home: Competitor, away: Competitor):
        self.fixtures.append(Fixture(home, away))
        self.balance.record(home, away)

    def _pair(self, team: Competitor, opponent: Competitor):
        self._commit(team, opponent)
        self._commit(opponent, team)
        self.domains.remove_mutual(team, opponent)

    def run(self) -> list[Fixture]:
        """Run the single scheduling pass and return fixtures in commit order.

        A completed engine is not re-run; the same fixture list is returned.
        """
        if self.state is EngineState.COMPLETED:
            return list(self.fixtures)

        for team in self.competitors:
            for opponent in self._ordered_candidates(team):
                if self.constraints.accepts(team, opponent):
                    self._pair(team, opponent)
                    break

        self.state = EngineState.COMPLETED
        return list(self.fixtures)

    def unpaired(self) -> list[Competitor]:
        """Competitors with no fixture at all, in roster order."""
        playing = set()
        for f in self.fixtures:
            playing.add(f.home)
            playing.add(f.away)
        return [c for c in self.competitors if c not in playing]


def schedule(competitors: list[Competitor], groups=DEFAULT_GROUPS,
             constraints: ConstraintSet | None = None) -> list[Fixture]:
    """Schedule fixtures for a roster in one pass."""
    engine = SchedulingEngine(competitors, groups=groups, constraints=constraints)
    return engine.run()
