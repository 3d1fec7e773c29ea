"""Candidate-opponent domains for each competitor.

Competitors are addressed by their roster index; each domain is a set of
indices. Domains only ever shrink during a scheduling run.
"""

from fixturecsp.models import Competitor


class DomainStore:
    def __init__(self):
        self._competitors: list[Competitor] = []
        self._index: dict[Competitor, int] = {}
        self._domains: list[set[int]] = []

    def initialize(self, competitors: list[Competitor]):
        """Give every competitor all other competitors as candidates.

        Repeated entries collapse onto their first occurrence.
        """
        self._competitors = []
        self._index = {}
        for c in competitors:
            if c not in self._index:
                self._index[c] = len(self._competitors)
                self._competitors.append(c)

        n = len(self._competitors)
        self._domains = [
            {j for j in range(n) if j != i} for i in range(n)
        ]

    def __len__(self) -> int:
        return len(self._competitors)

    @property
    def competitors(self) -> list[Competitor]:
        return list(self._competitors)

    def index_of(self, competitor: Competitor) -> int:
        return self._index[competitor]

    def candidates_of(self, competitor: Competitor) -> frozenset[Competitor]:
        domain = self._domains[self._index[competitor]]
        return frozenset(self._competitors[j] for j in domain)

    def contains(self, competitor: Competitor, candidate: Competitor) -> bool:
        i = self._index[competitor]
        j = self._index.get(candidate)
        return j is not None and j in self._domains[i]

    def remove_mutual(self, a: Competitor, b: Competitor):
        """Drop a and b from each other's domain. Absent entries are ignored."""
        i = self._index[a]
        j = self._index[b]
        self._domains[i].discard(j)
        self._domains[j].discard(i)
