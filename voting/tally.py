"""
Per-session vote tally.

TallyStore maps candidate names to vote counts. The set of candidates is
fixed when the store is created: counts can change, keys cannot.
"""
from collections.abc import MutableMapping

from django.conf import settings

DEFAULT_CANDIDATES = ('Candidato A', 'Candidato B', 'Candidato C')


def get_candidates():
    """Configured candidate names, in display order."""
    return tuple(getattr(settings, 'VOTING_CANDIDATES', DEFAULT_CANDIDATES))


class TallyStore(MutableMapping):
    """
    Ordered mapping of candidate name to vote count.
    """

    def __init__(self, counts):
        self._counts = {}
        for candidate, votes in dict(counts).items():
            self._counts[candidate] = self._check_count(candidate, votes)

    @classmethod
    def fresh(cls, candidates=None):
        """Create a store with every candidate at zero."""
        if candidates is None:
            candidates = get_candidates()
        return cls({candidate: 0 for candidate in candidates})

    @staticmethod
    def _check_count(candidate, votes):
        if isinstance(votes, bool) or not isinstance(votes, int) or votes < 0:
            raise ValueError(f"Invalid vote count for {candidate!r}: {votes!r}")
        return votes

    def __getitem__(self, candidate):
        return self._counts[candidate]

    def __setitem__(self, candidate, votes):
        if candidate not in self._counts:
            raise KeyError(f"Unknown candidate: {candidate!r}")
        self._counts[candidate] = self._check_count(candidate, votes)

    def __delitem__(self, candidate):
        raise TypeError("Candidates cannot be removed from a tally")

    def __iter__(self):
        return iter(self._counts)

    def __len__(self):
        return len(self._counts)

    def __repr__(self):
        return f"TallyStore({self._counts!r})"

    @property
    def candidates(self):
        return tuple(self._counts)

    @property
    def total(self):
        return sum(self._counts.values())

    def reset(self):
        """Zero every count, keeping the candidate set."""
        for candidate in self._counts:
            self._counts[candidate] = 0

    def percentages(self):
        """
        Share of the total for each candidate, 0 to 100.
        All zeros when nobody has voted yet.
        """
        total = self.total
        return {
            candidate: (votes / total * 100) if total > 0 else 0
            for candidate, votes in self._counts.items()
        }

    def results(self):
        """
        Rows for display, in candidate order.

        Returns:
            list: dicts with candidate, votes and percentage (2 decimals)
        """
        percentages = self.percentages()
        return [
            {
                'candidate': candidate,
                'votes': votes,
                'percentage': round(percentages[candidate], 2),
            }
            for candidate, votes in self._counts.items()
        ]

    def as_dict(self):
        return dict(self._counts)
