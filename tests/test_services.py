"""
Tests for the vote and reset actions.
"""

import logging

from voting.services import cast_vote, reset_votes
from voting.strategies import StrategyKind


class TestCastVote:
    """Unit tests for cast_vote."""

    def test_simple_vote(self, session):
        outcome = cast_vote(session, 'Candidato B')

        assert outcome.counted is True
        assert outcome.strategy is StrategyKind.SIMPLE
        assert outcome.increment == 1
        assert outcome.tally.as_dict() == {'Candidato A': 0, 'Candidato B': 1, 'Candidato C': 0}

    def test_weighted_vote(self, session):
        outcome = cast_vote(session, 'Candidato A', kind='weighted', weight=3)

        assert outcome.strategy is StrategyKind.WEIGHTED
        assert outcome.increment == 3
        assert outcome.tally['Candidato A'] == 3

    def test_weighted_vote_clamped(self, session):
        outcome = cast_vote(session, 'Candidato A', kind=StrategyKind.WEIGHTED, weight=50)

        assert outcome.increment == 5
        assert outcome.tally['Candidato A'] == 5

    def test_simple_vote_ignores_weight(self, session):
        outcome = cast_vote(session, 'Candidato C', kind='simple', weight=4)

        assert outcome.tally['Candidato C'] == 1

    def test_unknown_candidate_ignored(self, session, caplog):
        """Should not change the tally, only log a warning."""
        cast_vote(session, 'Candidato A')

        with caplog.at_level(logging.WARNING, logger='voting'):
            outcome = cast_vote(session, 'Candidato X', kind='weighted', weight=5)

        assert outcome.counted is False
        assert outcome.tally.as_dict() == {'Candidato A': 1, 'Candidato B': 0, 'Candidato C': 0}
        assert 'Candidato X' in caplog.text

    def test_votes_accumulate(self, saved_session):
        cast_vote(saved_session, 'Candidato A')
        cast_vote(saved_session, 'Candidato A', kind='weighted', weight=2)

        assert cast_vote(saved_session, 'Candidato A').tally['Candidato A'] == 4


class TestResetVotes:

    def test_scenario(self, session):
        """B simple, A weighted 3, then reset."""
        assert cast_vote(session, 'Candidato B').tally.as_dict() == {
            'Candidato A': 0, 'Candidato B': 1, 'Candidato C': 0,
        }
        assert cast_vote(session, 'Candidato A', kind='weighted', weight=3).tally.as_dict() == {
            'Candidato A': 3, 'Candidato B': 1, 'Candidato C': 0,
        }
        assert reset_votes(session).as_dict() == {
            'Candidato A': 0, 'Candidato B': 0, 'Candidato C': 0,
        }

    def test_reset_new_session(self, session):
        assert reset_votes(session).as_dict() == {
            'Candidato A': 0, 'Candidato B': 0, 'Candidato C': 0,
        }

    def test_reset_follows_changed_candidates(self, session, settings):
        cast_vote(session, 'Candidato A')
        settings.VOTING_CANDIDATES = ['Sim', 'Não']

        assert reset_votes(session).as_dict() == {'Sim': 0, 'Não': 0}
