"""
Vote and reset actions on a session's tally.
"""
import logging
from dataclasses import dataclass

from .sessions import locked_tally, reset_tally
from .strategies import StrategyKind, VotingContext, build_strategy
from .tally import TallyStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VoteOutcome:
    """Result of a vote action."""
    candidate: str
    strategy: StrategyKind
    increment: int
    counted: bool
    tally: TallyStore


def cast_vote(session, candidate, kind=StrategyKind.SIMPLE, weight=1):
    """
    Cast one vote for `candidate` in the session's tally.

    Args:
        session: Django session holding the tally
        candidate (str): candidate name, ignored if not in the tally
        kind (StrategyKind | str): tallying strategy
        weight (int): requested weight for weighted voting, clamped to 1-5

    Returns:
        VoteOutcome
    """
    strategy = build_strategy(kind, weight)
    voting_context = VotingContext(strategy)

    with locked_tally(session) as store:
        counted = candidate in store
        voting_context.execute_voting(store, candidate)

    if counted:
        logger.info(
            f"Vote cast - candidate: {candidate}, "
            f"strategy: {strategy.kind.value}, increment: {strategy.increment}"
        )
    else:
        logger.warning(f"Vote ignored for unknown candidate: {candidate!r}")

    return VoteOutcome(
        candidate=candidate,
        strategy=strategy.kind,
        increment=strategy.increment,
        counted=counted,
        tally=store,
    )


def reset_votes(session):
    """Zero the session's tally."""
    store = reset_tally(session)
    logger.info(f"Tally reset - {len(store)} candidate(s)")
    return store
