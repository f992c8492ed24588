"""
Vote tallying strategies.

A strategy decides how much a single vote adds to a candidate's count:
- SimpleVoting: every vote counts as 1
- WeightedVoting: every vote counts as a fixed weight between 1 and 5

VotingContext holds the active strategy and delegates vote execution to it.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import MutableMapping

MIN_WEIGHT = 1
MAX_WEIGHT = 5


class StrategyKind(str, Enum):
    """Strategy names accepted by the vote action."""
    SIMPLE = 'simple'
    WEIGHTED = 'weighted'

    @classmethod
    def choices(cls):
        return [(kind.value, kind.label) for kind in cls]

    @property
    def label(self):
        return {
            StrategyKind.SIMPLE: 'Votação Simples',
            StrategyKind.WEIGHTED: 'Votação Ponderada',
        }[self]


class VotingStrategy(ABC):
    """
    Base class for tallying strategies.

    Subclasses only define the increment; applying a vote for a candidate
    missing from the store is a no-op.
    """

    kind: StrategyKind

    @property
    @abstractmethod
    def increment(self) -> int:
        """Amount added to the candidate's count for one vote."""

    def apply(self, store: MutableMapping[str, int], candidate: str) -> None:
        if candidate in store:
            store[candidate] += self.increment

    def __repr__(self):
        return f"{self.__class__.__name__}(increment={self.increment})"


class SimpleVoting(VotingStrategy):
    """One vote, one point."""

    kind = StrategyKind.SIMPLE

    @property
    def increment(self) -> int:
        return 1


class WeightedVoting(VotingStrategy):
    """
    Each vote adds `weight` points.

    The weight is clamped into [MIN_WEIGHT, MAX_WEIGHT] once, when the
    strategy is built, and cannot change afterwards.
    """

    kind = StrategyKind.WEIGHTED

    def __init__(self, weight: int = 1):
        self._weight = max(MIN_WEIGHT, min(MAX_WEIGHT, int(weight)))

    @property
    def weight(self) -> int:
        return self._weight

    @property
    def increment(self) -> int:
        return self._weight


class VotingContext:
    """
    Holds the active strategy and runs votes through it.
    """

    def __init__(self, strategy: VotingStrategy):
        self._strategy = strategy

    @property
    def strategy(self) -> VotingStrategy:
        return self._strategy

    def set_strategy(self, strategy: VotingStrategy) -> None:
        self._strategy = strategy

    def execute_voting(self, store: MutableMapping[str, int], candidate: str) -> None:
        self._strategy.apply(store, candidate)


def build_strategy(kind, weight=1) -> VotingStrategy:
    """
    Build the strategy named by `kind`.

    Args:
        kind (StrategyKind | str): 'simple' or 'weighted'
        weight (int): requested weight, only used by weighted voting

    Raises:
        ValueError: If kind is not a known strategy name
    """
    kind = StrategyKind(kind)

    if kind is StrategyKind.WEIGHTED:
        return WeightedVoting(weight)

    return SimpleVoting()
