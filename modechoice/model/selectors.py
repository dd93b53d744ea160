from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Generic, Protocol, TypeVar

import numpy as np

from .candidates import UtilityCandidate

logger = logging.getLogger("modechoice.selectors")

TCandidate = TypeVar("TCandidate", bound=UtilityCandidate)


class RandomSource(Protocol):
    """Anything that draws uniform floats in [0, 1).

    Both `numpy.random.Generator` and `random.Random` qualify.
    """

    def random(self) -> float: ...


class UtilitySelector(ABC, Generic[TCandidate]):
    """Collects candidates for one choice, then picks one of them."""

    def __init__(self):
        self.candidates: list[TCandidate] = []

    def add_candidate(self, candidate: TCandidate) -> None:
        self.candidates.append(candidate)

    def __len__(self):
        return len(self.candidates)

    @abstractmethod
    def select(self, random: RandomSource) -> TCandidate | None:
        """Pick one of the candidates, or None if there is nothing to pick."""


class UtilitySelectorFactory(ABC):
    @abstractmethod
    def create_selector(self) -> UtilitySelector:
        """Create a fresh selector for a single choice."""


class MultinomialLogitSelector(UtilitySelector[TCandidate]):
    r"""
    Select a candidate according to the multinomial logit model.

    Each candidate $i$ is chosen with probability

    $$ P(i) = \frac{\exp(U_i)}{\sum_j \exp(U_j)} $$

    For large utilities the exponential exceeds the range of a double, so
    utilities above `maximum_utility` are clamped (700 by default, close to
    the limit) and a warning is logged. Candidates with a utility at or
    below `-minimum_utility` are dropped from the choice altogether.

    Parameters
    ----------
    maximum_utility : float, default 700.0
    minimum_utility : float, default 700.0
        Magnitude of the lowest utility still considered.
    """

    def __init__(self, maximum_utility: float = 700.0, minimum_utility: float = 700.0):
        super().__init__()
        self.maximum_utility = maximum_utility
        self.minimum_utility = minimum_utility

    def select(self, random):
        if not self.candidates:
            return None

        candidates = [c for c in self.candidates if c.utility > -self.minimum_utility]
        if not candidates:
            logger.warning(
                "Encountered choice where all utilities were at or below -%f "
                "(minimum configured utility)",
                self.minimum_utility,
            )
            return None

        utilities = np.empty(len(candidates))
        for i, candidate in enumerate(candidates):
            utility = candidate.utility
            if utility > self.maximum_utility:
                logger.warning(
                    "Encountered choice where a utility is larger than %f "
                    "(maximum configured utility)",
                    self.maximum_utility,
                )
                utility = self.maximum_utility
            utilities[i] = utility

        # shifting by the largest utility keeps the sum finite
        cumulative_density = np.cumsum(np.exp(utilities - utilities.max()))
        pointer = random.random() * cumulative_density[-1]
        selection = int(np.count_nonzero(cumulative_density < pointer))
        return candidates[selection]


class MaximumSelector(UtilitySelector[TCandidate]):
    """Always pick the candidate with the highest utility.

    Ties go to the candidate added first.
    """

    def select(self, random=None):
        if not self.candidates:
            return None
        return max(self.candidates, key=lambda c: c.utility)


class RandomSelector(UtilitySelector[TCandidate]):
    """Pick any candidate with equal probability, ignoring utilities."""

    def select(self, random):
        if not self.candidates:
            return None
        selection = int(random.random() * len(self.candidates))
        return self.candidates[min(selection, len(self.candidates) - 1)]


class MultinomialLogitSelectorFactory(UtilitySelectorFactory):
    def __init__(self, maximum_utility: float = 700.0, minimum_utility: float = 700.0):
        self.maximum_utility = maximum_utility
        self.minimum_utility = minimum_utility

    def create_selector(self) -> MultinomialLogitSelector:
        return MultinomialLogitSelector(
            maximum_utility=self.maximum_utility,
            minimum_utility=self.minimum_utility,
        )


class MaximumSelectorFactory(UtilitySelectorFactory):
    def create_selector(self) -> MaximumSelector:
        return MaximumSelector()


class RandomSelectorFactory(UtilitySelectorFactory):
    def create_selector(self) -> RandomSelector:
        return RandomSelector()
