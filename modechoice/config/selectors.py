# TITLE: Selectors
from __future__ import annotations

from abc import abstractmethod
from typing import ClassVar, Literal

from pydantic import confloat

from modechoice.model.selectors import (
    MaximumSelectorFactory,
    MultinomialLogitSelectorFactory,
    RandomSelectorFactory,
    UtilitySelectorFactory,
)

from .components import ComponentConfig


class SelectorConfig(ComponentConfig):
    """How one alternative is picked among the scored candidates."""

    _components: ClassVar[dict[str, type[ComponentConfig]]] = {}

    @abstractmethod
    def factory(self) -> UtilitySelectorFactory:
        """Build the factory creating a fresh selector for each choice."""


class MultinomialLogitSelectorConfig(SelectorConfig):
    r"""Choose with probability proportional to $\exp(U_i)$."""

    kind: Literal["multinomial_logit"] = "multinomial_logit"

    maximum_utility: confloat(gt=0) = 700.0
    """Utilities above this value are clamped before exponentiation.

    The default is close to the largest value whose exponential still fits
    in a double precision float."""

    minimum_utility: confloat(gt=0) = 700.0
    """Candidates with a utility at or below the negative of this value are
    left out of the choice."""

    def factory(self) -> MultinomialLogitSelectorFactory:
        return MultinomialLogitSelectorFactory(
            maximum_utility=self.maximum_utility,
            minimum_utility=self.minimum_utility,
        )


class MaximumSelectorConfig(SelectorConfig):
    """Always choose the candidate with the highest utility."""

    kind: Literal["maximum"] = "maximum"

    def factory(self) -> MaximumSelectorFactory:
        return MaximumSelectorFactory()


class RandomSelectorConfig(SelectorConfig):
    """Choose uniformly at random, ignoring utilities."""

    kind: Literal["random"] = "random"

    def factory(self) -> RandomSelectorFactory:
        return RandomSelectorFactory()


AnySelector = SelectorConfig.as_pydantic_field()
