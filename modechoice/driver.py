from __future__ import annotations

import logging
import pathlib
from collections.abc import Collection, Iterable, Sequence

import numpy as np

from .config import Config
from .model.candidates import UtilityCandidate
from .model.constraints import (
    CompositeTourConstraintFactory,
    CompositeTripConstraintFactory,
    TourConstraint,
    TripConstraint,
)
from .model.selectors import UtilitySelector
from .model.trip import Trip

logger = logging.getLogger("modechoice")


class ModeChoiceModel:
    """
    The configured constraints and selector of a mode choice model.

    A model is built once from a `Config`, then hands out a fresh
    constraint and selector for each person whose plan is being decided.
    Nothing is shared between persons except the (read-only) factories and
    the random generator, so separate persons can be handled by separate
    models built from the same configuration.
    """

    @classmethod
    def from_yaml(
        cls,
        filenames: pathlib.Path | list[pathlib.Path],
    ):
        config = Config.from_yaml(filenames)
        return cls(config)

    def __init__(self, config: Config):
        self.config = config
        self.modes = list(config.modes)
        self.random_generator = np.random.default_rng(config.random_seed)

        self.trip_constraint_factory = CompositeTripConstraintFactory(
            c.factory() for c in config.trip_constraints
        )
        self.tour_constraint_factory = CompositeTourConstraintFactory(
            c.factory(self.trip_constraint_factory) for c in config.tour_constraints
        )
        self.selector_factory = config.selector.factory()
        logger.debug(
            "mode choice model with %d trip constraints, %d tour constraints "
            "and a %s selector",
            len(config.trip_constraints),
            len(config.tour_constraints),
            config.selector.kind,
        )

    def trip_constraint(
        self, trips: Sequence[Trip], available_modes: Collection[str] | None = None
    ) -> TripConstraint:
        """Create the trip constraints for one person."""
        return self.trip_constraint_factory.create_constraint(trips, available_modes)

    def tour_constraint(
        self, trips: Sequence[Trip], available_modes: Collection[str] | None = None
    ) -> TourConstraint:
        """Create the tour constraints for one person."""
        return self.tour_constraint_factory.create_constraint(trips, available_modes)

    def selector(self) -> UtilitySelector:
        """Create an empty selector for one choice."""
        return self.selector_factory.create_selector()

    def feasible_modes(
        self,
        constraint: TripConstraint,
        trip: Trip,
        previous_modes: Sequence[str],
        modes: Iterable[str] | None = None,
    ) -> list[str]:
        """
        Filter the modes that are feasible for a trip.

        Parameters
        ----------
        constraint : TripConstraint
            The constraint created for this person.
        trip : Trip
            The trip to choose a mode for.
        previous_modes : Sequence[str]
            The modes chosen for all earlier trips.
        modes : Iterable[str], optional
            Modes to check, defaults to all the configured modes.

        Returns
        -------
        list[str]
        """
        if modes is None:
            modes = self.modes
        return [
            mode
            for mode in modes
            if constraint.validate_before_estimation(trip, mode, previous_modes)
        ]

    def choose(self, candidates: Iterable[UtilityCandidate]) -> UtilityCandidate | None:
        """Draw one of the candidates with the configured selector."""
        selector = self.selector()
        for candidate in candidates:
            selector.add_candidate(candidate)
        return selector.select(self.random_generator)
