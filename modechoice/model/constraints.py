#
# Constraints decide whether a mode (or a sequence of modes for a tour) is
# feasible for a person, given what has been chosen so far.
#  - validate_before_estimation is asked before a proposal is scored
#  - validate_after_estimation is asked once the scored candidate exists
#
# Constraints are created per person by a factory and consulted in trip order.
#

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Collection, Iterable, Sequence

from .candidates import TourCandidate, TripCandidate
from .trip import Trip


class TripConstraint(ABC):
    @abstractmethod
    def validate_before_estimation(
        self, trip: Trip, mode: str, previous_modes: Sequence[str]
    ) -> bool:
        """
        Check whether `mode` is feasible for `trip`.

        Parameters
        ----------
        trip : Trip
            The trip under consideration, i.e. `trips[len(previous_modes)]`.
        mode : str
            The proposed mode.
        previous_modes : Sequence[str]
            The modes chosen for all earlier trips of the person, in order.
        """

    def validate_after_estimation(
        self,
        trip: Trip,
        candidate: TripCandidate,
        previous_candidates: Sequence[TripCandidate],
    ) -> bool:
        """Check a scored candidate. Accepts everything unless overridden."""
        return True


class TripConstraintFactory(ABC):
    @abstractmethod
    def create_constraint(
        self, trips: Sequence[Trip], available_modes: Collection[str] | None = None
    ) -> TripConstraint:
        """Create the constraint for one person's trip list."""


class TourConstraint(ABC):
    @abstractmethod
    def validate_before_estimation(
        self,
        tour_trips: Sequence[Trip],
        tour_modes: Sequence[str],
        previous_modes: Sequence[str],
    ) -> bool:
        """
        Check whether `tour_modes` are feasible for the trips of a tour.

        Parameters
        ----------
        tour_trips : Sequence[Trip]
            The trips of the tour, in order.
        tour_modes : Sequence[str]
            One proposed mode per tour trip.
        previous_modes : Sequence[str]
            The modes chosen for all trips before the tour.
        """

    def validate_after_estimation(
        self,
        tour_trips: Sequence[Trip],
        candidate: TourCandidate,
        previous_candidates: Sequence[TourCandidate],
    ) -> bool:
        return True


class TourConstraintFactory(ABC):
    @abstractmethod
    def create_constraint(
        self, trips: Sequence[Trip], available_modes: Collection[str] | None = None
    ) -> TourConstraint:
        """Create the constraint for one person's trip list."""


def _all(results: Iterable[bool]) -> bool:
    # exhaust the iterable, every constraint gets to see every call
    return all(list(results))


class CompositeTripConstraint(TripConstraint):
    """A proposal is feasible only if every member constraint accepts it."""

    def __init__(self, constraints: Iterable[TripConstraint]):
        self.constraints = list(constraints)

    def validate_before_estimation(self, trip, mode, previous_modes):
        return _all(
            c.validate_before_estimation(trip, mode, previous_modes)
            for c in self.constraints
        )

    def validate_after_estimation(self, trip, candidate, previous_candidates):
        return _all(
            c.validate_after_estimation(trip, candidate, previous_candidates)
            for c in self.constraints
        )


class CompositeTripConstraintFactory(TripConstraintFactory):
    def __init__(self, factories: Iterable[TripConstraintFactory] = ()):
        self.factories = list(factories)

    def add_factory(self, factory: TripConstraintFactory) -> None:
        self.factories.append(factory)

    def create_constraint(self, trips, available_modes=None):
        return CompositeTripConstraint(
            f.create_constraint(trips, available_modes) for f in self.factories
        )


class CompositeTourConstraint(TourConstraint):
    def __init__(self, constraints: Iterable[TourConstraint]):
        self.constraints = list(constraints)

    def validate_before_estimation(self, tour_trips, tour_modes, previous_modes):
        return _all(
            c.validate_before_estimation(tour_trips, tour_modes, previous_modes)
            for c in self.constraints
        )

    def validate_after_estimation(self, tour_trips, candidate, previous_candidates):
        return _all(
            c.validate_after_estimation(tour_trips, candidate, previous_candidates)
            for c in self.constraints
        )


class CompositeTourConstraintFactory(TourConstraintFactory):
    def __init__(self, factories: Iterable[TourConstraintFactory] = ()):
        self.factories = list(factories)

    def add_factory(self, factory: TourConstraintFactory) -> None:
        self.factories.append(factory)

    def create_constraint(self, trips, available_modes=None):
        return CompositeTourConstraint(
            f.create_constraint(trips, available_modes) for f in self.factories
        )


class TourFromTripConstraint(TourConstraint):
    """
    Apply a trip constraint to every trip of a tour.

    The trips of the tour are validated in order, each one seeing the modes
    proposed for the earlier trips of the same tour as part of its history.
    """

    def __init__(self, trip_constraint: TripConstraint):
        self.trip_constraint = trip_constraint

    def validate_before_estimation(self, tour_trips, tour_modes, previous_modes):
        history = list(previous_modes)
        for trip, mode in zip(tour_trips, tour_modes, strict=True):
            if not self.trip_constraint.validate_before_estimation(
                trip, mode, history
            ):
                return False
            history.append(mode)
        return True

    def validate_after_estimation(self, tour_trips, candidate, previous_candidates):
        history = [
            trip_candidate
            for tour_candidate in previous_candidates
            for trip_candidate in tour_candidate.trip_candidates
        ]
        for trip, trip_candidate in zip(
            tour_trips, candidate.trip_candidates, strict=True
        ):
            if not self.trip_constraint.validate_after_estimation(
                trip, trip_candidate, history
            ):
                return False
            history.append(trip_candidate)
        return True


class TourFromTripConstraintFactory(TourConstraintFactory):
    def __init__(self, trip_factory: TripConstraintFactory):
        self.trip_factory = trip_factory

    def create_constraint(self, trips, available_modes=None):
        return TourFromTripConstraint(
            self.trip_factory.create_constraint(trips, available_modes)
        )
