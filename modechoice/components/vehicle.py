from __future__ import annotations

import logging
from collections.abc import Collection, Hashable, Iterable, Sequence

from modechoice.model.constraints import (
    TourConstraintFactory,
    TourFromTripConstraint,
    TripConstraint,
    TripConstraintFactory,
)
from modechoice.model.trip import Trip

logger = logging.getLogger("modechoice.constraints")


def find_home_location(
    trips: Iterable[Trip], home_type: str = "home"
) -> Hashable | None:
    """
    Find where a person lives.

    The first activity of type `home_type` wins, checking the origin of each
    trip before its destination.

    Returns
    -------
    Hashable or None
        The home location, or None if the person never visits home.
    """
    for trip in trips:
        if trip.origin_activity.type == home_type:
            return trip.origin_location
        if trip.destination_activity.type == home_type:
            return trip.destination_location
    return None


class VehicleTripConstraint(TripConstraint):
    """
    Keep track of vehicles that cannot teleport.

    A vehicle mode in `require_start_at_home` must be picked up at home the
    first time it is used. A mode in `require_continuity` can only depart
    from the place where it was last parked. A mode in `require_end_at_home`
    must be able to get back home, and while such a vehicle is parked away
    from home no other vehicle of that kind may be used, and the agent may
    only switch to another mode if it will come back to the vehicle later.

    Parameters
    ----------
    trips : Sequence[Trip]
        All trips of the person, in order.
    home_location : Hashable, optional
        Where the person lives, or None if unknown.
    require_start_at_home, require_continuity, require_end_at_home : Iterable[str]
        Modes subject to each rule.
    require_existing_home : bool, default False
        If the home location is unknown, reject the restricted modes
        instead of letting them start and end anywhere.
    """

    def __init__(
        self,
        trips: Sequence[Trip],
        home_location: Hashable | None,
        require_start_at_home: Iterable[str] = (),
        require_continuity: Iterable[str] = (),
        require_end_at_home: Iterable[str] = (),
        require_existing_home: bool = False,
    ):
        self.trips = trips
        self.home_location = home_location
        self.require_start_at_home = tuple(require_start_at_home)
        self.require_continuity = tuple(require_continuity)
        self.require_end_at_home = tuple(require_end_at_home)
        self.require_existing_home = require_existing_home

    @property
    def _home_is_binding(self) -> bool:
        return self.home_location is not None or self.require_existing_home

    def vehicle_locations(self, previous_modes: Sequence[str]) -> dict[str, Hashable]:
        """Where each mode used so far was left, keyed by mode."""
        locations = {}
        for trip, mode in zip(self.trips, previous_modes):
            locations[mode] = trip.destination_location
        return locations

    def _arrives_later_at(self, location: Hashable, previous_modes: Sequence[str]) -> bool:
        return any(
            trip.destination_location == location
            for trip in self.trips[len(previous_modes) :]
        )

    def can_return_home(self, previous_modes: Sequence[str]) -> bool:
        if self._arrives_later_at(self.home_location, previous_modes):
            return True
        return not self._home_is_binding

    def validate_before_estimation(self, trip, mode, previous_modes):
        # a vehicle leaves home the first time it is used
        if mode in self.require_start_at_home and mode not in previous_modes:
            if trip.origin_location != self.home_location and self._home_is_binding:
                return False

        locations = self.vehicle_locations(previous_modes)

        # a vehicle departs from where it was parked
        if mode in self.require_continuity:
            current = locations.get(mode)
            if current is not None and current != trip.origin_location:
                return False

        if self.require_end_at_home:
            if mode in self.require_end_at_home and not self.can_return_home(
                previous_modes
            ):
                return False

            # only one vehicle may be away from home at a time
            active_mode = None
            for restricted_mode in self.require_end_at_home:
                current = locations.get(restricted_mode)
                if current is not None and current != self.home_location:
                    active_mode = restricted_mode
                    break

            if active_mode is not None and active_mode != mode:
                if mode in self.require_end_at_home:
                    return False
                # leaving the vehicle is fine as long as we pass by it again
                if not self._arrives_later_at(locations[active_mode], previous_modes):
                    return False

        return True

    def __repr__(self):
        return (
            f"<VehicleTripConstraint home={self.home_location!r} "
            f"start_at_home={list(self.require_start_at_home)} "
            f"continuity={list(self.require_continuity)} "
            f"end_at_home={list(self.require_end_at_home)}>"
        )


class VehicleTripConstraintFactory(TripConstraintFactory):
    """Create a `VehicleTripConstraint` per person, locating their home."""

    def __init__(
        self,
        require_start_at_home: Iterable[str] = (),
        require_continuity: Iterable[str] = (),
        require_end_at_home: Iterable[str] = (),
        require_existing_home: bool = False,
        home_activity_type: str = "home",
    ):
        self.require_start_at_home = tuple(require_start_at_home)
        self.require_continuity = tuple(require_continuity)
        self.require_end_at_home = tuple(require_end_at_home)
        self.require_existing_home = require_existing_home
        self.home_activity_type = home_activity_type

    def create_constraint(
        self, trips: Sequence[Trip], available_modes: Collection[str] | None = None
    ) -> VehicleTripConstraint:
        home_location = find_home_location(trips, self.home_activity_type)
        if home_location is None:
            logger.debug(
                "no %r activity among %d trips", self.home_activity_type, len(trips)
            )
        return VehicleTripConstraint(
            trips,
            home_location,
            self.require_start_at_home,
            self.require_continuity,
            self.require_end_at_home,
            self.require_existing_home,
        )


class VehicleTourConstraintFactory(TourConstraintFactory):
    """
    Vehicle constraints for tour-based choice.

    The tour variant has its own configuration, and applies the vehicle
    rules trip by trip across each proposed tour.
    """

    def __init__(
        self,
        require_start_at_home: Iterable[str] = (),
        require_continuity: Iterable[str] = (),
        require_end_at_home: Iterable[str] = (),
        require_existing_home: bool = False,
        home_activity_type: str = "home",
    ):
        self._trip_factory = VehicleTripConstraintFactory(
            require_start_at_home,
            require_continuity,
            require_end_at_home,
            require_existing_home,
            home_activity_type,
        )

    def create_constraint(self, trips, available_modes=None) -> TourFromTripConstraint:
        return TourFromTripConstraint(
            self._trip_factory.create_constraint(trips, available_modes)
        )
