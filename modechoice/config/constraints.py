# TITLE: Constraints
from __future__ import annotations

from abc import abstractmethod
from typing import ClassVar, Literal

from pydantic import field_validator

from modechoice.components.vehicle import (
    VehicleTourConstraintFactory,
    VehicleTripConstraintFactory,
)
from modechoice.model.constraints import (
    TourConstraintFactory,
    TourFromTripConstraintFactory,
    TripConstraintFactory,
)

from .components import ComponentConfig
from .pretty import PrettyModel


class TripConstraintConfig(ComponentConfig):
    """Configuration of a constraint applied to each trip."""

    _components: ClassVar[dict[str, type[ComponentConfig]]] = {}

    @abstractmethod
    def factory(self) -> TripConstraintFactory:
        """Build the factory creating this constraint for each person."""


class TourConstraintConfig(ComponentConfig):
    """Configuration of a constraint applied to each tour."""

    _components: ClassVar[dict[str, type[ComponentConfig]]] = {}

    @abstractmethod
    def factory(self, trip_factory: TripConstraintFactory) -> TourConstraintFactory:
        """Build the factory creating this constraint for each person.

        The trip constraint factory is given for tour constraints that
        are derived from the trip constraints.
        """


class VehicleConstraintSettings(PrettyModel, extra="forbid"):
    """Settings shared by the trip and tour variants of the vehicle constraint."""

    require_start_at_home: list[str] = ["car", "bike"]
    """Modes whose vehicle must be picked up at home when first used."""

    require_continuity: list[str] = ["car", "bike"]
    """Modes whose vehicle can only depart from where it was last parked."""

    require_end_at_home: list[str] = ["car", "bike"]
    """Modes whose vehicle must be brought back home by the end of the day.

    At most one of these vehicles can be away from home at any time. When
    several are listed, the first one (in this order) that is away from home
    is the one the agent is bound to."""

    require_existing_home: bool = False
    """Reject the restricted modes for persons without a home activity.

    If False, a person without a home can start and end using a vehicle
    anywhere."""

    home_activity_type: str = "home"
    """The activity type identifying where a person lives."""

    @field_validator(
        "require_start_at_home", "require_continuity", "require_end_at_home"
    )
    @classmethod
    def _unique_modes(cls, value: list[str]) -> list[str]:
        """Drop repeated modes, keeping the first occurrence."""
        return list(dict.fromkeys(value))


class VehicleTripConstraintConfig(VehicleConstraintSettings, TripConstraintConfig):
    """Vehicle continuity rules, checked trip by trip."""

    kind: Literal["vehicle_trip"] = "vehicle_trip"

    def factory(self) -> VehicleTripConstraintFactory:
        return VehicleTripConstraintFactory(
            self.require_start_at_home,
            self.require_continuity,
            self.require_end_at_home,
            self.require_existing_home,
            self.home_activity_type,
        )


class VehicleTourConstraintConfig(VehicleConstraintSettings, TourConstraintConfig):
    """Vehicle continuity rules, checked for whole tours."""

    kind: Literal["vehicle_tour"] = "vehicle_tour"

    def factory(self, trip_factory=None) -> VehicleTourConstraintFactory:
        return VehicleTourConstraintFactory(
            self.require_start_at_home,
            self.require_continuity,
            self.require_end_at_home,
            self.require_existing_home,
            self.home_activity_type,
        )


class FromTripBasedConstraintConfig(TourConstraintConfig):
    """Check every trip of a tour against all the configured trip constraints."""

    kind: Literal["from_trip_based"] = "from_trip_based"

    def factory(self, trip_factory: TripConstraintFactory) -> TourFromTripConstraintFactory:
        return TourFromTripConstraintFactory(trip_factory)


AnyTripConstraint = TripConstraintConfig.as_pydantic_field()
AnyTourConstraint = TourConstraintConfig.as_pydantic_field()
