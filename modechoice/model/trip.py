from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Activity:
    """An activity at either end of a trip."""

    type: str
    """Activity type tag, e.g. "home" or "work"."""

    location: Hashable
    """Where the activity takes place.

    Locations are opaque to the choice model, they are only ever compared
    for equality (a link id, a facility id, a zone number...)."""


class Trip:
    """
    One leg of a person's daily plan.

    A trip holds structural information only: the origin and destination
    activities and the mode that was initially used to cover it. The index
    is the stable position of the trip within the person's trip list.

    Parameters
    ----------
    origin_activity, destination_activity : Activity
    initial_mode : str
    index : int
        Zero-based position in the person's trip sequence.
    person_id : str, optional
        Identifier of the person making the trip, used for hashing.
    """

    __slots__ = (
        "_origin_activity",
        "_destination_activity",
        "_initial_mode",
        "_index",
        "_person_id",
        "departure_time",
    )

    def __init__(
        self,
        origin_activity: Activity,
        destination_activity: Activity,
        initial_mode: str,
        index: int,
        person_id: str | None = None,
    ):
        self._origin_activity = origin_activity
        self._destination_activity = destination_activity
        self._initial_mode = initial_mode
        self._index = index
        self._person_id = person_id
        self.departure_time: float | None = None
        """Departure time in seconds, set while time budgets are provisioned."""

    @classmethod
    def chain(
        cls,
        activities: Sequence[Activity],
        modes: Sequence[str],
        person_id: str | None = None,
    ) -> list[Trip]:
        """
        Decompose a plan of alternating activities and modes into trips.

        Parameters
        ----------
        activities : Sequence[Activity]
            The activities of the plan, in order.
        modes : Sequence[str]
            The mode used between each pair of consecutive activities.
        person_id : str, optional

        Returns
        -------
        list[Trip]
        """
        if not activities and not modes:
            return []
        if len(activities) != len(modes) + 1:
            raise ValueError(
                f"a plan with {len(activities)} activities needs "
                f"{max(len(activities) - 1, 0)} modes, got {len(modes)}"
            )
        return [
            cls(activities[i], activities[i + 1], mode, i, person_id)
            for i, mode in enumerate(modes)
        ]

    @property
    def origin_activity(self) -> Activity:
        return self._origin_activity

    @property
    def destination_activity(self) -> Activity:
        return self._destination_activity

    @property
    def origin_location(self) -> Hashable:
        return self._origin_activity.location

    @property
    def destination_location(self) -> Hashable:
        return self._destination_activity.location

    @property
    def initial_mode(self) -> str:
        return self._initial_mode

    @property
    def index(self) -> int:
        return self._index

    @property
    def person_id(self) -> str | None:
        return self._person_id

    def __hash__(self):
        return hash((self._person_id, self._index))

    def __repr__(self):
        return (
            f"<Trip {self._index}: {self.origin_location!r} -> "
            f"{self.destination_location!r} ({self._initial_mode})>"
        )
