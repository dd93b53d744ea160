# TITLE: Plans
from __future__ import annotations

from pydantic import model_validator

from modechoice.model.trip import Activity, Trip

from .base import YamlConfig
from .pretty import PrettyModel


class PlanActivity(PrettyModel, extra="forbid"):
    type: str
    """Activity type, e.g. "home", "work" or "shop"."""

    location: str | int
    """Link, facility or zone where the activity happens."""


class Plan(YamlConfig, extra="forbid"):
    """
    A person's daily plan, as alternating activities and trip modes.

    Example
    -------
    ```{yaml}
    person: p1
    activities:
      - {type: home, location: H}
      - {type: work, location: W}
      - {type: home, location: H}
    modes: [car, car]
    ```
    """

    person: str | None = None
    activities: list[PlanActivity]
    modes: list[str]

    @model_validator(mode="after")
    def _one_mode_per_trip(self):
        if len(self.activities) != len(self.modes) + 1:
            raise ValueError(
                f"plan has {len(self.activities)} activities "
                f"but {len(self.modes)} modes"
            )
        return self

    def to_trips(self) -> list[Trip]:
        activities = [Activity(a.type, a.location) for a in self.activities]
        return Trip.chain(activities, self.modes, person_id=self.person)
