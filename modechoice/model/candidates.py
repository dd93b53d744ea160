"""Scored alternatives handed to the utility selectors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UtilityCandidate:
    """Anything with a utility can be chosen by a selector."""

    utility: float


@dataclass(frozen=True)
class TripCandidate(UtilityCandidate):
    mode: str
    duration: float = 0.0
    """Expected travel time in seconds."""


@dataclass(frozen=True)
class TourCandidate(UtilityCandidate):
    trip_candidates: tuple[TripCandidate, ...] = ()

    def __post_init__(self):
        # allow any sequence on input, but store immutably
        object.__setattr__(self, "trip_candidates", tuple(self.trip_candidates))

    @property
    def modes(self) -> list[str]:
        return [c.mode for c in self.trip_candidates]


@dataclass(frozen=True)
class Nest:
    """A grouping of alternatives for nested logit selection."""

    name: str
    scale_parameter: float = 1.0


@dataclass(frozen=True)
class NestedTourCandidate(TourCandidate):
    nest: Nest | None = None
