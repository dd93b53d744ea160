from .candidates import (
    Nest,
    NestedTourCandidate,
    TourCandidate,
    TripCandidate,
    UtilityCandidate,
)
from .constraints import (
    CompositeTourConstraint,
    CompositeTourConstraintFactory,
    CompositeTripConstraint,
    CompositeTripConstraintFactory,
    TourConstraint,
    TourConstraintFactory,
    TourFromTripConstraint,
    TourFromTripConstraintFactory,
    TripConstraint,
    TripConstraintFactory,
)
from .selectors import (
    MaximumSelector,
    MultinomialLogitSelector,
    RandomSelector,
    UtilitySelector,
    UtilitySelectorFactory,
)
from .trip import Activity, Trip
