# TITLE: Config
from __future__ import annotations

from .base import Config, YamlConfig
from .components import ComponentConfig
from .constraints import (
    FromTripBasedConstraintConfig,
    TourConstraintConfig,
    TripConstraintConfig,
    VehicleTourConstraintConfig,
    VehicleTripConstraintConfig,
)
from .plan import Plan, PlanActivity
from .selectors import (
    MaximumSelectorConfig,
    MultinomialLogitSelectorConfig,
    RandomSelectorConfig,
    SelectorConfig,
)
