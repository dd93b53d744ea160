from ._version import __version__, __version_tuple__
from .config import Config
from .driver import ModeChoiceModel
from .model import (
    Activity,
    MultinomialLogitSelector,
    Trip,
    TripCandidate,
    TourCandidate,
)
from .components import VehicleTripConstraint, find_home_location
from .cli.info import info  # noqa: F401

__all__ = [
    "Activity",
    "Config",
    "ModeChoiceModel",
    "MultinomialLogitSelector",
    "TourCandidate",
    "Trip",
    "TripCandidate",
    "VehicleTripConstraint",
    "find_home_location",
    "__version__",
    "__version_tuple__",
]


def versions():
    """Print the versions"""
    import numpy
    import pydantic

    print(f"modechoice {__version__}")
    print(f"  numpy {numpy.__version__}")
    print(f"  pydantic {pydantic.VERSION}")


def logging(level=None):
    from ._logging import log_to_console

    log_to_console(level)
