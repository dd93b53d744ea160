from .vehicle import (
    VehicleTourConstraintFactory,
    VehicleTripConstraint,
    VehicleTripConstraintFactory,
    find_home_location,
)
