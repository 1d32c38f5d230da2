"""
Domain models for the truck load calculator.

These are plain Python/domain classes; persistence is owned elsewhere.
"""

from truckload_app.models.classification import (
    EmissionsTier,
    RearAxleGroup,
    SteerAxleType,
    TyreType,
    VehicleClassification,
)
from truckload_app.models.truck import (
    AxleRating,
    BodyType,
    DEFAULT_WALL_THICKNESS,
    SuspensionConfig,
    SuspensionType,
    TareWeights,
    TruckProfile,
    VehicleFrame,
    WallThickness,
)
from truckload_app.models.suspension import AxleSuspension, SuspensionSpec
from truckload_app.models.cargo import CargoItem, STANDARD_PALLET_SIZES

__all__ = [
    "EmissionsTier",
    "RearAxleGroup",
    "SteerAxleType",
    "TyreType",
    "VehicleClassification",
    "AxleRating",
    "BodyType",
    "DEFAULT_WALL_THICKNESS",
    "SuspensionConfig",
    "SuspensionType",
    "TareWeights",
    "TruckProfile",
    "VehicleFrame",
    "WallThickness",
    "AxleSuspension",
    "SuspensionSpec",
    "CargoItem",
    "STANDARD_PALLET_SIZES",
]
