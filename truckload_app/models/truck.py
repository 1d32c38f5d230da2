from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from truckload_app.models.classification import VehicleClassification


class BodyType(Enum):
    TRAY = "TRAY"
    PANTECH = "PANTECH"
    CURTAINSIDER = "CURTAINSIDER"
    REFRIGERATED = "REFRIGERATED"
    TIPPER = "TIPPER"
    TANKER = "TANKER"


class SuspensionType(Enum):
    TAPER_LEAF = "TAPER_LEAF"  # typically front axle, stiffer than multi-leaf
    STEEL = "STEEL"  # multi-leaf steel springs
    AIRBAG = "AIRBAG"


@dataclass(slots=True, frozen=True)
class WallThickness:
    """Body wall thickness in metres; sides applies to both sides."""
    front_m: float = 0.0
    rear_m: float = 0.0
    sides_m: float = 0.0


DEFAULT_WALL_THICKNESS = {
    BodyType.TRAY: WallThickness(),
    BodyType.PANTECH: WallThickness(0.03, 0.03, 0.03),
    BodyType.CURTAINSIDER: WallThickness(),
    BodyType.REFRIGERATED: WallThickness(0.03, 0.03, 0.03),
    BodyType.TIPPER: WallThickness(0.03, 0.0, 0.03),
    BodyType.TANKER: WallThickness(),
}


@dataclass(slots=True, frozen=True)
class VehicleFrame:
    """
    Chassis and body geometry in metres.

    Axle positions are derived from wheelbase, front overhang and cab-to-axle
    (see services.geometry); they are never stored on the frame.
    """
    wheelbase_m: float = 0.0
    front_overhang_m: float = 0.0
    body_length_m: float = 0.0
    body_width_m: float = 0.0
    cab_to_axle_m: float | None = None
    rear_overhang_m: float | None = None
    body_type: BodyType = BodyType.TRAY
    # Explicit wall thickness; None = body type default
    wall_front_m: float | None = None
    wall_rear_m: float | None = None
    wall_sides_m: float | None = None

    @property
    def walls(self) -> WallThickness:
        defaults = DEFAULT_WALL_THICKNESS[self.body_type]
        return WallThickness(
            front_m=defaults.front_m if self.wall_front_m is None else self.wall_front_m,
            rear_m=defaults.rear_m if self.wall_rear_m is None else self.wall_rear_m,
            sides_m=defaults.sides_m if self.wall_sides_m is None else self.wall_sides_m,
        )


@dataclass(slots=True, frozen=True)
class AxleRating:
    """Weight ceiling per axle group and overall (kg)."""
    front_kg: float
    rear_kg: float
    gvm_kg: float


@dataclass(slots=True, frozen=True)
class TareWeights:
    """Empty-vehicle weighbridge readings per axle group (kg)."""
    front_kg: float = 0.0
    rear_kg: float = 0.0

    @property
    def total_kg(self) -> float:
        return self.front_kg + self.rear_kg


@dataclass(slots=True, frozen=True)
class SuspensionConfig:
    """
    Suspension as entered for a truck: a legacy single type for both axles,
    optionally overridden per axle (e.g. taper-leaf front, airbag rear).
    Resolve with services.suspension.resolve_suspension before use.
    """
    suspension_type: SuspensionType = SuspensionType.STEEL
    front_suspension_type: SuspensionType | None = None
    rear_suspension_type: SuspensionType | None = None


@dataclass(slots=True)
class TruckProfile:
    id: int | None = None
    name: str = ""
    frame: VehicleFrame = field(default_factory=VehicleFrame)
    ratings: AxleRating = field(default_factory=lambda: AxleRating(0.0, 0.0, 0.0))
    tare: TareWeights = field(default_factory=TareWeights)
    suspension: SuspensionConfig = field(default_factory=SuspensionConfig)
    # Declared tare from the compliance plate; 0 = use front + rear
    declared_tare_kg: float = 0.0
    classification: VehicleClassification | None = None
