from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SteerAxleType(Enum):
    SINGLE = "SINGLE"
    TWIN = "TWIN"


class RearAxleGroup(Enum):
    SINGLE = 1
    TANDEM = 2
    TRI = 3
    QUAD = 4
    FIVE_PLUS = 5

    @property
    def axle_count(self) -> int:
        return self.value


class TyreType(Enum):
    SINGLE = "SINGLE"
    DUAL = "DUAL"


class EmissionsTier(Enum):
    PRE_ADR_80_03 = "PRE_ADR_80_03"
    ADR_80_03 = "ADR_80_03"
    ADR_80_04 = "ADR_80_04"  # Euro VI equivalent


@dataclass(slots=True, frozen=True)
class VehicleClassification:
    """
    Regulatory description of a vehicle, independent of its manufacturer
    rating. Tyre widths are nominal section widths in mm.
    """
    steer_axle: SteerAxleType = SteerAxleType.SINGLE
    rear_axle_group: RearAxleGroup = RearAxleGroup.SINGLE
    steer_tyre_width_mm: float = 0.0
    rear_tyre_type: TyreType = TyreType.DUAL
    rear_tyre_width_mm: float = 0.0
    emissions_tier: EmissionsTier = EmissionsTier.PRE_ADR_80_03
    # Cabin strength compliant (ECE R29 or equivalent)
    compliant_cabin: bool = False
    load_sharing_suspension: bool = False
    manufacturer_gvm_kg: float = 0.0
    is_bus: bool = False
    is_b_double: bool = False
    is_road_train: bool = False
    is_pig_trailer: bool = False
    is_low_loader: bool = False
    # Spacing between the steer and rear axle group centres (m); None = unknown
    axle_spacing_m: float | None = None
    # Elected steer-to-drive mass transfer (kg, 0-500)
    mass_transfer_kg: float = 0.0

    @property
    def steer_axle_count(self) -> int:
        return 2 if self.steer_axle == SteerAxleType.TWIN else 1

    @property
    def total_axle_count(self) -> int:
        return self.steer_axle_count + self.rear_axle_group.axle_count
