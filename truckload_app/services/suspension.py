"""
Suspension compression model.

Each suspension type maps axle load to spring compression. The curves are
weighbridge calibration values: taper-leaf 0.5 mm/100 kg (max 20 mm),
multi-leaf steel 0.1 mm/100 kg (max 10 mm), airbag 0.8 mm/100 kg stiffening
10 % per 2000 kg (max 150 mm).
"""

from __future__ import annotations

from typing import Dict, Mapping

from ..config.limits import (
    AIRBAG_BASE_RATE_M_PER_100KG,
    AIRBAG_MAX_TRAVEL_M,
    AIRBAG_STIFFENING_PER_2000KG,
    MULTI_LEAF_MAX_TRAVEL_M,
    MULTI_LEAF_RATE_M_PER_100KG,
    TAPER_LEAF_MAX_TRAVEL_M,
    TAPER_LEAF_RATE_M_PER_100KG,
)
from ..models import AxleSuspension, SuspensionConfig, SuspensionSpec, SuspensionType


DEFAULT_SUSPENSION_SPECS: Dict[SuspensionType, SuspensionSpec] = {
    SuspensionType.TAPER_LEAF: SuspensionSpec(
        SuspensionType.TAPER_LEAF,
        TAPER_LEAF_RATE_M_PER_100KG,
        TAPER_LEAF_MAX_TRAVEL_M,
    ),
    SuspensionType.STEEL: SuspensionSpec(
        SuspensionType.STEEL,
        MULTI_LEAF_RATE_M_PER_100KG,
        MULTI_LEAF_MAX_TRAVEL_M,
    ),
    SuspensionType.AIRBAG: SuspensionSpec(
        SuspensionType.AIRBAG,
        AIRBAG_BASE_RATE_M_PER_100KG,
        AIRBAG_MAX_TRAVEL_M,
        stiffening_per_2000kg=AIRBAG_STIFFENING_PER_2000KG,
    ),
}


def default_spec(suspension_type: SuspensionType) -> SuspensionSpec:
    return DEFAULT_SUSPENSION_SPECS[suspension_type]


def compression(
    axle_load_kg: float,
    suspension_type: SuspensionType,
    specs: Mapping[SuspensionType, SuspensionSpec] | None = None,
) -> float:
    """Compression (m) of an axle carrying axle_load_kg on the given suspension."""
    table = specs or DEFAULT_SUSPENSION_SPECS
    return table[suspension_type].compression(axle_load_kg)


def resolve_suspension(
    config: SuspensionConfig,
    specs: Mapping[SuspensionType, SuspensionSpec] | None = None,
) -> AxleSuspension:
    """
    Resolve the per-axle suspension: an explicit front/rear type wins,
    otherwise the legacy single type applies to that axle.
    """
    table = specs or DEFAULT_SUSPENSION_SPECS
    front_type = config.front_suspension_type or config.suspension_type
    rear_type = config.rear_suspension_type or config.suspension_type
    return AxleSuspension(front=table[front_type], rear=table[rear_type])
