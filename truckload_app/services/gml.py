"""
General Mass Limits (GML) calculator.

Derives the regulatory steer-axle, rear-axle-group and GVM limits from a
vehicle's classification alone. The manufacturer rating plays no part here;
combine both with services.effective_limits.

The limits are a table lookup (config.gml_tables), selected by steer type,
rear axle group, tyre fitment, vehicle category flags and emissions tier.
Vehicles meeting the ADR 80/04 conditions get an increased steer limit and may
elect to transfer up to 500 kg of it to the rear group.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..config import gml_tables as T
from ..models import (
    AxleRating,
    EmissionsTier,
    RearAxleGroup,
    SteerAxleType,
    TyreType,
    VehicleClassification,
)


@dataclass(slots=True)
class GMLLimits:
    """Regulatory limits (kg). Base = table values; effective = after mass transfer."""
    gvm_kg: float
    front_kg: float
    rear_kg: float
    effective_front_kg: float
    effective_rear_kg: float
    mass_transfer_kg: float = 0.0
    adr_80_04_eligible: bool = False
    table1_ceiling_kg: float | None = None
    spacing_cap_kg: float | None = None
    notes: List[str] = field(default_factory=list)

    def as_rating(self) -> AxleRating:
        return AxleRating(
            front_kg=self.effective_front_kg,
            rear_kg=self.effective_rear_kg,
            gvm_kg=self.gvm_kg,
        )


def is_adr_80_04_eligible(c: VehicleClassification) -> bool:
    """
    Increased-limit tier: ADR 80/04 engine, not a bus or road train, and
    single steer: compliant cabin, minimum GVM and steer tyre width;
    twin steer: load-sharing suspension and steer tyre width.
    """
    if c.emissions_tier != EmissionsTier.ADR_80_04:
        return False
    if c.is_bus or c.is_road_train:
        return False
    tyres_ok = c.steer_tyre_width_mm >= T.ADR_STEER_TYRE_MIN_MM
    if c.steer_axle == SteerAxleType.TWIN:
        return c.load_sharing_suspension and tyres_ok
    return c.compliant_cabin and c.manufacturer_gvm_kg >= T.ADR_SINGLE_STEER_MIN_GVM_KG and tyres_ok


def steer_axle_limit(c: VehicleClassification, adr_eligible: bool) -> float:
    if c.steer_axle == SteerAxleType.TWIN:
        if adr_eligible:
            return T.TWIN_STEER_ADR_80_04_KG
        if c.load_sharing_suspension:
            return T.TWIN_STEER_LOAD_SHARING_KG
        return T.TWIN_STEER_KG

    if adr_eligible:
        return T.SINGLE_STEER_ADR_80_04_KG
    if c.is_bus:
        return T.BUS_SINGLE_STEER_KG
    if c.steer_tyre_width_mm >= T.WIDE_SINGLE_TYRE_MIN_MM:
        return T.SINGLE_STEER_WIDE_TYRES_KG
    return T.SINGLE_STEER_KG


def rear_axle_group_limit(c: VehicleClassification) -> float:
    dual = c.rear_tyre_type == TyreType.DUAL
    wide = c.rear_tyre_type == TyreType.SINGLE and c.rear_tyre_width_mm >= T.WIDE_SINGLE_TYRE_MIN_MM
    group = c.rear_axle_group

    if group == RearAxleGroup.SINGLE:
        if dual:
            return T.BUS_SINGLE_AXLE_DUAL_TYRES_KG if c.is_bus else T.SINGLE_AXLE_DUAL_TYRES_KG
        return T.SINGLE_AXLE_WIDE_TYRES_KG if wide else T.SINGLE_AXLE_SINGLE_TYRES_KG

    if group == RearAxleGroup.TANDEM:
        if dual:
            return T.LOW_LOADER_TANDEM_KG if c.is_low_loader else T.TANDEM_DUAL_TYRES_KG
        return T.TANDEM_WIDE_TYRES_KG if wide else T.TANDEM_SINGLE_TYRES_KG

    if group == RearAxleGroup.TRI:
        if dual and c.is_low_loader:
            return T.LOW_LOADER_TRI_KG
        if dual or wide:
            return T.TRI_DUAL_OR_WIDE_TYRES_KG
        return T.TRI_SINGLE_TYRES_KG

    if c.is_low_loader:
        return T.LOW_LOADER_QUAD_PLUS_KG
    return T.QUAD_AXLE_KG if group == RearAxleGroup.QUAD else T.FIVE_PLUS_AXLE_KG


def table1_ceiling(c: VehicleClassification, adr_eligible: bool) -> float | None:
    """Overall Table-1 ceiling, or None for a single rear axle (GVM = sum of axles)."""
    if c.rear_axle_group == RearAxleGroup.SINGLE:
        return None

    if c.is_road_train:
        ceiling = T.TABLE1_ROAD_TRAIN_KG
    elif c.is_b_double:
        ceiling = T.TABLE1_B_DOUBLE_KG
    elif c.is_pig_trailer:
        ceiling = T.TABLE1_PIG_TRAILER_KG
    elif c.is_bus:
        ceiling = T.TABLE1_BUS_KG.get(c.total_axle_count, T.TABLE1_BUS_MAX_KG)
    else:
        ceiling = T.TABLE1_RIGID_KG.get(c.total_axle_count, T.TABLE1_RIGID_MAX_KG)

    if adr_eligible:
        # The ceiling rises with the steer uplift so the uplift is usable
        ceiling += steer_axle_limit(c, True) - steer_axle_limit(c, False)
    return ceiling


def compute_regulatory_limits(c: VehicleClassification) -> GMLLimits:
    notes: List[str] = []
    eligible = is_adr_80_04_eligible(c)
    front = steer_axle_limit(c, eligible)
    rear = rear_axle_group_limit(c)

    transfer = 0.0
    if c.mass_transfer_kg > 0:
        if eligible:
            transfer = max(0.0, min(T.MASS_TRANSFER_MAX_KG, c.mass_transfer_kg))
            if transfer < c.mass_transfer_kg:
                notes.append(f"Mass transfer limited to {T.MASS_TRANSFER_MAX_KG:.0f} kg.")
        else:
            notes.append("Mass transfer ignored: vehicle not eligible for ADR 80/04 limits.")
    effective_front = front - transfer
    effective_rear = rear + transfer

    candidates = [effective_front + effective_rear]
    ceiling = table1_ceiling(c, eligible)
    if ceiling is not None:
        candidates.append(ceiling)

    spacing_cap = None
    if c.axle_spacing_m is not None and c.axle_spacing_m < T.SHORT_SPACING_THRESHOLD_M:
        spacing_cap = T.SHORT_SPACING_GVM_CAP_KG
        candidates.append(spacing_cap)
        notes.append(
            f"Axle spacing {c.axle_spacing_m:.2f} m below {T.SHORT_SPACING_THRESHOLD_M} m: "
            f"GVM capped at {spacing_cap:.0f} kg."
        )

    return GMLLimits(
        gvm_kg=min(candidates),
        front_kg=front,
        rear_kg=rear,
        effective_front_kg=effective_front,
        effective_rear_kg=effective_rear,
        mass_transfer_kg=transfer,
        adr_80_04_eligible=eligible,
        table1_ceiling_kg=ceiling,
        spacing_cap_kg=spacing_cap,
        notes=notes,
    )
