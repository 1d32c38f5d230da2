"""
Effective (legally binding) limits: the stricter of manufacturer and GML.

Anything that decides whether a load is legal must compare against
resolve_effective_limits, never against the manufacturer rating alone.
"""

from __future__ import annotations

from enum import Enum

from ..models import AxleRating, VehicleClassification
from .gml import GMLLimits, compute_regulatory_limits


class LimitMode(Enum):
    MANUFACTURER = "mfg"
    REGULATORY = "gml"
    EFFECTIVE = "effective"


def resolve_effective_limits(
    manufacturer: AxleRating,
    regulatory: GMLLimits | VehicleClassification,
) -> AxleRating:
    """Element-wise minimum of manufacturer and regulatory (post-transfer) limits."""
    if isinstance(regulatory, VehicleClassification):
        regulatory = compute_regulatory_limits(regulatory)
    return AxleRating(
        front_kg=min(manufacturer.front_kg, regulatory.effective_front_kg),
        rear_kg=min(manufacturer.rear_kg, regulatory.effective_rear_kg),
        gvm_kg=min(manufacturer.gvm_kg, regulatory.gvm_kg),
    )


def select_limits(
    mode: LimitMode,
    manufacturer: AxleRating,
    classification: VehicleClassification | None,
) -> AxleRating:
    """
    Limits for the requested mode. Without a classification there is no
    regulatory figure, so every mode falls back to the manufacturer rating.
    """
    if classification is None or mode == LimitMode.MANUFACTURER:
        return manufacturer
    if mode == LimitMode.REGULATORY:
        return compute_regulatory_limits(classification).as_rating()
    return resolve_effective_limits(manufacturer, classification)
