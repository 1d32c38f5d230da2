"""
Simple text-based report builder for a load calculation.
"""

from __future__ import annotations

from typing import Sequence

from truckload_app.models import CargoItem, TruckProfile
from truckload_app.services.compliance import ComplianceEvaluation
from truckload_app.services.weight_distribution import WeightDistribution
from truckload_app.utils.formatting import format_dimension, format_percentage, format_weight


def build_load_summary_text(
    profile: TruckProfile,
    distribution: WeightDistribution,
    items: Sequence[CargoItem] = (),
    compliance: ComplianceEvaluation | None = None,
    trace_timestamp: str = "",
) -> str:
    lines: list[str] = []
    lines.append(f"Truck: {profile.name}")
    lines.append(
        f"Body: {profile.frame.body_type.value} "
        f"{format_dimension(profile.frame.body_length_m)} x {format_dimension(profile.frame.body_width_m)}"
    )
    lines.append("")
    lines.append(f"Items: {len(items)}  Load: {format_weight(distribution.load_weight_kg)}")
    lines.append(f"Load COG: {distribution.load_cog_x_m:.2f} m from body front")
    lines.append(
        f"Front axle: {format_weight(distribution.front_axle_weight_kg)} "
        f"({format_percentage(distribution.front_axle_percentage)})"
    )
    lines.append(
        f"Rear axle: {format_weight(distribution.rear_axle_weight_kg)} "
        f"({format_percentage(distribution.rear_axle_percentage)})"
    )
    lines.append(
        f"Gross: {format_weight(distribution.total_weight_kg)} "
        f"({format_percentage(distribution.gvm_percentage)} of GVM)"
    )
    if compliance is not None:
        lines.append("")
        for line in compliance.lines:
            lines.append(line.message)
        lines.append(f"Compliance: {compliance.summary()}")
    if trace_timestamp:
        lines.append(f"Calculated: {trace_timestamp}")
    return "\n".join(lines)
