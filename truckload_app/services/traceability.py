"""
Calculation traceability: inputs snapshot, outputs, timestamp.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Sequence

from truckload_app.models import CargoItem


@dataclass(slots=True)
class CalculationSnapshot:
    """Traceability snapshot for a load calculation."""
    timestamp: datetime
    calculation_name: str
    truck_name: str
    inputs: Dict[str, Any] = field(default_factory=dict)
    outputs: Dict[str, Any] = field(default_factory=dict)
    compliance_summary: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "calculation_name": self.calculation_name,
            "truck_name": self.truck_name,
            "inputs": self.inputs,
            "outputs": self.outputs,
            "compliance_summary": self.compliance_summary,
        }


def create_snapshot(
    calculation_name: str,
    truck_name: str,
    items: Sequence[CargoItem],
    distribution: object,
    compliance: object | None = None,
) -> CalculationSnapshot:
    """Build a traceability snapshot from calculation inputs and results."""
    res = distribution
    inputs = {
        "items": [asdict(i) for i in items],
        "item_count": len(items),
    }
    outputs = {
        "total_weight_kg": getattr(res, "total_weight_kg", None),
        "front_axle_weight_kg": getattr(res, "front_axle_weight_kg", None),
        "rear_axle_weight_kg": getattr(res, "rear_axle_weight_kg", None),
        "gvm_percentage": getattr(res, "gvm_percentage", None),
        "front_axle_percentage": getattr(res, "front_axle_percentage", None),
        "rear_axle_percentage": getattr(res, "rear_axle_percentage", None),
        "load_cog_x_m": getattr(res, "load_cog_x_m", None),
    }

    compliance_summary = ""
    if compliance is not None and hasattr(compliance, "summary"):
        compliance_summary = compliance.summary()

    return CalculationSnapshot(
        timestamp=datetime.now(timezone.utc),
        calculation_name=calculation_name,
        truck_name=truck_name,
        inputs=inputs,
        outputs=outputs,
        compliance_summary=compliance_summary,
    )
