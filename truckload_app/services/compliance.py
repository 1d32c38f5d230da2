"""
Axle and GVM compliance lines for a computed weight distribution.

Each line carries the value, limit, percentage of limit and margin, with a
status band: OK below 90 %, WARNING from 90 % to 100 %, OVER_LIMIT above.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ..config.limits import COMPLIANCE_OVER_PCT, COMPLIANCE_WARNING_PCT, EPS
from ..models import AxleRating
from .validation import safe_divide
from .weight_distribution import WeightDistribution


class ComplianceStatus(Enum):
    OK = "OK"
    WARNING = "WARNING"
    OVER_LIMIT = "OVER LIMIT"


@dataclass(slots=True)
class ComplianceLine:
    code: str
    name: str
    status: ComplianceStatus
    value_kg: float
    limit_kg: float
    percentage: float
    margin_kg: float  # limit - value (negative = over)
    message: str


@dataclass(slots=True)
class ComplianceEvaluation:
    lines: List[ComplianceLine] = field(default_factory=list)

    @property
    def compliant(self) -> bool:
        return all(l.status != ComplianceStatus.OVER_LIMIT for l in self.lines)

    @property
    def over(self) -> int:
        return sum(1 for l in self.lines if l.status == ComplianceStatus.OVER_LIMIT)

    @property
    def warnings(self) -> int:
        return sum(1 for l in self.lines if l.status == ComplianceStatus.WARNING)

    def summary(self) -> str:
        if self.compliant and not self.warnings:
            return "All limits OK"
        return f"{self.over} over limit, {self.warnings} warning(s)"


def status_for_percentage(percentage: float) -> ComplianceStatus:
    if percentage > COMPLIANCE_OVER_PCT:
        return ComplianceStatus.OVER_LIMIT
    if percentage >= COMPLIANCE_WARNING_PCT:
        return ComplianceStatus.WARNING
    return ComplianceStatus.OK


def _line(code: str, name: str, value: float, limit: float) -> ComplianceLine:
    percentage = safe_divide(value, limit) * 100.0
    if limit <= EPS and value > 0:
        # No capacity at all: any load is over
        status = ComplianceStatus.OVER_LIMIT
    else:
        status = status_for_percentage(percentage)
    margin = limit - value
    return ComplianceLine(
        code=code,
        name=name,
        status=status,
        value_kg=value,
        limit_kg=limit,
        percentage=percentage,
        margin_kg=margin,
        message=f"{name} {value:,.0f} / {limit:,.0f} kg ({percentage:.1f}%), {status.value}",
    )


def evaluate_compliance(distribution: WeightDistribution, limits: AxleRating) -> ComplianceEvaluation:
    return ComplianceEvaluation(lines=[
        _line("FRONT_AXLE", "Front axle", distribution.front_axle_weight_kg, limits.front_kg),
        _line("REAR_AXLE", "Rear axle", distribution.rear_axle_weight_kg, limits.rear_kg),
        _line("GVM", "GVM", distribution.total_weight_kg, limits.gvm_kg),
    ])
