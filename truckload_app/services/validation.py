"""
Validation checks for truck profiles and placed loads.

Run validate_truck_profile before the weight distribution solver: the solver
assumes a positive wheelbase. Failures come back as a list of issues with
human-readable messages, never as exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence

from truckload_app.config.limits import EPS, TARE_SUM_TOLERANCE, TOUCH_TOLERANCE_M
from truckload_app.models import CargoItem, TruckProfile
from truckload_app.services.geometry import item_fits, items_overlap


class ValidationSeverity(Enum):
    OK = "ok"
    WARNING = "warning"
    ERROR = "error"


@dataclass(slots=True)
class ValidationIssue:
    code: str
    severity: ValidationSeverity
    message: str
    value: float | None = None
    limit: float | None = None


@dataclass(slots=True)
class ValidationResult:
    valid: bool
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(i.severity == ValidationSeverity.ERROR for i in self.issues)

    @property
    def has_warnings(self) -> bool:
        return any(i.severity == ValidationSeverity.WARNING for i in self.issues)

    @property
    def errors(self) -> List[str]:
        return [i.message for i in self.issues if i.severity == ValidationSeverity.ERROR]


def safe_divide(a: float, b: float, default: float = 0.0) -> float:
    """Avoid zero-weight divisions."""
    if abs(b) < EPS:
        return default
    return a / b


def _error(code: str, message: str, value: float | None = None, limit: float | None = None) -> ValidationIssue:
    return ValidationIssue(code=code, severity=ValidationSeverity.ERROR, message=message, value=value, limit=limit)


def validate_truck_profile(profile: TruckProfile) -> ValidationResult:
    """Check a truck profile is complete and self-consistent."""
    issues: List[ValidationIssue] = []
    frame = profile.frame
    ratings = profile.ratings
    tare = profile.tare

    if not profile.name.strip():
        issues.append(_error("NAME_REQUIRED", "Truck name is required"))

    # 1. Positive dimensions
    if frame.body_length_m <= 0:
        issues.append(_error("BODY_LENGTH", "Body length must be greater than 0", frame.body_length_m, 0.0))
    if frame.body_width_m <= 0:
        issues.append(_error("BODY_WIDTH", "Body width must be greater than 0", frame.body_width_m, 0.0))
    if frame.wheelbase_m <= 0:
        issues.append(_error("WHEELBASE", "Wheelbase must be greater than 0", frame.wheelbase_m, 0.0))

    # 2. Weights and limits
    if tare.front_kg <= 0:
        issues.append(_error("FRONT_TARE", "Front tare weight must be greater than 0", tare.front_kg, 0.0))
    if tare.rear_kg <= 0:
        issues.append(_error("REAR_TARE", "Rear tare weight must be greater than 0", tare.rear_kg, 0.0))
    if ratings.gvm_kg <= 0:
        issues.append(_error("GVM", "GVM must be greater than 0", ratings.gvm_kg, 0.0))
    if ratings.front_kg <= 0:
        issues.append(_error("FRONT_LIMIT", "Front axle limit must be greater than 0", ratings.front_kg, 0.0))
    if ratings.rear_kg <= 0:
        issues.append(_error("REAR_LIMIT", "Rear axle limit must be greater than 0", ratings.rear_kg, 0.0))

    # 3. Consistency
    declared = profile.declared_tare_kg
    if declared > 0 and tare.front_kg > 0 and tare.rear_kg > 0:
        if abs(tare.total_kg - declared) > declared * TARE_SUM_TOLERANCE:
            issues.append(_error(
                "TARE_SUM",
                f"Front and rear tare weights ({tare.total_kg:.0f} kg) must sum to tare weight ({declared:.0f} kg)",
                tare.total_kg,
                declared,
            ))
    if tare.total_kg > 0 and ratings.gvm_kg > 0 and tare.total_kg >= ratings.gvm_kg:
        issues.append(_error("TARE_OVER_GVM", "Tare weight must be less than GVM", tare.total_kg, ratings.gvm_kg))
    if tare.front_kg > 0 and ratings.front_kg > 0 and tare.front_kg > ratings.front_kg:
        issues.append(_error("FRONT_TARE_OVER", "Front tare weight exceeds front axle limit", tare.front_kg, ratings.front_kg))
    if tare.rear_kg > 0 and ratings.rear_kg > 0 and tare.rear_kg > ratings.rear_kg:
        issues.append(_error("REAR_TARE_OVER", "Rear tare weight exceeds rear axle limit", tare.rear_kg, ratings.rear_kg))
    if (
        ratings.front_kg > 0
        and ratings.rear_kg > 0
        and ratings.gvm_kg > 0
        and ratings.front_kg + ratings.rear_kg < ratings.gvm_kg
    ):
        issues.append(_error(
            "AXLE_SUM_UNDER_GVM",
            "Sum of axle limits must be at least equal to GVM",
            ratings.front_kg + ratings.rear_kg,
            ratings.gvm_kg,
        ))
    if frame.wheelbase_m > 0 and frame.body_length_m > 0 and frame.wheelbase_m > frame.body_length_m:
        issues.append(_error("WHEELBASE_OVER_BODY", "Wheelbase cannot exceed body length", frame.wheelbase_m, frame.body_length_m))

    return ValidationResult(valid=not any(i.severity == ValidationSeverity.ERROR for i in issues), issues=issues)


def validate_load(profile: TruckProfile, items: Sequence[CargoItem]) -> ValidationResult:
    """Check placed items: positive weight, inside the usable floor, no overlaps."""
    issues: List[ValidationIssue] = []

    if not items:
        issues.append(ValidationIssue(
            code="EMPTY_LOAD",
            severity=ValidationSeverity.WARNING,
            message="No cargo placed. Axle weights equal tare.",
        ))

    for item in items:
        label = item.name or item.id
        if item.weight_kg <= 0:
            issues.append(_error("ITEM_WEIGHT", f"Item {label} must weigh more than 0 kg", item.weight_kg, 0.0))
        if item.length_m <= 0 or item.width_m <= 0:
            issues.append(_error("ITEM_SIZE", f"Item {label} must have a positive length and width"))
        elif not item_fits(item, profile.frame):
            issues.append(_error("ITEM_OUTSIDE", f"Item {label} extends outside the usable floor area"))

    for i, a in enumerate(items):
        for b in items[i + 1:]:
            # Touching items are allowed
            if items_overlap(a, b, spacing_m=-TOUCH_TOLERANCE_M):
                issues.append(_error(
                    "ITEM_OVERLAP",
                    f"Items {a.name or a.id} and {b.name or b.id} overlap",
                ))

    return ValidationResult(valid=not any(i.severity == ValidationSeverity.ERROR for i in issues), issues=issues)
