"""
Axle weight distribution for a loaded truck.

Rigid-body moment balance about the rear axle gives the first split of the
load between the axle groups. An iterative correction then accounts for the
pitch caused by the front and rear suspensions compressing by different
amounts (e.g. taper-leaf front on airbag rear), which moves weight rearward.

The correction blends a compression ratio and a COG-shift ratio 0.7/0.3 and
applies it to half the carried load. These weights and the estimated COG
height are calibrated approximations, not derived physics.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from ..config.limits import (
    COG_HEIGHT_BASE_M,
    COG_HEIGHT_FACTOR_MAX,
    COG_HEIGHT_FACTOR_MIN,
    COG_HEIGHT_SPAN_M,
    COG_SHIFT_WEIGHT,
    COMPRESSION_SHIFT_WEIGHT,
    EPS,
    SHIFT_LOAD_FRACTION,
    SOLVER_CONVERGENCE_KG,
    SOLVER_MAX_ITERATIONS,
)
from ..models import (
    AxleRating,
    AxleSuspension,
    CargoItem,
    SuspensionConfig,
    TareWeights,
    TruckProfile,
    VehicleFrame,
)
from .geometry import compute_axle_positions
from .suspension import resolve_suspension
from .validation import safe_divide

_LOG = logging.getLogger(__name__)


@dataclass(slots=True)
class WeightDistribution:
    total_weight_kg: float
    front_axle_weight_kg: float
    rear_axle_weight_kg: float
    total_capacity_remaining_kg: float
    front_axle_capacity_remaining_kg: float
    rear_axle_capacity_remaining_kg: float
    gvm_percentage: float
    front_axle_percentage: float
    rear_axle_percentage: float
    is_overweight: bool
    is_front_overweight: bool
    is_rear_overweight: bool
    load_cog_x_m: float  # from body front; 0 with no load
    load_cog_y_m: float = 0.0
    load_weight_kg: float = 0.0
    front_compression_m: float = 0.0
    rear_compression_m: float = 0.0
    iterations: int = 0


@dataclass(slots=True)
class _SuspensionCorrection:
    front_load_kg: float
    front_compression_m: float = 0.0
    rear_compression_m: float = 0.0
    iterations: int = 0


def calculate_load_cog(items: Sequence[CargoItem]) -> Tuple[float, float]:
    """
    Weighted centre of the items, (x, y) in metres from the body front-left.

    Returns (0.0, 0.0) for an empty list, which callers treat as no load.
    """
    if not items:
        return 0.0, 0.0
    weights = np.fromiter((i.weight_kg for i in items), dtype=float, count=len(items))
    total = float(weights.sum())
    if abs(total) < EPS:
        return 0.0, 0.0
    xs = np.fromiter((i.x_m + i.length_m / 2.0 for i in items), dtype=float, count=len(items))
    ys = np.fromiter((i.y_m + i.width_m / 2.0 for i in items), dtype=float, count=len(items))
    return float(weights @ xs) / total, float(weights @ ys) / total


def rigid_body_split(
    load_weight_kg: float,
    cog_x_m: float,
    rear_axle_m: float,
    wheelbase_m: float,
) -> Tuple[float, float]:
    """
    (front, rear) share of the load from moments about the rear axle.

    A COG behind the rear axle gives a negative front share: the load lifts
    weight off the front axle and onto the rear.
    """
    front = load_weight_kg * (rear_axle_m - cog_x_m) / wheelbase_m
    return front, load_weight_kg - front


def estimate_cog_height(cog_to_rear_m: float, wheelbase_m: float) -> float:
    """Loaded COG height estimate, between 1.15 m and 1.35 m."""
    factor = max(COG_HEIGHT_FACTOR_MIN, min(COG_HEIGHT_FACTOR_MAX, abs(cog_to_rear_m) / wheelbase_m))
    return COG_HEIGHT_BASE_M + factor * COG_HEIGHT_SPAN_M


def _correct_for_suspension(
    front_load_kg: float,
    load_weight_kg: float,
    tare: TareWeights,
    suspension: AxleSuspension,
    wheelbase_m: float,
    cog_height_m: float,
) -> _SuspensionCorrection:
    result = _SuspensionCorrection(front_load_kg=front_load_kg)
    current_front = front_load_kg

    for iteration in range(SOLVER_MAX_ITERATIONS):
        current_rear = load_weight_kg - current_front
        front_axle_kg = tare.front_kg + current_front
        rear_axle_kg = tare.rear_kg + current_rear

        front_c = suspension.front.compression(front_axle_kg)
        rear_c = suspension.rear.compression(rear_axle_kg)
        differential = rear_c - front_c

        pitch = math.atan(differential / wheelbase_m)
        cog_shift = cog_height_m * math.sin(pitch)
        ratio = (
            COMPRESSION_SHIFT_WEIGHT * abs(differential) / wheelbase_m
            + COG_SHIFT_WEIGHT * abs(cog_shift) / wheelbase_m
        )
        shift = math.copysign(ratio, differential) * SHIFT_LOAD_FRACTION * (current_front + current_rear)

        new_front = current_front - shift
        change = abs(new_front - current_front)
        current_front = new_front

        result.front_compression_m = front_c
        result.rear_compression_m = rear_c
        result.iterations = iteration + 1
        if change < SOLVER_CONVERGENCE_KG:
            break

    result.front_load_kg = current_front
    return result


def _build_distribution(
    front_kg: float,
    rear_kg: float,
    ratings: AxleRating,
    load_weight_kg: float,
    cog: Tuple[float, float],
) -> WeightDistribution:
    total = front_kg + rear_kg
    return WeightDistribution(
        total_weight_kg=total,
        front_axle_weight_kg=front_kg,
        rear_axle_weight_kg=rear_kg,
        total_capacity_remaining_kg=ratings.gvm_kg - total,
        front_axle_capacity_remaining_kg=ratings.front_kg - front_kg,
        rear_axle_capacity_remaining_kg=ratings.rear_kg - rear_kg,
        gvm_percentage=safe_divide(total, ratings.gvm_kg) * 100.0,
        front_axle_percentage=safe_divide(front_kg, ratings.front_kg) * 100.0,
        rear_axle_percentage=safe_divide(rear_kg, ratings.rear_kg) * 100.0,
        is_overweight=total > ratings.gvm_kg,
        is_front_overweight=front_kg > ratings.front_kg,
        is_rear_overweight=rear_kg > ratings.rear_kg,
        load_cog_x_m=cog[0],
        load_cog_y_m=cog[1],
        load_weight_kg=load_weight_kg,
    )


def compute_weight_distribution(
    frame: VehicleFrame,
    ratings: AxleRating,
    suspension: AxleSuspension | SuspensionConfig,
    tare: TareWeights,
    items: Sequence[CargoItem],
) -> WeightDistribution:
    """
    Axle and gross weights for the given items on a truck.

    The frame must have passed validation (wheelbase > 0). Remaining capacity
    goes negative and percentages exceed 100 when overweight; that is a
    result, not an error.
    """
    load_weight = sum(i.weight_kg for i in items)

    if load_weight <= 0:
        return _build_distribution(tare.front_kg, tare.rear_kg, ratings, 0.0, (0.0, 0.0))

    if isinstance(suspension, SuspensionConfig):
        suspension = resolve_suspension(suspension)

    cog = calculate_load_cog(items)
    axles = compute_axle_positions(frame)
    wheelbase = frame.wheelbase_m

    load_on_front, _ = rigid_body_split(load_weight, cog[0], axles.rear_m, wheelbase)

    height = estimate_cog_height(axles.rear_m - cog[0], wheelbase)
    correction = _correct_for_suspension(load_on_front, load_weight, tare, suspension, wheelbase, height)
    _LOG.debug(
        "Suspension correction: front load %.1f -> %.1f kg in %d iteration(s)",
        load_on_front,
        correction.front_load_kg,
        correction.iterations,
    )

    load_on_front = correction.front_load_kg
    load_on_rear = load_weight - load_on_front

    front_axle = tare.front_kg + load_on_front
    rear_axle = tare.rear_kg + load_on_rear

    # An axle cannot carry negative weight: it lifts and the other axle takes it all
    if front_axle < 0:
        rear_axle += front_axle
        front_axle = 0.0
    if rear_axle < 0:
        front_axle += rear_axle
        rear_axle = 0.0

    result = _build_distribution(front_axle, rear_axle, ratings, load_weight, cog)
    result.front_compression_m = correction.front_compression_m
    result.rear_compression_m = correction.rear_compression_m
    result.iterations = correction.iterations
    return result


def compute_profile_distribution(
    profile: TruckProfile,
    items: Sequence[CargoItem],
    limits: AxleRating | None = None,
) -> WeightDistribution:
    """Distribution for a stored truck profile, against limits (default: its manufacturer rating)."""
    return compute_weight_distribution(
        profile.frame,
        limits or profile.ratings,
        profile.suspension,
        profile.tare,
        items,
    )
