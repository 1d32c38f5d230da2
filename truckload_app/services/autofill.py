"""
Automatic pallet placement ("auto fill body").

Lays a grid of item-sized slots over the usable floor, then places the weights
heaviest first, each into the free slot whose resulting weight distribution
scores the lowest penalty. Every candidate runs the full weight distribution
solver, so cost is O(slots x weights).

Penalty terms in order of dominance: axle/GVM overage, front/rear balance,
front-axle relief above 85 %, then positional preferences (toward the front
wall, toward the preferred side, left/right symmetry). The constants are
calibrated heuristics held in PenaltyWeights.
"""

from __future__ import annotations

import logging
import math
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence

from ..config.limits import (
    ASYMMETRY_TOLERANCE,
    EPS,
    PENALTY_ASYMMETRY,
    PENALTY_BALANCE,
    PENALTY_CENTER_SIDE,
    PENALTY_FORWARD_BIAS,
    PENALTY_FRONT_OVERAGE,
    PENALTY_FRONT_RELIEF,
    PENALTY_FRONT_RELIEF_THRESHOLD_PCT,
    PENALTY_GVM_OVERAGE,
    PENALTY_NON_PREFERRED_SIDE,
    PENALTY_REAR_OVERAGE,
    TOUCH_TOLERANCE_M,
)
from ..models import AxleRating, CargoItem, TruckProfile
from .effective_limits import LimitMode, select_limits
from .geometry import UsableArea, get_usable_dimensions, items_overlap
from .suspension import resolve_suspension
from .weight_distribution import WeightDistribution, compute_weight_distribution

_LOG = logging.getLogger(__name__)


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


@dataclass(slots=True, frozen=True)
class ItemFootprint:
    length_m: float
    width_m: float


@dataclass(slots=True, frozen=True)
class PenaltyWeights:
    front_overage: float = PENALTY_FRONT_OVERAGE
    rear_overage: float = PENALTY_REAR_OVERAGE
    gvm_overage: float = PENALTY_GVM_OVERAGE
    balance: float = PENALTY_BALANCE
    front_relief_threshold_pct: float = PENALTY_FRONT_RELIEF_THRESHOLD_PCT
    front_relief: float = PENALTY_FRONT_RELIEF
    forward_bias: float = PENALTY_FORWARD_BIAS
    non_preferred_side: float = PENALTY_NON_PREFERRED_SIDE
    center_side: float = PENALTY_CENTER_SIDE
    asymmetry: float = PENALTY_ASYMMETRY
    asymmetry_tolerance: int = ASYMMETRY_TOLERANCE
    # Ties between sides go to this side (left = kerb side for right-hand-drive trucks)
    preferred_side: Side = Side.LEFT


@dataclass(slots=True)
class AutofillOptions:
    replace_existing: bool = True
    max_items: int | None = None
    limit_mode: LimitMode = LimitMode.EFFECTIVE
    penalties: PenaltyWeights = field(default_factory=PenaltyWeights)


@dataclass(slots=True, frozen=True)
class PlacementSlot:
    index: int
    x_m: float
    y_m: float
    row: int
    column: int
    relative_x: float  # 0 at the front wall
    relative_y: float  # 0 at the left wall
    side: Side


@dataclass(slots=True)
class Placement:
    item: CargoItem
    slot: PlacementSlot


@dataclass(slots=True)
class AutofillResult:
    placements: List[Placement]
    unplaced: List[float]
    final_distribution: WeightDistribution
    limits: AxleRating

    @property
    def items(self) -> List[CargoItem]:
        return [p.item for p in self.placements]


def grid_size(usable: UsableArea, footprint: ItemFootprint) -> tuple[int, int]:
    """(columns, rows) of whole items that fit along and across the floor."""
    if footprint.length_m <= 0 or footprint.width_m <= 0:
        return 0, 0
    # 2.4 / 0.8 is 2.9999999999999996 in floats
    columns = max(0, math.floor(usable.length_m / footprint.length_m + EPS))
    rows = max(0, math.floor(usable.width_m / footprint.width_m + EPS))
    return columns, rows


def create_slots(usable: UsableArea, footprint: ItemFootprint) -> List[PlacementSlot]:
    """
    Row-major slot grid, flush against the front wall and centred across the
    body. A slot is CENTER when its middle lies within a quarter item width of
    the centreline.
    """
    columns, rows = grid_size(usable, footprint)
    slots: List[PlacementSlot] = []
    padding_y = max(0.0, (usable.width_m - rows * footprint.width_m) / 2.0)
    centre_line = usable.y_m + usable.width_m / 2.0

    for row in range(rows):
        for column in range(columns):
            x = usable.x_m + column * footprint.length_m
            y = usable.y_m + padding_y + row * footprint.width_m
            slot_centre_y = y + footprint.width_m / 2.0
            if abs(slot_centre_y - centre_line) < footprint.width_m / 4.0:
                side = Side.CENTER
            elif slot_centre_y < centre_line:
                side = Side.LEFT
            else:
                side = Side.RIGHT
            slots.append(
                PlacementSlot(
                    index=len(slots),
                    x_m=x,
                    y_m=y,
                    row=row,
                    column=column,
                    relative_x=(x - usable.x_m) / usable.length_m,
                    relative_y=(y - usable.y_m) / usable.width_m,
                    side=side,
                )
            )
    return slots


def calculate_penalty(
    distribution: WeightDistribution,
    limits: AxleRating,
    weights: PenaltyWeights,
    slot: PlacementSlot | None = None,
    assigned_slots: Sequence[PlacementSlot] = (),
) -> float:
    """
    Score a candidate distribution; lower is better.

    assigned_slots are all slots taken in this run including the candidate.
    """
    front_over = max(0.0, distribution.front_axle_weight_kg - limits.front_kg)
    rear_over = max(0.0, distribution.rear_axle_weight_kg - limits.rear_kg)
    gvm_over = max(0.0, distribution.total_weight_kg - limits.gvm_kg)

    penalty = (
        front_over * weights.front_overage
        + rear_over * weights.rear_overage
        + gvm_over * weights.gvm_overage
    )
    penalty += weights.balance * abs(distribution.front_axle_percentage - distribution.rear_axle_percentage)
    penalty += max(0.0, distribution.front_axle_percentage - weights.front_relief_threshold_pct) * weights.front_relief

    if slot is None:
        return penalty

    penalty += slot.relative_x * weights.forward_bias
    if slot.side == Side.CENTER:
        penalty += weights.center_side
    elif slot.side != weights.preferred_side:
        penalty += weights.non_preferred_side

    left = sum(1 for s in assigned_slots if s.side == Side.LEFT)
    right = sum(1 for s in assigned_slots if s.side == Side.RIGHT)
    penalty += max(0, abs(left - right) - weights.asymmetry_tolerance) * weights.asymmetry
    return penalty


def _new_item(weight_kg: float, slot: PlacementSlot, footprint: ItemFootprint) -> CargoItem:
    return CargoItem(
        id=f"autofill-{uuid.uuid4().hex[:12]}",
        length_m=footprint.length_m,
        width_m=footprint.width_m,
        weight_kg=weight_kg,
        x_m=slot.x_m,
        y_m=slot.y_m,
    )


def optimize_placement(
    profile: TruckProfile,
    footprint: ItemFootprint,
    weights: Sequence[float],
    existing_items: Sequence[CargoItem] = (),
    options: AutofillOptions | None = None,
) -> AutofillResult:
    """
    Place items of the given footprint and weights on the truck.

    Weights that cannot be placed (grid full, over max_items, not positive)
    are returned in unplaced; placed + unplaced always accounts for every
    input weight. An item too big for the floor is not an error: nothing is
    placed and every weight comes back unplaced.
    """
    opts = options or AutofillOptions()
    limits = select_limits(opts.limit_mode, profile.ratings, profile.classification)
    suspension = resolve_suspension(profile.suspension)
    base_items = [] if opts.replace_existing else list(existing_items)

    def distribute(items: Sequence[CargoItem]) -> WeightDistribution:
        return compute_weight_distribution(profile.frame, limits, suspension, profile.tare, items)

    base_distribution = distribute(base_items)
    usable = get_usable_dimensions(profile.frame)
    columns, rows = grid_size(usable, footprint)
    if columns <= 0 or rows <= 0:
        _LOG.debug("Autofill: %.3f x %.3f m item does not fit the floor", footprint.length_m, footprint.width_m)
        return AutofillResult([], list(weights), base_distribution, limits)

    # Slots under kept items are not offered
    slots = [
        s for s in create_slots(usable, footprint)
        if not any(items_overlap(_new_item(0.0, s, footprint), b, spacing_m=-TOUCH_TOLERANCE_M) for b in base_items)
    ]
    slot_limit = len(slots)
    if opts.max_items is not None and opts.max_items > 0:
        slot_limit = min(slot_limit, opts.max_items)

    unplaced: List[float] = [w for w in weights if not w > 0]
    ordered = sorted((w for w in weights if w > 0), reverse=True)
    unplaced.extend(ordered[slot_limit:])
    ordered = ordered[:slot_limit]

    placements: List[Placement] = []
    assigned: List[CargoItem] = []
    used: set[int] = set()
    final_distribution = base_distribution

    for weight in ordered:
        best_score = math.inf
        best_slot: PlacementSlot | None = None
        best_item: CargoItem | None = None
        best_distribution: WeightDistribution | None = None
        taken = [p.slot for p in placements]

        for slot in slots:
            if slot.index in used:
                continue
            candidate = _new_item(weight, slot, footprint)
            distribution = distribute(base_items + assigned + [candidate])
            score = calculate_penalty(distribution, limits, opts.penalties, slot, taken + [slot])
            if score < best_score:
                best_score = score
                best_slot = slot
                best_item = candidate
                best_distribution = distribution

        if best_slot is None or best_item is None:
            unplaced.append(weight)
            continue

        used.add(best_slot.index)
        assigned.append(best_item)
        placements.append(Placement(item=best_item, slot=best_slot))
        if best_distribution is not None:
            final_distribution = best_distribution
        _LOG.debug(
            "Autofill: %.0f kg -> row %d column %d (score %.2f)",
            weight,
            best_slot.row,
            best_slot.column,
            best_score,
        )

    return AutofillResult(placements, unplaced, final_distribution, limits)
