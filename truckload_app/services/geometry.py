"""
Body geometry: axle positions, usable floor area and item placement checks.

Coordinate frame: 0 m = front of the body (back of the cab), x grows toward
the rear, y grows from the left side of the body. The front axle normally sits
under the cab, so its position is usually negative.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from ..config.limits import (
    FREE_POSITION_GRID_STEP_M,
    MIN_ITEM_SPACING_M,
    NOMINAL_CAB_LENGTH_M,
    TOUCH_TOLERANCE_M,
)
from ..models import CargoItem, VehicleFrame


@dataclass(slots=True, frozen=True)
class AxlePositions:
    front_m: float
    rear_m: float

    @property
    def wheelbase_m(self) -> float:
        return self.rear_m - self.front_m


@dataclass(slots=True, frozen=True)
class UsableArea:
    """Floor inside the walls: origin offset from the body front-left and size (m)."""
    x_m: float
    y_m: float
    length_m: float
    width_m: float


def compute_axle_positions(frame: VehicleFrame) -> AxlePositions:
    """
    Axle positions relative to the body front.

    With CA from the chassis data the rear axle is CA behind the body front and
    the front axle one wheelbase ahead of it (e.g. CA 3.675, WB 4.660 gives
    front -0.985 m). Without CA a nominal cab length is assumed.
    """
    if frame.cab_to_axle_m:
        rear = frame.cab_to_axle_m
        front = rear - frame.wheelbase_m
    else:
        front = -NOMINAL_CAB_LENGTH_M + frame.front_overhang_m
        rear = front + frame.wheelbase_m
    return AxlePositions(front_m=front, rear_m=rear)


def get_usable_dimensions(frame: VehicleFrame) -> UsableArea:
    walls = frame.walls
    return UsableArea(
        x_m=walls.front_m,
        y_m=walls.sides_m,
        length_m=frame.body_length_m - walls.front_m - walls.rear_m,
        width_m=frame.body_width_m - walls.sides_m * 2,
    )


def item_fits(item: CargoItem, frame: VehicleFrame) -> bool:
    """True when the item lies entirely within the usable floor area (flush with a wall counts)."""
    usable = get_usable_dimensions(frame)
    tol = TOUCH_TOLERANCE_M
    return (
        item.x_m >= usable.x_m - tol
        and item.y_m >= usable.y_m - tol
        and item.x_m + item.length_m <= usable.x_m + usable.length_m + tol
        and item.y_m + item.width_m <= usable.y_m + usable.width_m + tol
    )


def items_overlap(a: CargoItem, b: CargoItem, spacing_m: float = MIN_ITEM_SPACING_M) -> bool:
    """True when two items overlap or sit closer than the minimum spacing."""
    return not (
        a.x_m + a.length_m + spacing_m <= b.x_m
        or b.x_m + b.length_m + spacing_m <= a.x_m
        or a.y_m + a.width_m + spacing_m <= b.y_m
        or b.y_m + b.width_m + spacing_m <= a.y_m
    )


def find_free_position(
    length_m: float,
    width_m: float,
    existing: Iterable[CargoItem],
    frame: VehicleFrame,
    step_m: float = FREE_POSITION_GRID_STEP_M,
) -> Tuple[float, float]:
    """
    First position, scanning front to rear then left to right on a grid,
    where a new item fits without overlapping existing items.

    Falls back to the usable origin when the floor is full.
    """
    usable = get_usable_dimensions(frame)
    placed = list(existing)
    max_x = usable.x_m + usable.length_m - length_m
    max_y = usable.y_m + usable.width_m - width_m

    i = 0
    while usable.x_m + i * step_m <= max_x + 1e-9:
        x = usable.x_m + i * step_m
        j = 0
        while usable.y_m + j * step_m <= max_y + 1e-9:
            y = usable.y_m + j * step_m
            candidate = CargoItem(id="candidate", length_m=length_m, width_m=width_m, x_m=x, y_m=y)
            if item_fits(candidate, frame) and not any(items_overlap(candidate, other) for other in placed):
                return x, y
            j += 1
        i += 1

    return usable.x_m, usable.y_m
