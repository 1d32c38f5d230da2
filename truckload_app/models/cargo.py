from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class CargoItem:
    """
    A pallet or other piece of freight on the floor.

    Position is the front-left corner, in metres from the front of the body (x)
    and from the left side of the body (y).
    """
    id: str = ""
    length_m: float = 0.0
    width_m: float = 0.0
    weight_kg: float = 0.0
    x_m: float = 0.0
    y_m: float = 0.0
    name: str = ""

    @property
    def cog_x_m(self) -> float:
        return self.x_m + self.length_m / 2.0

    @property
    def cog_y_m(self) -> float:
        return self.y_m + self.width_m / 2.0


# Standard pallet footprints (length, width) in metres
STANDARD_PALLET_SIZES = {
    "AU Standard": (1.165, 1.165),
    "AU Half": (1.165, 0.580),
    "EU Standard": (1.200, 0.800),
    "US Standard": (1.219, 1.016),
}
