from __future__ import annotations

from dataclasses import dataclass

from truckload_app.models.truck import SuspensionType


@dataclass(slots=True, frozen=True)
class SuspensionSpec:
    """
    Spring behaviour of one axle group.

    compression = load/100 * rate * (1 + load/2000 * stiffening), capped at
    max_travel_m. stiffening = 0 gives a linear spring.
    """
    suspension_type: SuspensionType
    rate_m_per_100kg: float
    max_travel_m: float
    stiffening_per_2000kg: float = 0.0

    def compression(self, axle_load_kg: float) -> float:
        if axle_load_kg <= 0:
            return 0.0
        rate = self.rate_m_per_100kg * (1.0 + (axle_load_kg / 2000.0) * self.stiffening_per_2000kg)
        return min((axle_load_kg / 100.0) * rate, self.max_travel_m)


@dataclass(slots=True, frozen=True)
class AxleSuspension:
    """Suspension resolved once per axle group; any object with compression(load_kg) fits."""
    front: SuspensionSpec
    rear: SuspensionSpec
