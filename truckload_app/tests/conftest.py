"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[2]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from truckload_app.models import (
    AxleRating,
    AxleSuspension,
    BodyType,
    CargoItem,
    SuspensionConfig,
    SuspensionSpec,
    SuspensionType,
    TareWeights,
    TruckProfile,
    VehicleFrame,
)


@pytest.fixture
def sample_frame():
    """Tray body, WB 4.25 m, CA 5.69 m: front axle at 1.44 m, rear at 5.69 m."""
    return VehicleFrame(
        wheelbase_m=4.25,
        front_overhang_m=1.2,
        body_length_m=7.2,
        body_width_m=2.4,
        cab_to_axle_m=5.69,
        body_type=BodyType.TRAY,
    )


@pytest.fixture
def sample_ratings():
    return AxleRating(front_kg=6000.0, rear_kg=9000.0, gvm_kg=15000.0)


@pytest.fixture
def sample_tare():
    return TareWeights(front_kg=3000.0, rear_kg=3000.0)


@pytest.fixture
def rigid_suspension():
    """Springs that never compress, so only the moment balance applies."""
    spec = SuspensionSpec(SuspensionType.STEEL, rate_m_per_100kg=0.0, max_travel_m=0.0)
    return AxleSuspension(front=spec, rear=spec)


@pytest.fixture
def sample_profile(sample_frame, sample_ratings, sample_tare):
    return TruckProfile(
        id=1,
        name="Test Rigid",
        frame=sample_frame,
        ratings=sample_ratings,
        tare=sample_tare,
        suspension=SuspensionConfig(SuspensionType.STEEL),
        declared_tare_kg=6000.0,
    )


@pytest.fixture
def sample_items():
    return [
        CargoItem(id="p1", length_m=1.165, width_m=1.165, weight_kg=800.0, x_m=0.0, y_m=0.0, name="P1"),
        CargoItem(id="p2", length_m=1.165, width_m=1.165, weight_kg=600.0, x_m=1.165, y_m=0.0, name="P2"),
        CargoItem(id="p3", length_m=1.165, width_m=1.165, weight_kg=400.0, x_m=0.0, y_m=1.165, name="P3"),
    ]
