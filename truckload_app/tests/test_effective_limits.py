"""Tests for effective limit resolution."""

from __future__ import annotations

import pytest

from truckload_app.models import AxleRating, RearAxleGroup, VehicleClassification
from truckload_app.services.effective_limits import (
    LimitMode,
    resolve_effective_limits,
    select_limits,
)
from truckload_app.services.gml import compute_regulatory_limits


class TestResolveEffectiveLimits:
    def test_regulatory_is_stricter(self):
        mfg = AxleRating(front_kg=6500.0, rear_kg=9500.0, gvm_kg=16000.0)
        eff = resolve_effective_limits(mfg, VehicleClassification())
        assert eff == AxleRating(front_kg=6000.0, rear_kg=9000.0, gvm_kg=15000.0)

    def test_manufacturer_is_stricter(self):
        mfg = AxleRating(front_kg=5500.0, rear_kg=8000.0, gvm_kg=12000.0)
        eff = resolve_effective_limits(mfg, VehicleClassification())
        assert eff == mfg

    def test_mixed(self):
        mfg = AxleRating(front_kg=5500.0, rear_kg=10000.0, gvm_kg=14000.0)
        eff = resolve_effective_limits(mfg, VehicleClassification())
        assert eff.front_kg == 5500.0
        assert eff.rear_kg == 9000.0
        assert eff.gvm_kg == 14000.0

    def test_precomputed_matches_classification(self):
        c = VehicleClassification(rear_axle_group=RearAxleGroup.TANDEM)
        mfg = AxleRating(front_kg=7000.0, rear_kg=17000.0, gvm_kg=24000.0)
        assert resolve_effective_limits(mfg, c) == resolve_effective_limits(mfg, compute_regulatory_limits(c))

    @pytest.mark.parametrize("front, rear, gvm", [(4000.0, 20000.0, 30000.0), (9000.0, 5000.0, 11000.0)])
    def test_minimality(self, front, rear, gvm):
        mfg = AxleRating(front_kg=front, rear_kg=rear, gvm_kg=gvm)
        gml = compute_regulatory_limits(VehicleClassification(rear_axle_group=RearAxleGroup.TANDEM))
        eff = resolve_effective_limits(mfg, gml)
        assert eff.front_kg == min(mfg.front_kg, gml.effective_front_kg)
        assert eff.rear_kg == min(mfg.rear_kg, gml.effective_rear_kg)
        assert eff.gvm_kg == min(mfg.gvm_kg, gml.gvm_kg)


class TestSelectLimits:
    def test_modes(self):
        mfg = AxleRating(front_kg=6500.0, rear_kg=8500.0, gvm_kg=16000.0)
        c = VehicleClassification()
        assert select_limits(LimitMode.MANUFACTURER, mfg, c) == mfg
        assert select_limits(LimitMode.REGULATORY, mfg, c) == AxleRating(6000.0, 9000.0, 15000.0)
        assert select_limits(LimitMode.EFFECTIVE, mfg, c) == AxleRating(6000.0, 8500.0, 15000.0)

    def test_without_classification_falls_back_to_manufacturer(self):
        mfg = AxleRating(front_kg=6500.0, rear_kg=8500.0, gvm_kg=16000.0)
        for mode in LimitMode:
            assert select_limits(mode, mfg, None) == mfg
