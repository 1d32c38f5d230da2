"""Tests for truck profile and load validation."""

from __future__ import annotations

from dataclasses import replace

from truckload_app.models import AxleRating, CargoItem, TareWeights
from truckload_app.services.validation import (
    ValidationSeverity,
    safe_divide,
    validate_load,
    validate_truck_profile,
)


def _codes(result) -> set[str]:
    return {i.code for i in result.issues}


class TestSafeDivide:
    def test_normal(self):
        assert safe_divide(10.0, 2.0) == 5.0

    def test_zero_divisor(self):
        assert safe_divide(10.0, 0.0) == 0.0
        assert safe_divide(10.0, 0.0, default=99.0) == 99.0


class TestValidateTruckProfile:
    def test_valid_profile(self, sample_profile):
        result = validate_truck_profile(sample_profile)
        assert result.valid
        assert not result.issues

    def test_zero_wheelbase_rejected(self, sample_profile):
        sample_profile.frame = replace(sample_profile.frame, wheelbase_m=0.0)
        result = validate_truck_profile(sample_profile)
        assert not result.valid
        assert "WHEELBASE" in _codes(result)

    def test_missing_name_and_dimensions(self, sample_profile):
        sample_profile.name = "  "
        sample_profile.frame = replace(sample_profile.frame, body_length_m=0.0, body_width_m=-1.0)
        codes = _codes(validate_truck_profile(sample_profile))
        assert {"NAME_REQUIRED", "BODY_LENGTH", "BODY_WIDTH"} <= codes

    def test_tare_must_match_declared(self, sample_profile):
        sample_profile.declared_tare_kg = 7000.0
        result = validate_truck_profile(sample_profile)
        assert "TARE_SUM" in _codes(result)
        assert any("must sum to tare weight" in m for m in result.errors)

    def test_tare_within_one_percent_is_accepted(self, sample_profile):
        sample_profile.declared_tare_kg = 6050.0
        assert validate_truck_profile(sample_profile).valid

    def test_tare_over_limits(self, sample_profile):
        sample_profile.tare = TareWeights(front_kg=6500.0, rear_kg=9500.0)
        sample_profile.declared_tare_kg = 0.0
        codes = _codes(validate_truck_profile(sample_profile))
        assert {"TARE_OVER_GVM", "FRONT_TARE_OVER", "REAR_TARE_OVER"} <= codes

    def test_axle_limits_below_gvm(self, sample_profile):
        sample_profile.ratings = AxleRating(front_kg=5000.0, rear_kg=8000.0, gvm_kg=15000.0)
        assert "AXLE_SUM_UNDER_GVM" in _codes(validate_truck_profile(sample_profile))

    def test_wheelbase_longer_than_body(self, sample_profile):
        sample_profile.frame = replace(sample_profile.frame, wheelbase_m=8.0)
        assert "WHEELBASE_OVER_BODY" in _codes(validate_truck_profile(sample_profile))


class TestValidateLoad:
    def test_empty_load_is_a_warning(self, sample_profile):
        result = validate_load(sample_profile, [])
        assert result.valid
        assert result.has_warnings
        assert result.issues[0].severity == ValidationSeverity.WARNING

    def test_valid_load(self, sample_profile, sample_items):
        result = validate_load(sample_profile, sample_items)
        assert result.valid
        assert not result.has_errors

    def test_item_outside_floor(self, sample_profile):
        items = [CargoItem(id="a", length_m=1.2, width_m=1.0, weight_kg=100.0, x_m=6.5, y_m=0.0)]
        assert "ITEM_OUTSIDE" in _codes(validate_load(sample_profile, items))

    def test_item_weight_and_size(self, sample_profile):
        items = [
            CargoItem(id="a", length_m=1.0, width_m=1.0, weight_kg=0.0),
            CargoItem(id="b", length_m=0.0, width_m=1.0, weight_kg=10.0, x_m=3.0),
        ]
        codes = _codes(validate_load(sample_profile, items))
        assert {"ITEM_WEIGHT", "ITEM_SIZE"} <= codes

    def test_overlapping_items(self, sample_profile):
        items = [
            CargoItem(id="a", length_m=1.2, width_m=1.0, weight_kg=100.0, x_m=0.0, y_m=0.0),
            CargoItem(id="b", length_m=1.2, width_m=1.0, weight_kg=100.0, x_m=0.6, y_m=0.5),
        ]
        result = validate_load(sample_profile, items)
        assert not result.valid
        assert "ITEM_OVERLAP" in _codes(result)
