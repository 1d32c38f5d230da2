"""Tests for compliance lines and calculation snapshots."""

from __future__ import annotations

import pytest

from truckload_app.models import AxleRating
from truckload_app.services.compliance import (
    ComplianceStatus,
    evaluate_compliance,
    status_for_percentage,
)
from truckload_app.services.traceability import create_snapshot
from truckload_app.services.weight_distribution import WeightDistribution, compute_profile_distribution


class TestStatusBands:
    def test_bands(self):
        assert status_for_percentage(50.0) == ComplianceStatus.OK
        assert status_for_percentage(89.9) == ComplianceStatus.OK
        assert status_for_percentage(90.0) == ComplianceStatus.WARNING
        assert status_for_percentage(100.0) == ComplianceStatus.WARNING
        assert status_for_percentage(100.1) == ComplianceStatus.OVER_LIMIT


class TestEvaluateCompliance:
    def test_light_load_all_ok(self, sample_profile, sample_items):
        dist = compute_profile_distribution(sample_profile, sample_items)
        evaluation = evaluate_compliance(dist, sample_profile.ratings)
        assert [l.code for l in evaluation.lines] == ["FRONT_AXLE", "REAR_AXLE", "GVM"]
        assert evaluation.compliant
        assert evaluation.summary() == "All limits OK"

    def test_over_limit_reports_negative_margin(self, sample_profile, sample_items):
        dist = compute_profile_distribution(sample_profile, sample_items)
        tight = AxleRating(front_kg=3000.0, rear_kg=9000.0, gvm_kg=15000.0)
        evaluation = evaluate_compliance(dist, tight)
        front = evaluation.lines[0]
        assert front.status == ComplianceStatus.OVER_LIMIT
        assert front.margin_kg == pytest.approx(3000.0 - dist.front_axle_weight_kg)
        assert front.margin_kg < 0
        assert not evaluation.compliant
        assert evaluation.summary().startswith("1 over limit")

    def test_load_against_zero_limit_is_over(self, sample_profile, sample_items):
        dist = compute_profile_distribution(sample_profile, sample_items)
        evaluation = evaluate_compliance(dist, AxleRating(0.0, 9000.0, 15000.0))
        front = evaluation.lines[0]
        assert front.percentage == 0.0
        assert front.status == ComplianceStatus.OVER_LIMIT
        assert front.margin_kg < 0
        assert not evaluation.compliant
        assert evaluation.over == 1

    def test_zero_limit_with_no_load_is_ok(self):
        dist = WeightDistribution(
            total_weight_kg=0.0,
            front_axle_weight_kg=0.0,
            rear_axle_weight_kg=0.0,
            total_capacity_remaining_kg=0.0,
            front_axle_capacity_remaining_kg=0.0,
            rear_axle_capacity_remaining_kg=0.0,
            gvm_percentage=0.0,
            front_axle_percentage=0.0,
            rear_axle_percentage=0.0,
            is_overweight=False,
            is_front_overweight=False,
            is_rear_overweight=False,
            load_cog_x_m=0.0,
        )
        evaluation = evaluate_compliance(dist, AxleRating(0.0, 0.0, 0.0))
        assert evaluation.compliant


class TestSnapshot:
    def test_snapshot_captures_inputs_and_outputs(self, sample_profile, sample_items):
        dist = compute_profile_distribution(sample_profile, sample_items)
        evaluation = evaluate_compliance(dist, sample_profile.ratings)
        snap = create_snapshot("Load plan", sample_profile.name, sample_items, dist, evaluation)
        data = snap.to_dict()
        assert data["truck_name"] == "Test Rigid"
        assert data["inputs"]["item_count"] == 3
        assert data["inputs"]["items"][0]["id"] == "p1"
        assert data["outputs"]["total_weight_kg"] == pytest.approx(dist.total_weight_kg)
        assert data["compliance_summary"] == "All limits OK"
        assert "T" in data["timestamp"]

    def test_snapshot_without_compliance(self, sample_profile):
        dist = compute_profile_distribution(sample_profile, [])
        snap = create_snapshot("Empty", sample_profile.name, [], dist)
        assert snap.compliance_summary == ""
        assert snap.outputs["load_cog_x_m"] == 0.0
