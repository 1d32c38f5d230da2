"""Tests for text and Excel load reports."""

from __future__ import annotations

import pandas as pd
import pytest
from openpyxl import load_workbook

from truckload_app.reports import build_load_summary_text, export_load_plan_excel
from truckload_app.services.compliance import evaluate_compliance
from truckload_app.services.weight_distribution import compute_profile_distribution
from truckload_app.utils.formatting import format_dimension, format_percentage, format_weight


class TestFormatting:
    def test_weight(self):
        assert format_weight(2350.0) == "2.35 t"
        assert format_weight(850.4) == "850 kg"

    def test_dimension(self):
        assert format_dimension(0.58) == "580 mm"
        assert format_dimension(4.25) == "4.25 m"

    def test_percentage(self):
        assert format_percentage(91.234) == "91.2%"


class TestTextReport:
    def test_summary_lines(self, sample_profile, sample_items):
        dist = compute_profile_distribution(sample_profile, sample_items)
        evaluation = evaluate_compliance(dist, sample_profile.ratings)
        text = build_load_summary_text(sample_profile, dist, sample_items, evaluation, "2026-01-01T00:00:00")
        assert text.startswith("Truck: Test Rigid")
        assert "Items: 3" in text
        assert "Compliance: All limits OK" in text
        assert "Calculated: 2026-01-01T00:00:00" in text

    def test_without_compliance(self, sample_profile):
        dist = compute_profile_distribution(sample_profile, [])
        text = build_load_summary_text(sample_profile, dist)
        assert "Compliance" not in text
        assert "Items: 0" in text


class TestExcelReport:
    def test_sheets_and_values(self, tmp_path, sample_profile, sample_items):
        dist = compute_profile_distribution(sample_profile, sample_items)
        evaluation = evaluate_compliance(dist, sample_profile.ratings)
        path = export_load_plan_excel(tmp_path / "plan.xlsx", sample_profile, dist, sample_items, evaluation)
        assert path.exists()

        wb = load_workbook(path)
        assert wb.sheetnames == ["Summary", "Items", "Compliance"]
        assert wb["Summary"]["A1"].font.bold

        items = pd.read_excel(path, sheet_name="Items", engine="openpyxl")
        assert list(items["Item"]) == ["P1", "P2", "P3"]
        assert items["Weight (kg)"].sum() == pytest.approx(1800.0)

        compliance = pd.read_excel(path, sheet_name="Compliance", engine="openpyxl")
        assert list(compliance["Code"]) == ["FRONT_AXLE", "REAR_AXLE", "GVM"]

    def test_no_items_no_compliance(self, tmp_path, sample_profile):
        dist = compute_profile_distribution(sample_profile, [])
        path = export_load_plan_excel(tmp_path / "empty.xlsx", sample_profile, dist)
        wb = load_workbook(path)
        assert wb.sheetnames == ["Summary", "Items"]
