"""Tests for domain models and settings."""

from __future__ import annotations

import logging

import pytest

from truckload_app.config.settings import Settings, init_logging
from truckload_app.models import (
    BodyType,
    CargoItem,
    RearAxleGroup,
    STANDARD_PALLET_SIZES,
    SteerAxleType,
    SuspensionSpec,
    SuspensionType,
    TareWeights,
    VehicleClassification,
    VehicleFrame,
)


class TestCargoItem:
    def test_cog(self):
        item = CargoItem(id="a", length_m=1.2, width_m=0.8, weight_kg=500.0, x_m=1.0, y_m=0.5)
        assert item.cog_x_m == pytest.approx(1.6)
        assert item.cog_y_m == pytest.approx(0.9)

    def test_standard_pallets(self):
        assert STANDARD_PALLET_SIZES["AU Standard"] == (1.165, 1.165)
        assert STANDARD_PALLET_SIZES["EU Standard"] == (1.2, 0.8)


class TestFrame:
    def test_walls_default_by_body_type(self):
        assert VehicleFrame(body_type=BodyType.TRAY).walls.sides_m == 0.0
        assert VehicleFrame(body_type=BodyType.REFRIGERATED).walls.front_m == pytest.approx(0.03)

    def test_frame_is_immutable(self):
        frame = VehicleFrame(wheelbase_m=4.0)
        with pytest.raises(AttributeError):
            frame.wheelbase_m = 5.0  # type: ignore[misc]

    def test_tare_total(self):
        assert TareWeights(3000.0, 2500.0).total_kg == 5500.0


class TestClassification:
    def test_axle_counts(self):
        c = VehicleClassification(steer_axle=SteerAxleType.TWIN, rear_axle_group=RearAxleGroup.TRI)
        assert c.steer_axle_count == 2
        assert c.total_axle_count == 5

    def test_suspension_spec_linear(self):
        spec = SuspensionSpec(SuspensionType.STEEL, rate_m_per_100kg=0.001, max_travel_m=1.0)
        assert spec.compression(2000.0) == pytest.approx(0.02)


class TestSettings:
    def test_data_dir_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TRUCKLOAD_DATA_DIR", str(tmp_path / "data"))
        settings = Settings.default()
        assert settings.data_dir == tmp_path / "data"
        assert settings.data_dir.is_dir()
        assert settings.log_path.name == "truckload.log"
        assert settings.log_level == logging.INFO

    def test_init_logging_writes_to_data_dir(self, tmp_path, monkeypatch):
        root = logging.getLogger()
        # basicConfig is a no-op while pytest's capture handlers are attached
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)
        settings = Settings(project_root=tmp_path, data_dir=tmp_path)
        init_logging(settings)
        added = list(root.handlers)
        try:
            assert any(isinstance(h, logging.FileHandler) for h in added)
            for h in added:
                h.flush()
            assert settings.log_path.exists()
            assert "Logging initialized" in settings.log_path.read_text(encoding="utf-8")
        finally:
            for h in added:
                h.close()
