"""Unit tests for propvest.application.services.exporter module."""

import json
import os

import pandas as pd
import pytest

from propvest.application.services.exporter import PortfolioExporter, metrics_frame


class TestMetricsFrame:
    """Tests for metrics_frame function."""

    def test_one_row_per_property(self, make_property):
        frame = metrics_frame([make_property(id="a"), make_property(id="b", price=500_000)])
        assert list(frame.index) == ["a", "b"]
        assert frame.loc["b", "price"] == 500_000
        assert {"cap_rate", "net_operating_income", "break_even_occupancy"} <= set(frame.columns)

    def test_not_applicable_is_missing(self, make_property):
        frame = metrics_frame([make_property(id="a", price=0), make_property(id="b")])
        assert pd.isna(frame.loc["a", "cap_rate"])
        assert not pd.isna(frame.loc["b", "cap_rate"])

    def test_empty(self):
        assert metrics_frame([]).empty


class TestPortfolioExporter:
    """Tests for PortfolioExporter class."""

    def test_save_writes_json(self, tmp_path, sample_property):
        exporter = PortfolioExporter(output_dir=str(tmp_path / "out"))
        path = exporter.save([sample_property], prefix="austin", metadata={"source": "test"})

        assert os.path.basename(path).startswith("austin_")
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)

        assert payload["metadata"]["count"] == 1
        assert payload["metadata"]["source"] == "test"
        record = payload["properties"][0]
        assert record["property"]["id"] == "austin-1"
        assert record["metrics"]["loan_amount"] == pytest.approx(360_000)
        assert record["offer"]["verdict"] in {"fair", "negotiate", "overpriced", "insufficient_income"}

    def test_default_dir_from_settings(self, monkeypatch):
        from propvest.core import settings as settings_module

        monkeypatch.setenv("PROPVEST_EXPORT_DIR", "exports-from-env")
        settings_module.get_settings.cache_clear()
        try:
            assert PortfolioExporter().output_dir == "exports-from-env"
        finally:
            settings_module.get_settings.cache_clear()
