"""Tests for the public API surface of the estimatepro package.

Verifies that consumers can import everything they need from the top-level
``estimatepro`` package, use the factories for quick setup, and round-trip
results through JSON serialization.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

import estimatepro
from estimatepro import (
    CalculationResult,
    CalculatorRegistry,
    Estimate,
    EstimateEngine,
    EstimateProError,
    RateTable,
    RateTableError,
    ServiceType,
    UnknownServiceError,
    ValidationError,
    create_default_engine,
    create_default_rate_table,
    create_default_registry,
)
from estimatepro.data.seed import SEED_SERVICE_RATES
from estimatepro.factory import RATES_FILE_ENV


class TestExports:
    def test_all_names_importable(self) -> None:
        for name in estimatepro.__all__:
            assert hasattr(estimatepro, name), name

    def test_error_hierarchy(self) -> None:
        assert issubclass(ValidationError, EstimateProError)
        assert issubclass(ValidationError, ValueError)
        assert issubclass(UnknownServiceError, EstimateProError)
        assert issubclass(UnknownServiceError, KeyError)
        assert issubclass(RateTableError, EstimateProError)


class TestFactories:
    def test_default_rate_table_uses_seed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(RATES_FILE_ENV, raising=False)
        table = create_default_rate_table()
        assert len(table) == len(SEED_SERVICE_RATES)

    def test_rate_table_from_env_file(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        entries = [e for e in SEED_SERVICE_RATES if e.location == "raleigh"]
        path = tmp_path / "rates.json"
        path.write_text(json.dumps([e.model_dump(mode="json") for e in entries]))
        monkeypatch.setenv(RATES_FILE_ENV, str(path))

        table = create_default_rate_table()
        assert table.locations() == ["raleigh"]

    def test_bad_rates_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv(RATES_FILE_ENV, str(tmp_path / "missing.json"))
        with pytest.raises(RateTableError):
            create_default_registry()

    def test_default_registry(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(RATES_FILE_ENV, raising=False)
        registry = create_default_registry()
        assert isinstance(registry, CalculatorRegistry)
        assert isinstance(registry.rate_table, RateTable)

    def test_default_engine(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(RATES_FILE_ENV, raising=False)
        engine = create_default_engine()
        assert isinstance(engine, EstimateEngine)
        est = engine.estimate(
            "Lobby refresh",
            [{"serviceType": "HD", "inputs": {"area": 5000, "location": "greensboro"}}],
        )
        assert isinstance(est, Estimate)
        assert est.line_items[0].service_type == ServiceType.HIGH_DUSTING


class TestSerialization:
    def test_result_json_round_trip(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(RATES_FILE_ENV, raising=False)
        result = create_default_registry().calculate(
            "GR",
            {"glassArea": 240, "buildingHeightStories": 2, "numberOfDrops": 4,
             "location": "raleigh"},
        )
        restored = CalculationResult.model_validate_json(result.model_dump_json(by_alias=True))
        assert restored == result

    def test_estimate_json_round_trip(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(RATES_FILE_ENV, raising=False)
        est = create_default_engine().estimate(
            "Garage",
            [{"serviceType": "PD", "inputs": {"numberOfSpaces": 120, "location": "charlotte"}}],
        )
        restored = Estimate.model_validate_json(est.model_dump_json())
        assert restored == est
