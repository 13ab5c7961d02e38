"""Tests for the EstimateEngine: multi-service estimate composition."""

from __future__ import annotations

from typing import Any

import pytest

from estimatepro.data.rate_table import RateTable
from estimatepro.data.seed import RATE_DATA_VERSION, SEED_SERVICE_RATES
from estimatepro.engine import ENGINE_VERSION, EstimateEngine
from estimatepro.exceptions import UnknownServiceError, ValidationError
from estimatepro.models.enums import ServiceType
from estimatepro.models.estimate import Estimate, ServiceRequest
from estimatepro.registry import CalculatorRegistry


@pytest.fixture()
def engine() -> EstimateEngine:
    """EstimateEngine wired to the seed rate table."""
    return EstimateEngine(CalculatorRegistry(RateTable.from_entries(SEED_SERVICE_RATES)))


# ---------------------------------------------------------------------------
# Helper builders
# ---------------------------------------------------------------------------


def _glass_request(**inputs: Any) -> dict[str, Any]:
    return {
        "serviceType": "GR",
        "inputs": {"glassArea": 240, "location": "raleigh", **inputs},
    }


def _wash_request(**inputs: Any) -> dict[str, Any]:
    return {
        "serviceType": "PW",
        "inputs": {"area": 1000, "location": "raleigh", **inputs},
    }


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


class TestEstimate:
    def test_line_items_in_request_order(self, engine: EstimateEngine) -> None:
        est = engine.estimate("Main St", [_glass_request(), _wash_request()])
        assert [item.service_type for item in est.line_items] == [
            ServiceType.GLASS_RESTORATION,
            ServiceType.PRESSURE_WASHING,
        ]

    def test_subtotal_is_sum_of_line_totals(self, engine: EstimateEngine) -> None:
        est = engine.estimate("Main St", [_glass_request(), _wash_request()])
        assert est.subtotal == 1050
        assert est.subtotal == sum(item.total_price for item in est.line_items)

    def test_rolls_up_hours_and_days(self, engine: EstimateEngine) -> None:
        est = engine.estimate("Main St", [_glass_request(), _wash_request()])
        assert est.total_hours == pytest.approx(6.25 + 1.5625)
        assert est.total_crew_cost == pytest.approx(218.75 + 46.88, abs=0.01)
        assert est.project_days == 2

    def test_equipment_totals(self, engine: EstimateEngine) -> None:
        est = engine.estimate(
            "Main St",
            [_glass_request(buildingHeightStories=2, numberOfDrops=4), _wash_request()],
        )
        assert est.total_equipment_cost == 250

    def test_material_cost_totals(self, engine: EstimateEngine) -> None:
        est = engine.estimate("Main St", [_glass_request(), _wash_request()])
        # 240 sq ft × $2.50 and 1,000 sq ft × $0.08, both with 30% markup
        assert est.total_material_cost == pytest.approx(780 + 104)
        assert est.subtotal == 1050

    def test_accepts_kebab_case_and_legacy_codes(self, engine: EstimateEngine) -> None:
        est = engine.estimate("Plaza", [
            {"serviceType": "glass-restoration", "inputs": {"glassArea": 240, "location": "raleigh"}},
            {"serviceType": "BF", "inputs": {"area": 500, "location": "raleigh"}},
        ])
        assert [item.service_type for item in est.line_items] == [
            ServiceType.GLASS_RESTORATION,
            ServiceType.BIOFILM_REMOVAL,
        ]

    def test_warnings_keyed_by_service(self, engine: EstimateEngine) -> None:
        est = engine.estimate("Main St", [_glass_request(), _wash_request()])
        assert "Results may vary based on glass condition and type" in est.warnings["GR"]
        assert "PW" not in est.warnings

    def test_metadata(self, engine: EstimateEngine) -> None:
        est = engine.estimate("Main St", [_glass_request()])
        assert est.metadata.engine_version == ENGINE_VERSION
        assert est.metadata.rate_data_version == RATE_DATA_VERSION

    def test_accepts_service_request_models(self, engine: EstimateEngine) -> None:
        req = ServiceRequest(service_type="gr", inputs={"glassArea": 240, "location": "raleigh"})
        est = engine.estimate("Main St", [req])
        assert est.line_items[0].base_price == 700

    def test_project_name_is_trimmed(self, engine: EstimateEngine) -> None:
        est = engine.estimate("  Main St  ", [_glass_request()])
        assert est.project_name == "Main St"

    def test_estimate_is_deterministic(self, engine: EstimateEngine) -> None:
        requests = [_glass_request(), _wash_request()]
        assert engine.estimate("A", requests) == engine.estimate("A", requests)


class TestEstimateRejections:
    def test_no_services(self, engine: EstimateEngine) -> None:
        with pytest.raises(ValidationError) as exc_info:
            engine.estimate("Main St", [])
        assert exc_info.value.field == "services"

    def test_duplicate_service(self, engine: EstimateEngine) -> None:
        with pytest.raises(ValidationError, match="more than once"):
            engine.estimate("Main St", [_glass_request(), {"serviceType": "gr", "inputs": {}}])

    def test_blank_project_name(self, engine: EstimateEngine) -> None:
        with pytest.raises(ValidationError) as exc_info:
            engine.estimate("   ", [_glass_request()])
        assert exc_info.value.field == "project_name"

    def test_unknown_service(self, engine: EstimateEngine) -> None:
        with pytest.raises(UnknownServiceError):
            engine.estimate("Main St", [{"serviceType": "XX", "inputs": {}}])

    def test_any_invalid_line_fails_estimate(self, engine: EstimateEngine) -> None:
        with pytest.raises(ValidationError) as exc_info:
            engine.estimate("Main St", [_glass_request(), _wash_request(area=0)])
        assert exc_info.value.field == "area"

    def test_malformed_request(self, engine: EstimateEngine) -> None:
        with pytest.raises(ValidationError):
            engine.estimate("Main St", [{"inputs": {}}])


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


class TestEstimateDicts:
    @pytest.fixture()
    def estimate(self, engine: EstimateEngine) -> Estimate:
        return engine.estimate("Main St", [_glass_request(), _wash_request()])

    def test_summary_dict(self, estimate: Estimate) -> None:
        summary = estimate.to_summary_dict()
        assert summary["project_name"] == "Main St"
        assert summary["num_services"] == 2
        assert summary["subtotal_formatted"] == "$1,050.00"
        assert summary["duration_formatted"] == "2 days"
        assert summary["largest_service"]["service_name"] == "Glass Restoration"
        assert summary["largest_service"]["percent_of_total"] == pytest.approx(66.7)
        assert summary["num_warnings"] == 1

    def test_export_dict(self, estimate: Estimate) -> None:
        export = estimate.to_export_dict()
        assert export["subtotal"] == 1050
        assert [item["service_type"] for item in export["line_items"]] == ["GR", "PW"]
        assert export["line_items"][0]["units"] == 10
        assert export["line_items"][0]["breakdown"]
        assert export["line_items"][0]["materials"][0]["name"] == "Glass polish compound"
        assert export["line_items"][0]["risk_factors"] == []
        assert export["total_material_cost"] == pytest.approx(884)
        assert export["metadata"]["engine_version"] == ENGINE_VERSION

    def test_subtotal_must_match_line_items(self, estimate: Estimate) -> None:
        data = estimate.model_dump()
        data["subtotal"] = 1.0
        with pytest.raises(ValueError, match="does not match"):
            Estimate.model_validate(data)
