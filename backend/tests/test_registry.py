"""Tests for service code dispatch."""

from __future__ import annotations

from typing import Any

import pytest

from estimatepro.calculators.glass_restoration import GlassRestorationCalculator
from estimatepro.data.rate_table import RateTable
from estimatepro.data.seed import SEED_SERVICE_RATES
from estimatepro.exceptions import UnknownServiceError
from estimatepro.models.enums import ServiceType
from estimatepro.registry import (
    CALCULATOR_CLASSES,
    CalculatorRegistry,
    get_calculator,
    resolve_service_type,
)

# Smallest valid job for each service, keyed by service code.
_MINIMAL_INPUTS: dict[str, dict[str, Any]] = {
    "WC": {"glassArea": 240},
    "GR": {"glassArea": 240},
    "PW": {"area": 1000},
    "PWS": {"area": 1000},
    "FC": {"area": 5000},
    "FR": {"numberOfFrames": 20},
    "HD": {"area": 2000},
    "SW": {"facadeArea": 1500},
    "PD": {"numberOfSpaces": 50},
    "GRC": {"area": 500},
    "BR": {"area": 500},
}


@pytest.fixture()
def registry() -> CalculatorRegistry:
    return CalculatorRegistry(RateTable.from_entries(SEED_SERVICE_RATES))


class TestCalculatorClasses:
    def test_every_service_type_registered(self) -> None:
        assert set(CALCULATOR_CLASSES) == set(ServiceType)

    def test_class_service_type_matches_key(self) -> None:
        for service_type, cls in CALCULATOR_CLASSES.items():
            assert cls.service_type == service_type

    def test_mapping_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            CALCULATOR_CLASSES[ServiceType.GLASS_RESTORATION] = GlassRestorationCalculator  # type: ignore[index]


class TestResolveServiceType:
    @pytest.mark.parametrize("code", ["GR", "gr", " Gr ", "glass_restoration"])
    def test_accepts_code_variants(self, code: str) -> None:
        assert resolve_service_type(code) == ServiceType.GLASS_RESTORATION

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("window-cleaning", ServiceType.WINDOW_CLEANING),
            ("glass-restoration", ServiceType.GLASS_RESTORATION),
            ("biofilm-removal", ServiceType.BIOFILM_REMOVAL),
            ("pressure-wash-seal", ServiceType.PRESSURE_WASH_SEAL),
            ("Final-Clean", ServiceType.FINAL_CLEAN),
        ],
    )
    def test_accepts_kebab_case_ids(self, code: str, expected: ServiceType) -> None:
        assert resolve_service_type(code) == expected

    def test_every_kebab_case_id_resolves(self) -> None:
        for svc in ServiceType:
            assert resolve_service_type(svc.name.lower().replace("_", "-")) == svc

    @pytest.mark.parametrize("code", ["BF", "bf"])
    def test_legacy_biofilm_code(self, code: str) -> None:
        assert resolve_service_type(code) == ServiceType.BIOFILM_REMOVAL

    def test_accepts_enum(self) -> None:
        assert resolve_service_type(ServiceType.PARKING_DECK) == ServiceType.PARKING_DECK

    def test_unknown_code(self) -> None:
        with pytest.raises(UnknownServiceError) as exc_info:
            resolve_service_type("XX")
        assert exc_info.value.service_code == "XX"
        assert str(exc_info.value) == "Unknown service type 'XX'"

    def test_unknown_code_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            resolve_service_type("")


class TestCalculatorRegistry:
    def test_get_returns_matching_calculator(self, registry: CalculatorRegistry) -> None:
        assert isinstance(registry.get("gr"), GlassRestorationCalculator)

    def test_get_returns_same_instance(self, registry: CalculatorRegistry) -> None:
        assert registry.get("GR") is registry.get(ServiceType.GLASS_RESTORATION)

    def test_get_unknown(self, registry: CalculatorRegistry) -> None:
        with pytest.raises(UnknownServiceError):
            registry.get("ZZ")

    @pytest.mark.parametrize("code", sorted(_MINIMAL_INPUTS))
    def test_result_service_type_matches_code(
        self, registry: CalculatorRegistry, code: str
    ) -> None:
        result = registry.calculate(code, {**_MINIMAL_INPUTS[code], "location": "raleigh"})
        assert result.service_type == ServiceType(code)
        assert result.total_price > 0

    def test_minimal_inputs_cover_catalog(self) -> None:
        assert set(_MINIMAL_INPUTS) == {svc.value for svc in ServiceType}

    def test_service_types(self, registry: CalculatorRegistry) -> None:
        assert registry.service_types() == list(ServiceType)

    def test_get_calculator_uses_given_table(self) -> None:
        table = RateTable.from_entries(
            e for e in SEED_SERVICE_RATES if e.location == "charlotte"
        )
        calc = get_calculator("GR", table)
        result = calc.calculate({"glassArea": 240, "location": "charlotte"})
        assert result.base_price == 650
