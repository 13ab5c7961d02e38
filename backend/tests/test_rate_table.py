"""Tests for the rate data layer."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from estimatepro.data.equipment import (
    EQUIPMENT_DAILY_RATES,
    RIG_HOURS_PER_DROP,
    access_method_for_height,
    equipment_days,
)
from estimatepro.data.rate_table import RateTable
from estimatepro.data.rates import ServiceRate
from estimatepro.data.seed import SEED_SERVICE_RATES
from estimatepro.exceptions import RateTableError, ValidationError
from estimatepro.models.enums import AccessMethod, RateTier, ServiceType, UnitRounding


def _make_rate(**overrides: object) -> ServiceRate:
    data: dict[str, object] = {
        "service_type": ServiceType.GLASS_RESTORATION,
        "location": "raleigh",
        "unit_label": "window",
        "unit_size": 24.0,
        "rounding": UnitRounding.CEIL,
        "unit_rate": 70.0,
        "hours_per_unit": 0.5,
        "labor_rate": 35.0,
    }
    data.update(overrides)
    return ServiceRate.model_validate(data)


def _write_entries(path: Path, entries: list[ServiceRate]) -> Path:
    path.write_text(
        json.dumps([e.model_dump(mode="json") for e in entries]),
        encoding="utf-8",
    )
    return path


# ---------------------------------------------------------------------------
# Seed data integrity
# ---------------------------------------------------------------------------


class TestSeedData:
    def test_every_service_has_rates(self) -> None:
        services = {e.service_type for e in SEED_SERVICE_RATES}
        assert services == set(ServiceType)

    def test_three_markets_per_service(self) -> None:
        table = RateTable.from_entries(SEED_SERVICE_RATES)
        for service_type in ServiceType:
            assert table.locations(service_type) == ["charlotte", "greensboro", "raleigh"]

    def test_glass_restoration_raleigh(self) -> None:
        table = RateTable.from_entries(SEED_SERVICE_RATES)
        rate = table.get_rate(ServiceType.GLASS_RESTORATION, "raleigh")
        assert rate.unit_rate == 70
        assert rate.unit_size == 24
        assert rate.rounding == UnitRounding.CEIL

    def test_window_cleaning_hourly_rates(self) -> None:
        table = RateTable.from_entries(SEED_SERVICE_RATES)
        assert table.get_rate(ServiceType.WINDOW_CLEANING, "raleigh").unit_rate == 75
        assert table.get_rate(ServiceType.WINDOW_CLEANING, "charlotte").unit_rate == 65

    def test_parking_deck_counts_whole_spaces(self) -> None:
        table = RateTable.from_entries(SEED_SERVICE_RATES)
        rate = table.get_rate(ServiceType.PARKING_DECK, "raleigh")
        assert rate.unit_size == 180
        assert rate.rounding == UnitRounding.FLOOR


# ---------------------------------------------------------------------------
# ServiceRate
# ---------------------------------------------------------------------------


class TestServiceRate:
    def test_rate_for_flat_rate(self) -> None:
        rate = _make_rate()
        assert rate.rate_for(RateTier.LOW) == 70
        assert rate.rate_for(RateTier.HIGH) == 70

    def test_rate_for_range(self) -> None:
        rate = _make_rate(unit_rate=16.0, unit_rate_high=23.0)
        assert rate.rate_for(RateTier.LOW) == 16
        assert rate.rate_for(RateTier.MID) == pytest.approx(19.5)
        assert rate.rate_for(RateTier.HIGH) == 23

    def test_inverted_range_rejected(self) -> None:
        with pytest.raises(PydanticValidationError, match="unit_rate_high"):
            _make_rate(unit_rate=23.0, unit_rate_high=16.0)

    def test_upper_case_location_rejected(self) -> None:
        with pytest.raises(PydanticValidationError, match="lower case"):
            _make_rate(location="Raleigh")

    @pytest.mark.parametrize("field", ["unit_rate", "hours_per_unit", "labor_rate", "unit_size"])
    def test_non_positive_values_rejected(self, field: str) -> None:
        with pytest.raises(PydanticValidationError):
            _make_rate(**{field: 0})


# ---------------------------------------------------------------------------
# RateTable
# ---------------------------------------------------------------------------


class TestRateTable:
    def test_lookup_is_case_insensitive(self) -> None:
        table = RateTable.from_entries([_make_rate()])
        assert table.get_rate(ServiceType.GLASS_RESTORATION, " RALEIGH ").unit_rate == 70

    def test_unknown_location(self) -> None:
        table = RateTable.from_entries([_make_rate()])
        with pytest.raises(ValidationError, match="known: raleigh") as exc_info:
            table.get_rate(ServiceType.GLASS_RESTORATION, "durham")
        assert exc_info.value.field == "location"

    def test_service_without_rates(self) -> None:
        table = RateTable.from_entries([_make_rate()])
        with pytest.raises(ValidationError, match="known: none"):
            table.get_rate(ServiceType.PARKING_DECK, "raleigh")

    def test_duplicate_entries_rejected(self) -> None:
        with pytest.raises(RateTableError, match="Duplicate"):
            RateTable.from_entries([_make_rate(), _make_rate(unit_rate=80.0)])

    def test_is_read_only(self) -> None:
        table = RateTable.from_entries([_make_rate()])
        with pytest.raises(TypeError):
            table[(ServiceType.GLASS_RESTORATION, "durham")] = _make_rate()  # type: ignore[index]

    def test_mapping_protocol(self) -> None:
        table = RateTable.from_entries(SEED_SERVICE_RATES)
        assert len(table) == len(SEED_SERVICE_RATES)
        assert (ServiceType.GLASS_RESTORATION, "raleigh") in table

    def test_services_in_catalog_order(self) -> None:
        table = RateTable.from_entries(
            [_make_rate(), _make_rate(service_type=ServiceType.WINDOW_CLEANING)]
        )
        assert table.services() == [ServiceType.WINDOW_CLEANING, ServiceType.GLASS_RESTORATION]


class TestRateTableFromJson:
    def test_round_trips_seed(self, tmp_path: Path) -> None:
        path = _write_entries(tmp_path / "rates.json", SEED_SERVICE_RATES)
        table = RateTable.from_json(path)
        assert table == RateTable.from_entries(SEED_SERVICE_RATES)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(RateTableError, match="Could not read"):
            RateTable.from_json(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "rates.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(RateTableError):
            RateTable.from_json(path)

    def test_not_a_list(self, tmp_path: Path) -> None:
        path = tmp_path / "rates.json"
        path.write_text('{"rates": []}', encoding="utf-8")
        with pytest.raises(RateTableError, match="JSON list"):
            RateTable.from_json(path)

    def test_invalid_entry(self, tmp_path: Path) -> None:
        path = tmp_path / "rates.json"
        path.write_text('[{"service_type": "GR", "location": "raleigh"}]', encoding="utf-8")
        with pytest.raises(RateTableError, match="Invalid rate entry"):
            RateTable.from_json(path)


# ---------------------------------------------------------------------------
# Equipment
# ---------------------------------------------------------------------------


class TestAccessLadder:
    @pytest.mark.parametrize(
        ("stories", "anchors", "method"),
        [
            (1, False, AccessMethod.GROUND),
            (2, False, AccessMethod.SCISSOR_LIFT),
            (4, False, AccessMethod.SCISSOR_LIFT),
            (5, False, AccessMethod.BOOM_LIFT),
            (9, False, AccessMethod.BOOM_LIFT),
            (10, False, AccessMethod.HIGH_REACH_BOOM),
            (10, True, AccessMethod.ROPE_DESCENT),
            (15, False, AccessMethod.HIGH_REACH_BOOM),
            (16, False, AccessMethod.ROPE_DESCENT),
        ],
    )
    def test_ladder(self, stories: int, anchors: bool, method: AccessMethod) -> None:
        assert access_method_for_height(stories, has_roof_anchors=anchors) == method

    def test_tables_cover_every_method(self) -> None:
        assert set(EQUIPMENT_DAILY_RATES) == set(AccessMethod)
        assert set(RIG_HOURS_PER_DROP) == set(AccessMethod)


class TestEquipmentDays:
    def test_minimum_one_day(self) -> None:
        assert equipment_days(0.5, crew_size=2, shift_length=8) == 1

    def test_exact_days(self) -> None:
        assert equipment_days(32, crew_size=2, shift_length=8) == 2

    def test_partial_day_rounds_up(self) -> None:
        assert equipment_days(33, crew_size=2, shift_length=8) == 3
