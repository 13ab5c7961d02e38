"""Parking deck cleaning, priced per space.

Jobs give either a space count or the deck's total area; an area is
converted to whole spaces at 180 sq ft per space (partial spaces are not
billed).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from estimatepro.calculators.base import ServiceCalculator, Worksheet, normalize_units
from estimatepro.exceptions import ValidationError
from estimatepro.formatting import format_currency, format_hours
from estimatepro.models.enums import (
    AccessMethod,
    DeckLevel,
    DeckServiceScope,
    DrainageComplexity,
    RateTier,
    ServiceType,
)
from estimatepro.models.inputs import ParkingDeckInput

if TYPE_CHECKING:
    from estimatepro.data.rates import ServiceRate

_SCOPE_TIERS: dict[DeckServiceScope, RateTier] = {
    DeckServiceScope.SWEEP_ONLY: RateTier.LOW,
    DeckServiceScope.WASH_ONLY: RateTier.MID,
    DeckServiceScope.SWEEP_AND_WASH: RateTier.HIGH,
}

# Share of a full sweep-and-wash visit's labor
_SCOPE_HOURS_FACTORS: dict[DeckServiceScope, float] = {
    DeckServiceScope.SWEEP_ONLY: 0.3,
    DeckServiceScope.WASH_ONLY: 0.7,
    DeckServiceScope.SWEEP_AND_WASH: 1.0,
}

_LEVEL_SURCHARGES: dict[DeckLevel, float] = {
    DeckLevel.GROUND: 0.0,
    DeckLevel.ELEVATED: 0.10,
    DeckLevel.UNDERGROUND: 0.15,
}

OIL_STAIN_RATE_PER_SPACE = 2.0
OIL_STAIN_HOURS_FACTOR = 1.3
COMPLEX_DRAINAGE_SURCHARGE = 0.08
LARGE_DECK_SPACES = 500


class ParkingDeckCalculator(ServiceCalculator[ParkingDeckInput]):
    service_type = ServiceType.PARKING_DECK
    service_name = "Parking Deck Cleaning"
    description = "Sweeping and pressure washing of parking structures"
    input_model = ParkingDeckInput

    def validate(self, job: ParkingDeckInput) -> None:
        if job.number_of_spaces is None and job.total_area is None:
            raise ValidationError(
                "number_of_spaces",
                "either number of spaces or total area is required",
            )

    def billing_units(
        self, job: ParkingDeckInput, rate: ServiceRate, sheet: Worksheet
    ) -> float:
        if job.number_of_spaces is not None:
            return float(job.number_of_spaces)
        area = job.total_area or 0.0
        spaces = normalize_units(area, rate.unit_size, rate.rounding)
        if spaces <= 0:
            raise ValidationError(
                "total_area",
                f"area {area:g} sq ft is less than one {rate.unit_size:g} sq ft space",
            )
        sheet.add(
            "Billing Units",
            f"{area:g} sq ft ÷ {rate.unit_size:g} sq ft per space",
            f"{spaces:g} spaces",
        )
        return spaces

    def unit_rate(
        self, job: ParkingDeckInput, rate: ServiceRate, sheet: Worksheet
    ) -> float:
        tier = _SCOPE_TIERS[job.service_scope]
        resolved = rate.rate_for(tier)
        sheet.add(
            "Scope Rate",
            f"{job.service_scope} ({tier} of range)",
            f"{format_currency(resolved)}/space",
        )
        return resolved

    def adjust_price(
        self,
        job: ParkingDeckInput,
        units: float,
        price: float,
        sheet: Worksheet,
    ) -> float:
        level = _LEVEL_SURCHARGES[job.deck_level]
        if level:
            price *= 1 + level
            sheet.add("Deck Level", f"{job.deck_level} +{level:.0%}", format_currency(price))
        if job.has_oil_stains:
            oil = units * OIL_STAIN_RATE_PER_SPACE
            price += oil
            sheet.add(
                "Oil Stain Treatment",
                f"{units:g} spaces × {format_currency(OIL_STAIN_RATE_PER_SPACE)}",
                format_currency(oil),
            )
        if job.drainage_complexity == DrainageComplexity.COMPLEX:
            price *= 1 + COMPLEX_DRAINAGE_SURCHARGE
            sheet.add("Drainage", "Complex drainage +8%", format_currency(price))
        return price

    def labor_hours(
        self,
        job: ParkingDeckInput,
        units: float,
        rate: ServiceRate,
        sheet: Worksheet,
    ) -> float:
        factor = _SCOPE_HOURS_FACTORS[job.service_scope]
        if job.has_oil_stains:
            factor *= OIL_STAIN_HOURS_FACTOR
        hours = units * rate.hours_per_unit * factor
        sheet.add(
            "Labor Hours",
            f"{units:g} spaces × {rate.hours_per_unit:g} hrs × {factor:g}",
            format_hours(hours),
        )
        return hours

    def access_method(self, job: ParkingDeckInput) -> AccessMethod | None:
        # Decks are driven onto; no lift or rig is needed on any level.
        return None

    def collect_warnings(
        self,
        job: ParkingDeckInput,
        units: float,
        project_days: int,
        sheet: Worksheet,
    ) -> None:
        if job.deck_level == DeckLevel.UNDERGROUND and job.service_scope != DeckServiceScope.SWEEP_ONLY:
            sheet.warn("Underground washing requires additional ventilation")
        if job.has_oil_stains:
            sheet.warn("Oil treatment chemicals require proper disposal")
        if job.drainage_complexity == DrainageComplexity.COMPLEX:
            sheet.warn("Complex drainage requires runoff management")
        if units > LARGE_DECK_SPACES:
            sheet.warn("Large deck requires staged cleaning approach")
