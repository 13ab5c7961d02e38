"""Biofilm removal: biocide treatment of algae, mold and lichen growth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from estimatepro.calculators.base import ServiceCalculator, Worksheet
from estimatepro.formatting import format_currency, format_hours, format_rate
from estimatepro.models.enums import (
    BiofilmSeverity,
    BiofilmSurface,
    RateTier,
    ServiceType,
)
from estimatepro.models.inputs import BiofilmRemovalInput

if TYPE_CHECKING:
    from estimatepro.data.rates import ServiceRate

_SEVERITY_TIERS: dict[BiofilmSeverity, RateTier] = {
    BiofilmSeverity.LIGHT: RateTier.LOW,
    BiofilmSeverity.MODERATE: RateTier.MID,
    BiofilmSeverity.SEVERE: RateTier.HIGH,
}

_SURFACE_RATE_MULTIPLIERS: dict[BiofilmSurface, float] = {
    BiofilmSurface.CONCRETE: 1.0,
    BiofilmSurface.STONE: 1.1,
    BiofilmSurface.METAL: 0.9,
    BiofilmSurface.GLASS: 0.8,
    BiofilmSurface.MIXED: 1.05,
}

SEALER_RATE_PER_SQFT = 0.20
SEALER_HOURS_PER_SQFT = 0.02
WATER_FEATURE_PRICE_FACTOR = 1.15
WATER_FEATURE_HOURS_FACTOR = 1.2


class BiofilmRemovalCalculator(ServiceCalculator[BiofilmRemovalInput]):
    service_type = ServiceType.BIOFILM_REMOVAL
    service_name = "Biofilm Removal"
    description = "Remove algae, mold and biological growth from surfaces"
    input_model = BiofilmRemovalInput

    def unit_rate(
        self, job: BiofilmRemovalInput, rate: ServiceRate, sheet: Worksheet
    ) -> float:
        tier = _SEVERITY_TIERS[job.biofilm_severity]
        multiplier = _SURFACE_RATE_MULTIPLIERS[job.surface_type]
        adjusted = rate.rate_for(tier) * multiplier
        sheet.add(
            "Treatment Rate",
            f"{job.biofilm_severity} severity ({tier} of range) × {multiplier:g} ({job.surface_type})",
            format_rate(adjusted, "sq ft"),
        )
        return adjusted

    def adjust_price(
        self,
        job: BiofilmRemovalInput,
        units: float,
        price: float,
        sheet: Worksheet,
    ) -> float:
        if job.requires_sealing:
            sealer = units * SEALER_RATE_PER_SQFT
            sheet.add(
                "Sealer",
                f"{units:g} sq ft × {format_currency(SEALER_RATE_PER_SQFT)}",
                format_currency(sealer),
            )
            price += sealer
        if job.has_water_features:
            price *= WATER_FEATURE_PRICE_FACTOR
            sheet.add("Water Features", "+15%", format_currency(price))
        return price

    def labor_hours(
        self,
        job: BiofilmRemovalInput,
        units: float,
        rate: ServiceRate,
        sheet: Worksheet,
    ) -> float:
        hours = units * rate.hours_per_unit
        if job.requires_sealing:
            hours += units * SEALER_HOURS_PER_SQFT
        if job.has_water_features:
            hours *= WATER_FEATURE_HOURS_FACTOR
        sheet.add(
            "Labor Hours",
            f"{units:g} sq ft treatment"
            + (" + sealing" if job.requires_sealing else "")
            + (" × 1.2 water features" if job.has_water_features else ""),
            format_hours(hours),
        )
        return hours

    def collect_warnings(
        self,
        job: BiofilmRemovalInput,
        units: float,
        project_days: int,
        sheet: Worksheet,
    ) -> None:
        sheet.warn("Biofilm removal requires specialized chemicals and handling")
        if job.surface_type == BiofilmSurface.STONE:
            sheet.warn("Test biocide compatibility on stone surfaces")
        if job.requires_sealing:
            sheet.warn("Allow 24-48 hours between treatment and sealing")
        if job.has_water_features:
            sheet.warn("Water features require frequent monitoring")
