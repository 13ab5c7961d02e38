"""High dusting: overhead dust removal from beams, ducts, fans and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

from estimatepro.calculators.base import ServiceCalculator, Worksheet
from estimatepro.formatting import format_currency, format_hours, format_rate
from estimatepro.models.enums import (
    AccessMethod,
    RateTier,
    ServiceType,
    SurfaceComplexity,
)
from estimatepro.models.inputs import HighDustingInput

if TYPE_CHECKING:
    from estimatepro.data.rates import ServiceRate

# Complexity picks a point in the market's per-sq-ft range
_COMPLEXITY_TIERS: dict[SurfaceComplexity, RateTier] = {
    SurfaceComplexity.SIMPLE: RateTier.LOW,
    SurfaceComplexity.MODERATE: RateTier.MID,
    SurfaceComplexity.COMPLEX: RateTier.HIGH,
}

# Production relative to a moderate space (>1 is faster)
_COMPLEXITY_PRODUCTION: dict[SurfaceComplexity, float] = {
    SurfaceComplexity.SIMPLE: 1.2,
    SurfaceComplexity.MODERATE: 1.0,
    SurfaceComplexity.COMPLEX: 0.8,
}

FAN_SURCHARGE_PER_SQFT = 0.10
FIXTURE_SURCHARGE_PER_SQFT = 0.15


class HighDustingCalculator(ServiceCalculator[HighDustingInput]):
    service_type = ServiceType.HIGH_DUSTING
    service_name = "High Dusting"
    description = "Overhead dust removal from high surfaces and fixtures"
    input_model = HighDustingInput

    def unit_rate(
        self, job: HighDustingInput, rate: ServiceRate, sheet: Worksheet
    ) -> float:
        tier = _COMPLEXITY_TIERS[job.surface_complexity]
        resolved = rate.rate_for(tier)
        sheet.add(
            "Complexity Rate",
            f"{job.surface_complexity} complexity ({tier} of range)",
            format_rate(resolved, "sq ft"),
        )
        return resolved

    def adjust_price(
        self,
        job: HighDustingInput,
        units: float,
        price: float,
        sheet: Worksheet,
    ) -> float:
        if job.includes_fans:
            surcharge = units * FAN_SURCHARGE_PER_SQFT
            sheet.add("Fan Cleaning", f"{units:g} sq ft × $0.10", format_currency(surcharge))
            price += surcharge
        if job.includes_fixtures:
            surcharge = units * FIXTURE_SURCHARGE_PER_SQFT
            sheet.add("Fixture Cleaning", f"{units:g} sq ft × $0.15", format_currency(surcharge))
            price += surcharge
        return price

    def labor_hours(
        self,
        job: HighDustingInput,
        units: float,
        rate: ServiceRate,
        sheet: Worksheet,
    ) -> float:
        production = _COMPLEXITY_PRODUCTION[job.surface_complexity]
        hours = units * rate.hours_per_unit / production
        sheet.add(
            "Labor Hours",
            f"{units:g} sq ft × {rate.hours_per_unit:.4g} hrs ÷ {production:g} production",
            format_hours(hours),
        )
        return hours

    def collect_warnings(
        self,
        job: HighDustingInput,
        units: float,
        project_days: int,
        sheet: Worksheet,
    ) -> None:
        if self.access_method(job) in (AccessMethod.HIGH_REACH_BOOM, AccessMethod.ROPE_DESCENT):
            sheet.warn("High-rise work requires specialized equipment")
        if job.includes_fans:
            sheet.warn("Fan cleaning requires specialized brushes and tools")
        if job.includes_fixtures and units > 10_000:
            sheet.warn("Large fixture cleaning requires comprehensive tool kit")
