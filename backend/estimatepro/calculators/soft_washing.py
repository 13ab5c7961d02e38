"""Soft washing: low-pressure chemical cleaning of siding and roofs.

The facade rate scales with both the siding material and how dirty it is;
an optional roof is priced separately at its own per-sq-ft rate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from estimatepro.calculators.base import ServiceCalculator, Worksheet
from estimatepro.exceptions import ValidationError
from estimatepro.formatting import format_currency, format_hours, format_rate
from estimatepro.models.enums import ContaminationLevel, ServiceType, SidingMaterial
from estimatepro.models.inputs import SoftWashingInput

if TYPE_CHECKING:
    from estimatepro.data.rates import ServiceRate

_MATERIAL_RATE_MULTIPLIERS: dict[SidingMaterial, float] = {
    SidingMaterial.VINYL: 1.0,
    SidingMaterial.STUCCO: 1.2,
    SidingMaterial.WOOD: 1.3,
    SidingMaterial.COMPOSITE: 1.1,
    SidingMaterial.MIXED: 1.15,
}

_CONTAMINATION_RATE_MULTIPLIERS: dict[ContaminationLevel, float] = {
    ContaminationLevel.LIGHT: 1.0,
    ContaminationLevel.MODERATE: 1.3,
    ContaminationLevel.HEAVY: 1.6,
}

_ROOF_CONTAMINATION_MULTIPLIERS: dict[ContaminationLevel, float] = {
    ContaminationLevel.LIGHT: 1.0,
    ContaminationLevel.MODERATE: 1.4,
    ContaminationLevel.HEAVY: 1.8,
}

# Production relative to clean vinyl (<1 is slower)
_MATERIAL_EFFICIENCY: dict[SidingMaterial, float] = {
    SidingMaterial.VINYL: 1.0,
    SidingMaterial.STUCCO: 0.8,
    SidingMaterial.WOOD: 0.7,
    SidingMaterial.COMPOSITE: 0.9,
    SidingMaterial.MIXED: 0.85,
}

_CONTAMINATION_EFFICIENCY: dict[ContaminationLevel, float] = {
    ContaminationLevel.LIGHT: 1.0,
    ContaminationLevel.MODERATE: 0.8,
    ContaminationLevel.HEAVY: 0.6,
}

ROOF_RATE_PER_SQFT = 0.35
ROOF_SQFT_PER_HOUR = 800.0


class SoftWashingCalculator(ServiceCalculator[SoftWashingInput]):
    service_type = ServiceType.SOFT_WASHING
    service_name = "Soft Washing"
    description = "Low-pressure chemical cleaning for delicate surfaces"
    input_model = SoftWashingInput

    def validate(self, job: SoftWashingInput) -> None:
        if job.includes_roof and job.roof_area <= 0:
            raise ValidationError("roof_area", "roof area is required when the roof is included")

    def unit_rate(
        self, job: SoftWashingInput, rate: ServiceRate, sheet: Worksheet
    ) -> float:
        material = _MATERIAL_RATE_MULTIPLIERS[job.surface_material]
        contamination = _CONTAMINATION_RATE_MULTIPLIERS[job.contamination_level]
        adjusted = rate.unit_rate * material * contamination
        sheet.add(
            "Facade Rate",
            f"{format_currency(rate.unit_rate)} × {material:g} ({job.surface_material}) "
            f"× {contamination:g} ({job.contamination_level})",
            format_rate(adjusted, "sq ft"),
        )
        return adjusted

    def adjust_price(
        self,
        job: SoftWashingInput,
        units: float,
        price: float,
        sheet: Worksheet,
    ) -> float:
        if not job.includes_roof:
            return price
        multiplier = _ROOF_CONTAMINATION_MULTIPLIERS[job.contamination_level]
        roof_price = job.roof_area * ROOF_RATE_PER_SQFT * multiplier
        sheet.add(
            "Roof Cleaning",
            f"{job.roof_area:g} sq ft × {format_currency(ROOF_RATE_PER_SQFT)} × {multiplier:g}",
            format_currency(roof_price),
        )
        return price + roof_price

    def labor_hours(
        self,
        job: SoftWashingInput,
        units: float,
        rate: ServiceRate,
        sheet: Worksheet,
    ) -> float:
        efficiency = (
            _MATERIAL_EFFICIENCY[job.surface_material]
            * _CONTAMINATION_EFFICIENCY[job.contamination_level]
        )
        hours = units * rate.hours_per_unit / efficiency
        sheet.add(
            "Labor Hours",
            f"{units:g} sq ft × {rate.hours_per_unit:.4g} hrs ÷ {efficiency:.2f} efficiency",
            format_hours(hours),
        )
        if job.includes_roof:
            roof_hours = job.roof_area / ROOF_SQFT_PER_HOUR
            sheet.add(
                "Roof Hours",
                f"{job.roof_area:g} sq ft at {ROOF_SQFT_PER_HOUR:g} sq ft/hr",
                format_hours(roof_hours),
            )
            hours += roof_hours
        return hours

    def collect_warnings(
        self,
        job: SoftWashingInput,
        units: float,
        project_days: int,
        sheet: Worksheet,
    ) -> None:
        if job.surface_material == SidingMaterial.WOOD:
            sheet.warn("Wood siding requires extra care - test chemical strength first")
        if job.contamination_level == ContaminationLevel.HEAVY:
            sheet.warn("Heavy contamination may need a second application")
        if job.includes_roof:
            sheet.warn("Roof work requires fall protection and plant protection from runoff")
