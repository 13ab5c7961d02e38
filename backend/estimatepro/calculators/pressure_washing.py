"""Pressure washing and pressure wash & seal, both priced per sq ft."""

from __future__ import annotations

from typing import TYPE_CHECKING

from estimatepro.calculators.base import ServiceCalculator, Worksheet
from estimatepro.data.materials import (
    SEALER_MATERIAL_RATE_PER_SQFT,
    SURFACE_SEALER,
    supplies_for,
)
from estimatepro.formatting import format_currency, format_rate
from estimatepro.models.enums import PressureWashSurface, RiskLevel, RiskType, ServiceType
from estimatepro.models.inputs import PressureWashingInput, PressureWashSealInput
from estimatepro.models.result import RiskFactor

if TYPE_CHECKING:
    from estimatepro.data.rates import ServiceRate
    from estimatepro.models.enums import AccessMethod
    from estimatepro.models.result import MaterialItem

# Surface -> rate multiplier (concrete is the reference surface)
_SURFACE_RATE_MULTIPLIERS: dict[PressureWashSurface, float] = {
    PressureWashSurface.CONCRETE: 1.0,
    PressureWashSurface.BRICK: 1.15,
    PressureWashSurface.STONE: 1.2,
    PressureWashSurface.WOOD: 0.9,
    PressureWashSurface.METAL: 0.85,
}

SEALER_RATE_PER_SQFT = 0.20
HIGH_PRESSURE_PSI = 3000.0
DAMAGING_PRESSURE_PSI = 4000.0
HIGH_PRESSURE_RISK_MULTIPLIER = 1.2


class PressureWashingCalculator(ServiceCalculator[PressureWashingInput]):
    service_type = ServiceType.PRESSURE_WASHING
    service_name = "Pressure Washing"
    description = "High-pressure cleaning for building exteriors"
    input_model = PressureWashingInput

    def unit_rate(
        self, job: PressureWashingInput, rate: ServiceRate, sheet: Worksheet
    ) -> float:
        multiplier = _SURFACE_RATE_MULTIPLIERS[job.surface_type]
        adjusted = rate.unit_rate * multiplier
        sheet.add(
            "Surface Rate",
            f"{job.surface_type} × {multiplier:g}",
            format_rate(adjusted, "sq ft"),
        )
        return adjusted

    def adjust_price(
        self,
        job: PressureWashingInput,
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
        return price

    def material_rate(self, job: PressureWashingInput) -> float:
        per_sqft = super().material_rate(job)
        if job.requires_sealing:
            per_sqft += SEALER_MATERIAL_RATE_PER_SQFT
        return per_sqft

    def materials(self, job: PressureWashingInput, area: float) -> list[MaterialItem]:
        items = supplies_for(self.service_type, area)
        if job.requires_sealing:
            items.append(SURFACE_SEALER.for_area(area))
        return items

    def risk_factors(
        self, job: PressureWashingInput, access: AccessMethod | None
    ) -> list[RiskFactor]:
        risks = super().risk_factors(job, access)
        if job.pressure_psi is not None and job.pressure_psi > HIGH_PRESSURE_PSI:
            risks.append(
                RiskFactor(
                    type=RiskType.COMPLEXITY,
                    level=RiskLevel.MEDIUM,
                    multiplier=HIGH_PRESSURE_RISK_MULTIPLIER,
                    description="High pressure may damage building surfaces",
                )
            )
        return risks

    def collect_warnings(
        self,
        job: PressureWashingInput,
        units: float,
        project_days: int,
        sheet: Worksheet,
    ) -> None:
        if job.pressure_psi is not None:
            if job.pressure_psi > DAMAGING_PRESSURE_PSI:
                sheet.warn("High pressure may damage some surfaces")
            elif job.pressure_psi > HIGH_PRESSURE_PSI:
                sheet.warn("High pressure may damage building surfaces - test a small area first")
        if job.surface_type == PressureWashSurface.WOOD:
            sheet.warn("Wood surfaces may need soft washing instead of high pressure")


class PressureWashSealCalculator(ServiceCalculator[PressureWashSealInput]):
    """Pressure washing followed by sealer, at a combined per-sq-ft rate."""

    service_type = ServiceType.PRESSURE_WASH_SEAL
    service_name = "Pressure Wash & Seal"
    description = "Pressure washing followed by protective sealing"
    input_model = PressureWashSealInput

    def collect_warnings(
        self,
        job: PressureWashSealInput,
        units: float,
        project_days: int,
        sheet: Worksheet,
    ) -> None:
        sheet.warn("Sealer needs 24 hours of dry weather to cure")
