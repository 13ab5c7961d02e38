"""Glass restoration: mineral deposit and etch removal, priced per window."""

from __future__ import annotations

from typing import TYPE_CHECKING

from estimatepro.calculators.base import ServiceCalculator, Worksheet
from estimatepro.data.materials import HEAVY_DAMAGE_MATERIAL_FACTOR
from estimatepro.formatting import format_hours
from estimatepro.models.enums import DamageLevel, RiskLevel, RiskType, ServiceType
from estimatepro.models.inputs import GlassRestorationInput
from estimatepro.models.result import RiskFactor

if TYPE_CHECKING:
    from estimatepro.data.rates import ServiceRate
    from estimatepro.models.enums import AccessMethod

# Damage level -> labor multiplier
_DAMAGE_HOURS_MULTIPLIERS: dict[DamageLevel, float] = {
    DamageLevel.LIGHT: 1.0,
    DamageLevel.MODERATE: 1.5,
    DamageLevel.HEAVY: 2.5,
}

HEAVY_DAMAGE_RISK_MULTIPLIER = 1.3


class GlassRestorationCalculator(ServiceCalculator[GlassRestorationInput]):
    """Price = windows × location rate, windows = ceil(glass area / 24 sq ft).

    Damage level only changes crew hours; the per-window price is fixed.
    """

    service_type = ServiceType.GLASS_RESTORATION
    service_name = "Glass Restoration"
    description = "Remove mineral deposits and restore glass clarity"
    input_model = GlassRestorationInput

    def labor_hours(
        self,
        job: GlassRestorationInput,
        units: float,
        rate: ServiceRate,
        sheet: Worksheet,
    ) -> float:
        multiplier = _DAMAGE_HOURS_MULTIPLIERS[job.damage_level]
        hours = units * rate.hours_per_unit * multiplier
        sheet.add(
            "Labor Hours",
            f"{units:g} windows × {rate.hours_per_unit:g} hrs × {multiplier:g} ({job.damage_level} damage)",
            format_hours(hours),
        )
        return hours

    def material_rate(self, job: GlassRestorationInput) -> float:
        per_sqft = super().material_rate(job)
        if job.damage_level == DamageLevel.HEAVY:
            per_sqft *= HEAVY_DAMAGE_MATERIAL_FACTOR
        return per_sqft

    def risk_factors(
        self, job: GlassRestorationInput, access: AccessMethod | None
    ) -> list[RiskFactor]:
        risks = super().risk_factors(job, access)
        if job.damage_level == DamageLevel.HEAVY:
            risks.append(
                RiskFactor(
                    type=RiskType.COMPLEXITY,
                    level=RiskLevel.HIGH,
                    multiplier=HEAVY_DAMAGE_RISK_MULTIPLIER,
                    description="Extensive damage may require replacement rather than restoration",
                )
            )
        return risks

    def collect_warnings(
        self,
        job: GlassRestorationInput,
        units: float,
        project_days: int,
        sheet: Worksheet,
    ) -> None:
        sheet.warn("Results may vary based on glass condition and type")
        if job.damage_level == DamageLevel.HEAVY:
            sheet.warn("Extensive damage may require replacement rather than restoration")
        if project_days > 5:
            sheet.warn("Multi-week restoration - schedule in phases around occupants")
