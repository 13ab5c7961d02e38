"""Granite reconditioning: cleaning, sealing and restoration of granite surfaces."""

from __future__ import annotations

from typing import TYPE_CHECKING

from estimatepro.calculators.base import ServiceCalculator, Worksheet
from estimatepro.exceptions import ValidationError
from estimatepro.formatting import format_currency, format_hours, format_rate
from estimatepro.models.enums import (
    AccessMethod,
    Condition,
    GraniteServiceLevel,
    ServiceType,
)
from estimatepro.models.inputs import GraniteReconditioningInput

if TYPE_CHECKING:
    from estimatepro.data.rates import ServiceRate

_LEVEL_RATE_MULTIPLIERS: dict[GraniteServiceLevel, float] = {
    GraniteServiceLevel.CLEAN_ONLY: 0.6,
    GraniteServiceLevel.CLEAN_AND_SEAL: 1.0,
    GraniteServiceLevel.RESTORE_AND_SEAL: 1.4,
}

_CONDITION_RATE_MULTIPLIERS: dict[Condition, float] = {
    Condition.GOOD: 0.9,
    Condition.FAIR: 1.0,
    Condition.POOR: 1.2,
}

_LEVEL_HOURS_MULTIPLIERS: dict[GraniteServiceLevel, float] = {
    GraniteServiceLevel.CLEAN_ONLY: 0.6,
    GraniteServiceLevel.CLEAN_AND_SEAL: 1.0,
    GraniteServiceLevel.RESTORE_AND_SEAL: 1.8,
}

_CONDITION_HOURS_MULTIPLIERS: dict[Condition, float] = {
    Condition.GOOD: 0.8,
    Condition.FAIR: 1.0,
    Condition.POOR: 1.3,
}

POLISHING_RATE_PER_SQFT = 0.25
POLISHING_HOURS_FACTOR = 1.2
EDGE_RATE_PER_FOOT = 3.50
EDGE_HOURS_PER_FOOT = 0.1
EXTENSIVE_EDGE_FEET = 100
LARGE_AREA_SQFT = 5000


class GraniteReconditioningCalculator(ServiceCalculator[GraniteReconditioningInput]):
    """Granite work is done from the ground; building height adds no access cost."""

    service_type = ServiceType.GRANITE_RECONDITIONING
    service_name = "Granite Reconditioning"
    description = "Clean, seal and restore granite surfaces"
    input_model = GraniteReconditioningInput

    def validate(self, job: GraniteReconditioningInput) -> None:
        if job.edge_work and job.edge_linear_feet <= 0:
            raise ValidationError(
                "edge_linear_feet",
                "edge linear feet is required when edge work is included",
            )

    def unit_rate(
        self, job: GraniteReconditioningInput, rate: ServiceRate, sheet: Worksheet
    ) -> float:
        level = _LEVEL_RATE_MULTIPLIERS[job.service_level]
        condition = _CONDITION_RATE_MULTIPLIERS[job.granite_condition]
        adjusted = rate.unit_rate * level * condition
        sheet.add(
            "Service Rate",
            f"{format_currency(rate.unit_rate)} × {level:g} ({job.service_level}) "
            f"× {condition:g} ({job.granite_condition})",
            format_rate(adjusted, "sq ft"),
        )
        return adjusted

    def adjust_price(
        self,
        job: GraniteReconditioningInput,
        units: float,
        price: float,
        sheet: Worksheet,
    ) -> float:
        if job.includes_polishing:
            polishing = units * POLISHING_RATE_PER_SQFT
            sheet.add("Polishing", f"{units:g} sq ft × $0.25", format_currency(polishing))
            price += polishing
        if job.edge_work:
            edges = job.edge_linear_feet * EDGE_RATE_PER_FOOT
            sheet.add(
                "Edge Work",
                f"{job.edge_linear_feet:g} ft × {format_currency(EDGE_RATE_PER_FOOT)}",
                format_currency(edges),
            )
            price += edges
        return price

    def labor_hours(
        self,
        job: GraniteReconditioningInput,
        units: float,
        rate: ServiceRate,
        sheet: Worksheet,
    ) -> float:
        factor = (
            _LEVEL_HOURS_MULTIPLIERS[job.service_level]
            * _CONDITION_HOURS_MULTIPLIERS[job.granite_condition]
        )
        if job.includes_polishing:
            factor *= POLISHING_HOURS_FACTOR
        hours = units * rate.hours_per_unit * factor
        sheet.add(
            "Labor Hours",
            f"{units:g} sq ft × {rate.hours_per_unit:g} hrs × {factor:.3g}",
            format_hours(hours),
        )
        if job.edge_work:
            edge_hours = job.edge_linear_feet * EDGE_HOURS_PER_FOOT
            sheet.add(
                "Edge Hours",
                f"{job.edge_linear_feet:g} ft × {EDGE_HOURS_PER_FOOT:g} hrs",
                format_hours(edge_hours),
            )
            hours += edge_hours
        return hours

    def access_method(self, job: GraniteReconditioningInput) -> AccessMethod | None:
        return None

    def collect_warnings(
        self,
        job: GraniteReconditioningInput,
        units: float,
        project_days: int,
        sheet: Worksheet,
    ) -> None:
        if job.granite_condition == Condition.POOR:
            sheet.warn("Poor condition granite may require multiple sealer coats")
        if job.includes_polishing:
            sheet.warn("Polishing generates dust - ensure proper ventilation")
        if job.edge_work and job.edge_linear_feet > EXTENSIVE_EDGE_FEET:
            sheet.warn("Extensive edge work requires specialized tools")
        if units > LARGE_AREA_SQFT:
            sheet.warn("Large area - consider working in sections")
