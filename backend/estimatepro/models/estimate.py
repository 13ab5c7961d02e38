"""Multi-service estimate models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from estimatepro.models.result import CalculationResult  # noqa: TCH001 (pydantic resolves at runtime)

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ServiceRequest(BaseModel):
    """One service to price within an estimate.

    ``service_type`` is a service code such as ``"GR"``; it is resolved by
    the engine so unknown codes surface as ``UnknownServiceError``.
    """

    model_config = _CAMEL

    service_type: str
    inputs: dict[str, Any] = Field(default_factory=dict)


class EstimateMetadata(BaseModel):
    """Metadata about the estimation run."""

    model_config = _CAMEL

    engine_version: str
    rate_data_version: str
    pricing_method: str = "unit_rate"


class Estimate(BaseModel):
    """A priced estimate made of one or more service line items.

    ``subtotal`` is the sum of the line items' ``total_price``; it is what
    the customer is quoted.
    """

    model_config = _CAMEL

    project_name: str
    line_items: list[CalculationResult] = Field(min_length=1)
    subtotal: float = Field(ge=0)
    total_hours: float = Field(ge=0)
    total_crew_cost: float = Field(ge=0)
    total_equipment_cost: float = Field(ge=0)
    total_material_cost: float = Field(default=0.0, ge=0)
    project_days: int = Field(ge=1)
    warnings: dict[str, list[str]] = Field(default_factory=dict)
    metadata: EstimateMetadata

    @model_validator(mode="after")
    def subtotal_matches_line_items(self) -> Estimate:
        expected = round(sum(item.total_price for item in self.line_items), 2)
        if abs(expected - self.subtotal) > 0.005:
            msg = f"subtotal {self.subtotal} does not match line items total {expected}"
            raise ValueError(msg)
        return self

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict for frontend consumption.

        Returns a dict with formatted strings for direct display in the
        estimate review step.
        """
        from estimatepro.formatting import format_currency, format_days, format_hours

        largest = max(self.line_items, key=lambda item: item.total_price)

        return {
            "project_name": self.project_name,
            "num_services": len(self.line_items),
            "services": [item.service_name for item in self.line_items],
            "subtotal_formatted": format_currency(self.subtotal),
            "total_hours_formatted": format_hours(self.total_hours),
            "crew_cost_formatted": format_currency(self.total_crew_cost),
            "equipment_cost_formatted": format_currency(self.total_equipment_cost),
            "material_cost_formatted": format_currency(self.total_material_cost),
            "duration_formatted": format_days(self.project_days),
            "largest_service": {
                "service_name": largest.service_name,
                "total_formatted": format_currency(largest.total_price),
                "percent_of_total": (
                    round(largest.total_price / self.subtotal * 100, 1) if self.subtotal else 0.0
                ),
            },
            "num_warnings": sum(len(w) for w in self.warnings.values()),
        }

    def to_export_dict(self) -> dict[str, Any]:
        """Produce a detailed dict for PDF/spreadsheet export.

        Line items carry their full breakdown so exported quotes stay
        auditable.
        """
        return {
            "project_name": self.project_name,
            "subtotal": self.subtotal,
            "total_hours": self.total_hours,
            "total_crew_cost": self.total_crew_cost,
            "total_equipment_cost": self.total_equipment_cost,
            "total_material_cost": self.total_material_cost,
            "project_days": self.project_days,
            "line_items": [
                {
                    "service_type": item.service_type.value,
                    "service_name": item.service_name,
                    "location": item.location,
                    "units": item.units,
                    "unit_label": item.unit_label,
                    "unit_rate": item.unit_rate,
                    "base_price": item.base_price,
                    "equipment_cost": item.equipment_cost,
                    "total_price": item.total_price,
                    "total_hours": item.total_hours,
                    "material_cost": item.material_cost,
                    "materials": [m.model_dump() for m in item.materials],
                    "risk_factors": [r.model_dump(mode="json") for r in item.risk_factors],
                    "breakdown": [line.model_dump() for line in item.breakdown],
                }
                for item in self.line_items
            ],
            "warnings": {code: list(msgs) for code, msgs in self.warnings.items()},
            "metadata": self.metadata.model_dump(),
        }
