"""Calculation result models returned by the service calculators."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from estimatepro.models.enums import AccessMethod, RiskLevel, RiskType, ServiceType


class _ResultModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class BreakdownLine(_ResultModel):
    """One documented step of a calculation (e.g. 'Billing Units')."""

    step: str
    description: str
    value: str


class EquipmentCost(_ResultModel):
    """Access equipment rented for the job."""

    access_method: AccessMethod
    days: int = Field(ge=0)
    daily_rate: float = Field(ge=0)
    cost: float = Field(ge=0)


class MaterialItem(_ResultModel):
    """One consumable on the job's supply list."""

    name: str
    quantity: float = Field(ge=0)
    unit: str
    unit_cost: float = Field(ge=0)
    total_cost: float = Field(ge=0)


class RiskFactor(_ResultModel):
    """A job condition the estimator should review before quoting.

    ``multiplier`` is the suggested contingency on the price; it is advisory
    and never applied to ``total_price``.
    """

    type: RiskType
    level: RiskLevel
    multiplier: float = Field(ge=1)
    description: str


class CalculationResult(_ResultModel):
    """Complete output of one service calculator invocation.

    ``base_price`` is the unrounded price of the billing units after the
    service's price adjustments. ``total_price`` adds equipment, rounds to
    the nearest $50 and applies the service minimum charge; that is the
    number a customer is quoted.

    ``material_cost`` is the marked-up cost of consumables. Unit rates
    already include materials, so it is reported for purchasing and is not
    added to the price.
    """

    service_type: ServiceType
    service_name: str
    location: str

    units: float = Field(ge=0)
    unit_label: str
    unit_rate: float = Field(ge=0)
    base_price: float = Field(ge=0)

    labor_hours: float = Field(ge=0)
    setup_hours: float = Field(ge=0)
    rig_hours: float = Field(ge=0)
    total_hours: float = Field(ge=0)
    crew_size: int = Field(ge=1)
    project_days: int = Field(ge=1)

    labor_rate: float = Field(ge=0)
    crew_cost: float = Field(ge=0)
    equipment: EquipmentCost | None = None
    total_price: float = Field(ge=0)

    material_cost: float = Field(default=0.0, ge=0)
    materials: list[MaterialItem] = Field(default_factory=list)
    risk_factors: list[RiskFactor] = Field(default_factory=list)

    breakdown: list[BreakdownLine] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @property
    def equipment_cost(self) -> float:
        return self.equipment.cost if self.equipment is not None else 0.0

    def to_record(self) -> dict[str, Any]:
        """Plain JSON-ready dict (camelCase keys) for the estimate record."""
        return self.model_dump(mode="json", by_alias=True)
