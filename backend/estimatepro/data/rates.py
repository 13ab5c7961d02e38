"""Schema for per-service, per-location rate entries."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from estimatepro.models.enums import RateTier, ServiceType, UnitRounding


class ServiceRate(BaseModel):
    """Pricing parameters for one service in one market.

    ``unit_size`` is how much raw quantity makes one billing unit (24 sq ft
    per window for glass restoration, 1 for services priced per sq ft).
    ``unit_rate`` is the price of one unit; services priced from a range also
    set ``unit_rate_high`` and pick a point with :meth:`rate_for`.
    """

    model_config = ConfigDict(frozen=True)

    service_type: ServiceType
    location: str
    unit_label: str
    unit_size: float = Field(default=1.0, gt=0)
    rounding: UnitRounding = UnitRounding.NONE
    unit_rate: float = Field(gt=0)
    unit_rate_high: float | None = Field(default=None, gt=0)
    hours_per_unit: float = Field(gt=0)
    labor_rate: float = Field(gt=0)
    minimum_charge: float = Field(default=0.0, ge=0)

    @model_validator(mode="after")
    def rate_range_is_ordered(self) -> ServiceRate:
        if self.unit_rate_high is not None and self.unit_rate_high < self.unit_rate:
            msg = (
                f"unit_rate_high must be >= unit_rate, "
                f"got {self.unit_rate_high} < {self.unit_rate}"
            )
            raise ValueError(msg)
        if self.location != self.location.strip().lower():
            msg = f"location keys must be lower case, got '{self.location}'"
            raise ValueError(msg)
        return self

    def rate_for(self, tier: RateTier = RateTier.LOW) -> float:
        """Resolve the unit rate for a tier of the rate range."""
        high = self.unit_rate_high if self.unit_rate_high is not None else self.unit_rate
        if tier == RateTier.HIGH:
            return high
        if tier == RateTier.MID:
            return (self.unit_rate + high) / 2
        return self.unit_rate
