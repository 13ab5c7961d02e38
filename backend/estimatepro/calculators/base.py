"""Shared pricing pipeline for all service calculators.

Every calculator follows the same unit-rate methodology:

1. **Validate** — Parse the input model; pydantic field constraints plus the
   service's cross-field checks reject bad input before any pricing.
2. **Normalize** — Convert the raw quantity (sq ft, frames, spaces) into
   billing units using the rate entry's unit size and rounding rule.
3. **Price units** — Multiply units by the location's unit rate (or, for
   hourly services, hours by the hourly rate).
4. **Adjust** — Apply the service's surcharges and multipliers.
5. **Hours & equipment** — Labor, setup and rig hours; access equipment
   picked from the building height ladder.
6. **Materials & risks** — Estimate consumables (reported, never priced)
   and flag height, access and service risks.
7. **Document** — Record every step in the breakdown and collect advisory
   warnings so the quote stays auditable.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from pydantic import ValidationError as PydanticValidationError

from estimatepro.data.equipment import (
    EQUIPMENT_DAILY_RATES,
    RIG_HOURS_PER_DROP,
    access_method_for_height,
    equipment_days,
)
from estimatepro.data.materials import MATERIAL_MARKUP, MATERIAL_RATES_PER_SQFT, supplies_for
from estimatepro.exceptions import ValidationError
from estimatepro.formatting import format_currency, format_days, format_hours, format_rate
from estimatepro.models.enums import AccessMethod, RiskLevel, RiskType, UnitRounding
from estimatepro.models.inputs import CalculationInput
from estimatepro.models.result import (
    BreakdownLine,
    CalculationResult,
    EquipmentCost,
    MaterialItem,
    RiskFactor,
)

if TYPE_CHECKING:
    from estimatepro.data.rate_table import RateTable
    from estimatepro.data.rates import ServiceRate
    from estimatepro.models.enums import ServiceType

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=CalculationInput)

SETUP_TIME_FRACTION = 0.25
PRICE_ROUNDING_INCREMENT = 50.0
PERMIT_WARNING_STORIES = 20
VERY_TALL_BUILDING_STORIES = 50

# Height risk: medium above 5 stories, high above 15.
HEIGHT_RISK_STORIES = 5
HIGH_HEIGHT_RISK_STORIES = 15
HEIGHT_RISK_MULTIPLIER = 1.15
HIGH_HEIGHT_RISK_MULTIPLIER = 1.25
ACCESS_RISK_MULTIPLIER = 1.15

# Float noise allowance when converting quantities to whole units
# (e.g. 0.3 / 0.1 == 2.9999999999999996).
_UNIT_PRECISION = 9


def normalize_units(quantity: float, unit_size: float, rounding: UnitRounding) -> float:
    """Convert a raw quantity into billing units.

    ``CEIL`` bills partial units as whole ones (240 sq ft / 24 = 10 windows,
    241 sq ft = 11 windows). ``FLOOR`` counts only complete units,
    ``HALF_UP`` rounds to the nearest unit with halves going up, and
    ``NONE`` keeps the fractional quantity.
    """
    raw = round(quantity / unit_size, _UNIT_PRECISION)
    if rounding == UnitRounding.CEIL:
        return float(math.ceil(raw))
    if rounding == UnitRounding.FLOOR:
        return float(math.floor(raw))
    if rounding == UnitRounding.HALF_UP:
        return float(math.floor(raw + 0.5))
    return raw


def round_to_nearest(amount: float, increment: float = PRICE_ROUNDING_INCREMENT) -> float:
    """Round a price to the nearest increment, halves rounding up."""
    return math.floor(amount / increment + 0.5) * increment


def _money(amount: float) -> float:
    return round(amount, 2)


def _require_finite(job: CalculationInput, value: float) -> None:
    if not math.isfinite(value):
        raise ValidationError(
            job.quantity_field,
            f"quantity {job.quantity:g} is too large to price",
        )


@dataclass
class Worksheet:
    """Breakdown lines and warnings collected during one calculation."""

    breakdown: list[BreakdownLine] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add(self, step: str, description: str, value: str) -> None:
        self.breakdown.append(BreakdownLine(step=step, description=description, value=value))

    def warn(self, message: str) -> None:
        if message not in self.warnings:
            self.warnings.append(message)


class ServiceCalculator(Generic[InputT]):
    """Base class for a single service type's pricing formula.

    Args:
        rate_table: The immutable rate table to price against. Injected so
            tests (and alternative markets) can supply their own rates.

    Subclasses set the class attributes below and override the hooks whose
    default behavior does not fit the service.
    """

    service_type: ClassVar[ServiceType]
    service_name: ClassVar[str]
    description: ClassVar[str]
    input_model: ClassVar[type[CalculationInput]]

    # Hourly services bill total hours at the unit rate instead of units.
    priced_by_hour: ClassVar[bool] = False

    def __init__(self, rate_table: RateTable) -> None:
        self._rate_table = rate_table

    # ------------------------------------------------------------------
    # Public contract
    # ------------------------------------------------------------------

    def calculate(self, data: InputT | Mapping[str, Any]) -> CalculationResult:
        """Price one job.

        Args:
            data: The service's input model, or a mapping with snake_case or
                camelCase keys that is validated into it.

        Returns:
            A complete CalculationResult whose ``service_type`` is always
            this calculator's code.

        Raises:
            ValidationError: If any precondition fails (non-positive
                quantity, crew, shift length, unknown location...).
        """
        job = self.parse_input(data)
        self.validate(job)
        rate = self._rate_table.get_rate(self.service_type, job.location)
        sheet = Worksheet()

        units = self.billing_units(job, rate, sheet)

        labor_hours = self.labor_hours(job, units, rate, sheet)
        setup_hours = self.setup_hours(job, labor_hours, sheet)
        access = self.access_method(job)
        rig_hours = self.rig_hours(job, access, sheet)
        total_hours = labor_hours + setup_hours + rig_hours
        _require_finite(job, total_hours)
        sheet.add(
            "Total Hours",
            "Labor + Setup + Rig",
            format_hours(total_hours),
        )
        project_days = equipment_days(total_hours, job.crew_size, job.shift_length)

        if self.priced_by_hour:
            billed_units = total_hours
            unit_label = "hour"
            unit_rate = rate.unit_rate
            base_price = billed_units * unit_rate
            sheet.add(
                "Base Price",
                f"{format_hours(billed_units)} × {format_rate(unit_rate, unit_label)}",
                format_currency(base_price),
            )
        else:
            billed_units = units
            unit_label = rate.unit_label
            unit_rate = self.unit_rate(job, rate, sheet)
            base_price = billed_units * unit_rate
            sheet.add(
                "Base Price",
                f"{billed_units:g} × {format_rate(unit_rate, unit_label)}",
                format_currency(base_price),
            )
        base_price = self.adjust_price(job, units, base_price, sheet)

        equipment = self.equipment_cost(job, access, project_days, sheet)
        equipment_total = equipment.cost if equipment is not None else 0.0
        _require_finite(job, base_price + equipment_total)

        rounded = round_to_nearest(base_price + equipment_total)
        sheet.add(
            "Rounded Price",
            "Base + Equipment, rounded to nearest $50",
            format_currency(rounded),
        )
        total_price = max(rounded, rate.minimum_charge)
        if total_price > rounded:
            sheet.add(
                "Minimum Charge",
                f"{self.service_name} minimum",
                format_currency(total_price),
            )

        crew_cost = total_hours * rate.labor_rate

        material_area = self.material_area(job, units, rate)
        material_cost = self.material_cost(job, material_area, sheet)
        materials = self.materials(job, material_area)
        risk_factors = self.risk_factors(job, access)

        self._common_warnings(job, sheet)
        self.collect_warnings(job, units, project_days, sheet)

        logger.debug(
            "%s priced %.2f %s at %s: base=%.2f total=%.2f",
            self.service_type,
            billed_units,
            unit_label,
            job.location,
            base_price,
            total_price,
        )

        return CalculationResult(
            service_type=self.service_type,
            service_name=self.service_name,
            location=job.location,
            units=round(billed_units, 4),
            unit_label=unit_label,
            unit_rate=round(unit_rate, 4),
            base_price=base_price,
            labor_hours=round(labor_hours, 4),
            setup_hours=round(setup_hours, 4),
            rig_hours=round(rig_hours, 4),
            total_hours=round(total_hours, 4),
            crew_size=job.crew_size,
            project_days=project_days,
            labor_rate=rate.labor_rate,
            crew_cost=_money(crew_cost),
            equipment=equipment,
            total_price=_money(total_price),
            material_cost=_money(material_cost),
            materials=materials,
            risk_factors=risk_factors,
            breakdown=sheet.breakdown,
            warnings=sheet.warnings,
        )

    # ------------------------------------------------------------------
    # Input handling
    # ------------------------------------------------------------------

    def parse_input(self, data: InputT | Mapping[str, Any]) -> InputT:
        """Return ``data`` as this service's input model.

        Pydantic errors are translated into ``ValidationError`` naming the
        first offending field.
        """
        if isinstance(data, self.input_model):
            return data  # type: ignore[return-value]
        if isinstance(data, CalculationInput):
            msg = (
                f"{type(self).__name__} expects {self.input_model.__name__}, "
                f"got {type(data).__name__}"
            )
            raise TypeError(msg)
        try:
            return self.input_model.model_validate(data)  # type: ignore[return-value]
        except PydanticValidationError as exc:
            raise self._translate_error(exc) from exc

    def _translate_error(self, exc: PydanticValidationError) -> ValidationError:
        aliases = {
            info.alias: name
            for name, info in self.input_model.model_fields.items()
            if info.alias
        }
        first = exc.errors()[0]
        loc = first.get("loc") or ("input",)
        field_name = aliases.get(str(loc[0]), str(loc[0]))
        return ValidationError(field_name, first.get("msg", "invalid value"))

    def validate(self, job: InputT) -> None:
        """Cross-field checks beyond the input model's field constraints."""

    # ------------------------------------------------------------------
    # Pricing hooks
    # ------------------------------------------------------------------

    def billing_units(self, job: InputT, rate: ServiceRate, sheet: Worksheet) -> float:
        units = normalize_units(job.quantity, rate.unit_size, rate.rounding)
        if units <= 0:
            raise ValidationError(
                job.quantity_field,
                f"quantity {job.quantity:g} is less than one billable {rate.unit_label}",
            )
        if rate.unit_size != 1.0:
            sheet.add(
                "Billing Units",
                f"{job.quantity:g} ÷ {rate.unit_size:g} per {rate.unit_label} ({rate.rounding})",
                f"{units:g} {rate.unit_label} units",
            )
        return units

    def unit_rate(self, job: InputT, rate: ServiceRate, sheet: Worksheet) -> float:
        return rate.unit_rate

    def adjust_price(
        self, job: InputT, units: float, price: float, sheet: Worksheet
    ) -> float:
        return price

    # ------------------------------------------------------------------
    # Hours hooks
    # ------------------------------------------------------------------

    def labor_hours(
        self, job: InputT, units: float, rate: ServiceRate, sheet: Worksheet
    ) -> float:
        hours = units * rate.hours_per_unit
        sheet.add(
            "Labor Hours",
            f"{units:g} × {rate.hours_per_unit:.4g} hrs per {rate.unit_label}",
            format_hours(hours),
        )
        return hours

    def setup_hours(self, job: InputT, labor_hours: float, sheet: Worksheet) -> float:
        hours = labor_hours * SETUP_TIME_FRACTION
        sheet.add(
            "Setup Time",
            f"{format_hours(labor_hours)} × 25%",
            format_hours(hours),
        )
        return hours

    def access_method(self, job: InputT) -> AccessMethod | None:
        """Access equipment for the job, or None when work is at ground level."""
        if job.building_height_stories <= 1:
            return None
        return access_method_for_height(job.building_height_stories)

    def rig_hours(
        self, job: InputT, access: AccessMethod | None, sheet: Worksheet
    ) -> float:
        if access is None:
            return 0.0
        per_drop = RIG_HOURS_PER_DROP[access]
        hours = job.number_of_drops * per_drop
        sheet.add(
            "Rig Time",
            f"{job.number_of_drops} drops × {per_drop:g} hrs ({access})",
            format_hours(hours),
        )
        return hours

    def equipment_cost(
        self,
        job: InputT,
        access: AccessMethod | None,
        days: int,
        sheet: Worksheet,
    ) -> EquipmentCost | None:
        if access is None:
            return None
        daily_rate = EQUIPMENT_DAILY_RATES[access]
        cost = daily_rate * days
        sheet.add(
            "Equipment Cost",
            f"{access} for {format_days(days)} × {format_currency(daily_rate)}",
            format_currency(cost),
        )
        return EquipmentCost(
            access_method=access,
            days=days,
            daily_rate=daily_rate,
            cost=_money(cost),
        )

    # ------------------------------------------------------------------
    # Materials
    # ------------------------------------------------------------------

    def material_area(self, job: InputT, units: float, rate: ServiceRate) -> float:
        """Square feet of worked surface that consumables are estimated on."""
        return units * rate.unit_size

    def material_rate(self, job: InputT) -> float:
        """Supplier material cost per sq ft, before markup."""
        return MATERIAL_RATES_PER_SQFT[self.service_type]

    def material_cost(self, job: InputT, area: float, sheet: Worksheet) -> float:
        per_sqft = self.material_rate(job)
        cost = area * per_sqft * MATERIAL_MARKUP
        sheet.add(
            "Materials",
            f"{area:g} sq ft × {format_rate(per_sqft, 'sq ft')} × {MATERIAL_MARKUP:g} markup"
            " (included in rate)",
            format_currency(cost),
        )
        return cost

    def materials(self, job: InputT, area: float) -> list[MaterialItem]:
        return supplies_for(self.service_type, area)

    # ------------------------------------------------------------------
    # Risks and warnings
    # ------------------------------------------------------------------

    def risk_factors(self, job: InputT, access: AccessMethod | None) -> list[RiskFactor]:
        """Height and access risks; services append their own."""
        risks: list[RiskFactor] = []
        stories = job.building_height_stories
        if stories > HEIGHT_RISK_STORIES:
            high = stories > HIGH_HEIGHT_RISK_STORIES
            risks.append(
                RiskFactor(
                    type=RiskType.HEIGHT,
                    level=RiskLevel.HIGH if high else RiskLevel.MEDIUM,
                    multiplier=HIGH_HEIGHT_RISK_MULTIPLIER if high else HEIGHT_RISK_MULTIPLIER,
                    description="High-rise work requires specialized safety equipment",
                )
            )
        if access == AccessMethod.ROPE_DESCENT:
            risks.append(
                RiskFactor(
                    type=RiskType.ACCESS,
                    level=RiskLevel.MEDIUM,
                    multiplier=ACCESS_RISK_MULTIPLIER,
                    description="Difficult access may require additional time and equipment",
                )
            )
        return risks

    def collect_warnings(
        self, job: InputT, units: float, project_days: int, sheet: Worksheet
    ) -> None:
        """Service-specific advisory warnings."""

    @staticmethod
    def _common_warnings(job: CalculationInput, sheet: Worksheet) -> None:
        stories = job.building_height_stories
        if stories > VERY_TALL_BUILDING_STORIES:
            sheet.warn("Extremely tall building may require specialized equipment")
        elif stories > PERMIT_WARNING_STORIES:
            sheet.warn("High-rise building may require special permits")
        if stories > 1 and job.number_of_drops == 0:
            sheet.warn("Multi-story job with no drops - verify rig plan")
