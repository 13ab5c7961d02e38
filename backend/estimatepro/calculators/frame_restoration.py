"""Frame restoration: window frame cleaning and refinishing, priced per frame."""

from __future__ import annotations

from typing import TYPE_CHECKING

from estimatepro.calculators.base import ServiceCalculator, Worksheet
from estimatepro.data.equipment import RIG_HOURS_PER_DROP
from estimatepro.data.seed import WINDOW_SIZE_SQFT
from estimatepro.formatting import format_hours
from estimatepro.models.enums import AccessMethod, Condition, ServiceType
from estimatepro.models.inputs import FrameRestorationInput

if TYPE_CHECKING:
    from estimatepro.data.rates import ServiceRate
    from estimatepro.models.result import EquipmentCost

_CONDITION_HOURS_MULTIPLIERS: dict[Condition, float] = {
    Condition.GOOD: 1.0,
    Condition.FAIR: 1.2,
    Condition.POOR: 1.5,
}

# Setup hours per shift of labor (staging, masking, cleanup)
SETUP_HOURS_PER_SHIFT = 2.0

# Ladder work when the frames are not done alongside glass restoration
STANDALONE_RIG_HOURS = 0.5


class FrameRestorationCalculator(ServiceCalculator[FrameRestorationInput]):
    """Frames are billed per unit; condition only changes crew hours.

    When paired with glass restoration the crew works from the glass
    scaffold, so rig time follows the drops but the scaffold rental is
    carried by the glass line item.
    """

    service_type = ServiceType.FRAME_RESTORATION
    service_name = "Frame Restoration"
    description = "Clean and restore window frames"
    input_model = FrameRestorationInput

    def labor_hours(
        self,
        job: FrameRestorationInput,
        units: float,
        rate: ServiceRate,
        sheet: Worksheet,
    ) -> float:
        multiplier = _CONDITION_HOURS_MULTIPLIERS[job.frame_condition]
        hours = units * rate.hours_per_unit * multiplier
        sheet.add(
            "Labor Hours",
            f"{units:g} frames × {rate.hours_per_unit:g} hrs × {multiplier:g} ({job.frame_condition})",
            format_hours(hours),
        )
        return hours

    def setup_hours(
        self, job: FrameRestorationInput, labor_hours: float, sheet: Worksheet
    ) -> float:
        hours = labor_hours / job.shift_length * SETUP_HOURS_PER_SHIFT
        sheet.add(
            "Setup Time",
            f"{SETUP_HOURS_PER_SHIFT:g} hrs per {job.shift_length:g}-hour shift",
            format_hours(hours),
        )
        return hours

    def material_area(
        self, job: FrameRestorationInput, units: float, rate: ServiceRate
    ) -> float:
        # one frame surrounds one window of glass
        return units * WINDOW_SIZE_SQFT

    def access_method(self, job: FrameRestorationInput) -> AccessMethod | None:
        if job.requires_glass_restoration:
            return AccessMethod.SCAFFOLD
        return None

    def rig_hours(
        self,
        job: FrameRestorationInput,
        access: AccessMethod | None,
        sheet: Worksheet,
    ) -> float:
        if access is None:
            sheet.add("Rig Time", "Standalone ladder work", format_hours(STANDALONE_RIG_HOURS))
            return STANDALONE_RIG_HOURS
        hours = job.number_of_drops * RIG_HOURS_PER_DROP[access]
        sheet.add(
            "Rig Time",
            f"{job.number_of_drops} drops on shared {access}",
            format_hours(hours),
        )
        return hours

    def equipment_cost(
        self,
        job: FrameRestorationInput,
        access: AccessMethod | None,
        days: int,
        sheet: Worksheet,
    ) -> EquipmentCost | None:
        return None

    def collect_warnings(
        self,
        job: FrameRestorationInput,
        units: float,
        project_days: int,
        sheet: Worksheet,
    ) -> None:
        if job.frame_condition == Condition.POOR:
            sheet.warn("Poor frame condition may require replacement - inspect before quoting")
        if job.requires_glass_restoration:
            sheet.warn("Scaffold rental is carried by the glass restoration line item")
