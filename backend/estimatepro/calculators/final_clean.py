"""Final clean: hourly post-construction cleaning sized by floor area."""

from __future__ import annotations

from estimatepro.calculators.base import ServiceCalculator, Worksheet
from estimatepro.models.enums import AccessMethod, ServiceType
from estimatepro.models.inputs import FinalCleanInput

LARGE_FLOOR_AREA_SQFT = 50_000


class FinalCleanCalculator(ServiceCalculator[FinalCleanInput]):
    service_type = ServiceType.FINAL_CLEAN
    service_name = "Final Clean"
    description = "Comprehensive post-construction cleaning"
    input_model = FinalCleanInput
    priced_by_hour = True

    def access_method(self, job: FinalCleanInput) -> AccessMethod | None:
        # Interior work; stories only add floors, not lifts.
        return None

    def collect_warnings(
        self,
        job: FinalCleanInput,
        units: float,
        project_days: int,
        sheet: Worksheet,
    ) -> None:
        if job.area > LARGE_FLOOR_AREA_SQFT:
            sheet.warn("Large floor area - coordinate final clean with trade punch lists")
