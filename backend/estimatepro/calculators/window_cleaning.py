"""Window cleaning: an hourly service sized by window count."""

from __future__ import annotations

from estimatepro.calculators.base import ServiceCalculator, Worksheet
from estimatepro.data.equipment import access_method_for_height
from estimatepro.models.enums import AccessMethod, ServiceType
from estimatepro.models.inputs import WindowCleaningInput

CERTIFIED_TECHNICIAN_STORIES = 10


class WindowCleaningCalculator(ServiceCalculator[WindowCleaningInput]):
    """Windows (ceil of glass area / 24 sq ft) drive crew hours; the customer
    is billed total hours at the market's hourly rate.
    """

    service_type = ServiceType.WINDOW_CLEANING
    service_name = "Window Cleaning"
    description = "Professional interior and exterior window cleaning"
    input_model = WindowCleaningInput
    priced_by_hour = True

    def access_method(self, job: WindowCleaningInput) -> AccessMethod | None:
        if job.building_height_stories <= 1:
            return None
        return access_method_for_height(
            job.building_height_stories,
            has_roof_anchors=job.has_roof_anchors,
        )

    def collect_warnings(
        self,
        job: WindowCleaningInput,
        units: float,
        project_days: int,
        sheet: Worksheet,
    ) -> None:
        if job.building_height_stories > CERTIFIED_TECHNICIAN_STORIES:
            sheet.warn("High-rise window cleaning requires certified technicians")
        if job.building_height_stories > 15 and not job.has_roof_anchors:
            sheet.warn("Rope descent required above 15 stories - confirm roof anchor certification")
