"""Estimate composition for the EstimatePro pricing engine.

The EstimateEngine turns a list of service requests into one Estimate:

1. **Resolve** — Map each request's service code to its calculator; unknown
   codes and duplicate services are rejected before anything is priced.
2. **Price** — Run each service calculator. Any failure fails the whole
   estimate; there are no partial estimates.
3. **Roll up** — Sum line totals, crew hours, crew cost and equipment, and
   add up schedule days with the services done one after another.
4. **Document** — Keep each service's warnings under its code and stamp the
   engine and rate data versions.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from estimatepro.data.seed import RATE_DATA_VERSION
from estimatepro.exceptions import ValidationError
from estimatepro.models.estimate import Estimate, EstimateMetadata, ServiceRequest
from estimatepro.registry import resolve_service_type

if TYPE_CHECKING:
    from estimatepro.models.enums import ServiceType
    from estimatepro.models.result import CalculationResult
    from estimatepro.registry import CalculatorRegistry

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"


class EstimateEngine:
    """Prices a multi-service estimate.

    Args:
        registry: The calculator registry to dispatch service codes to.
        rate_data_version: Version stamp of the rate table behind the
            registry, recorded in each estimate's metadata.

    Example::

        from estimatepro import create_default_engine

        engine = create_default_engine()
        estimate = engine.estimate(
            "Main St Office",
            [{"serviceType": "GR", "inputs": {"glassArea": 240, "location": "raleigh"}}],
        )
    """

    def __init__(
        self,
        registry: CalculatorRegistry,
        rate_data_version: str = RATE_DATA_VERSION,
    ) -> None:
        self._registry = registry
        self._rate_data_version = rate_data_version

    @property
    def registry(self) -> CalculatorRegistry:
        return self._registry

    def estimate(
        self,
        project_name: str,
        requests: Iterable[ServiceRequest | Mapping[str, Any]],
    ) -> Estimate:
        """Price every requested service and combine them into an Estimate.

        Raises:
            ValidationError: If the project name is blank, no services are
                requested, a service appears twice, or any service's input
                is invalid.
            UnknownServiceError: If a request names an unknown service code.
        """
        name = project_name.strip()
        if not name:
            raise ValidationError("project_name", "project name must not be blank")

        parsed = [self._parse_request(req) for req in requests]
        if not parsed:
            raise ValidationError("services", "at least one service is required")

        # 1. Resolve codes, rejecting duplicates
        resolved: list[tuple[ServiceType, ServiceRequest]] = []
        seen: set[ServiceType] = set()
        for req in parsed:
            service_type = resolve_service_type(req.service_type)
            if service_type in seen:
                msg = f"service {service_type.value} is requested more than once"
                raise ValidationError("services", msg)
            seen.add(service_type)
            resolved.append((service_type, req))

        # 2. Price each service
        line_items: list[CalculationResult] = [
            self._registry.calculate(service_type, req.inputs)
            for service_type, req in resolved
        ]

        # 3. Roll up
        subtotal = round(sum(item.total_price for item in line_items), 2)
        total_hours = round(sum(item.total_hours for item in line_items), 4)
        crew_cost = round(sum(item.crew_cost for item in line_items), 2)
        equipment = round(sum(item.equipment_cost for item in line_items), 2)
        materials = round(sum(item.material_cost for item in line_items), 2)
        project_days = sum(item.project_days for item in line_items)

        # 4. Document
        warnings = {
            item.service_type.value: list(item.warnings)
            for item in line_items
            if item.warnings
        }

        logger.info(
            "Estimated '%s': %d services, subtotal=%.2f",
            name,
            len(line_items),
            subtotal,
        )

        return Estimate(
            project_name=name,
            line_items=line_items,
            subtotal=subtotal,
            total_hours=total_hours,
            total_crew_cost=crew_cost,
            total_equipment_cost=equipment,
            total_material_cost=materials,
            project_days=project_days,
            warnings=warnings,
            metadata=EstimateMetadata(
                engine_version=ENGINE_VERSION,
                rate_data_version=self._rate_data_version,
            ),
        )

    @staticmethod
    def _parse_request(req: ServiceRequest | Mapping[str, Any]) -> ServiceRequest:
        if isinstance(req, ServiceRequest):
            return req
        try:
            return ServiceRequest.model_validate(req)
        except PydanticValidationError as exc:
            first = exc.errors()[0]
            loc = ".".join(str(part) for part in first.get("loc", ())) or "services"
            raise ValidationError(loc, first.get("msg", "invalid service request")) from exc
