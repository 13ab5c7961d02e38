"""Dispatch from service codes to calculators.

The catalog is closed: every ``ServiceType`` has exactly one calculator
class, checked when this module is imported.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from estimatepro.calculators import (
    BiofilmRemovalCalculator,
    FinalCleanCalculator,
    FrameRestorationCalculator,
    GlassRestorationCalculator,
    GraniteReconditioningCalculator,
    HighDustingCalculator,
    ParkingDeckCalculator,
    PressureWashingCalculator,
    PressureWashSealCalculator,
    ServiceCalculator,
    SoftWashingCalculator,
    WindowCleaningCalculator,
)
from estimatepro.exceptions import UnknownServiceError
from estimatepro.models.enums import ServiceType

if TYPE_CHECKING:
    from estimatepro.data.rate_table import RateTable
    from estimatepro.models.result import CalculationResult

logger = logging.getLogger(__name__)

CALCULATOR_CLASSES: Mapping[ServiceType, type[ServiceCalculator[Any]]] = MappingProxyType({
    cls.service_type: cls
    for cls in (
        WindowCleaningCalculator,
        GlassRestorationCalculator,
        PressureWashingCalculator,
        PressureWashSealCalculator,
        FinalCleanCalculator,
        FrameRestorationCalculator,
        HighDustingCalculator,
        SoftWashingCalculator,
        ParkingDeckCalculator,
        GraniteReconditioningCalculator,
        BiofilmRemovalCalculator,
    )
})

_missing = [svc.value for svc in ServiceType if svc not in CALCULATOR_CLASSES]
if _missing:
    _msg = f"No calculator registered for service types: {', '.join(_missing)}"
    raise RuntimeError(_msg)


# Legacy codes still sent by older web clients.
SERVICE_CODE_ALIASES: Mapping[str, ServiceType] = MappingProxyType({
    "BF": ServiceType.BIOFILM_REMOVAL,
})


def resolve_service_type(code: ServiceType | str) -> ServiceType:
    """Resolve a service identifier to its ``ServiceType``.

    Accepts the short code ('GR', 'gr'), a legacy alias ('BF'), the member
    name ('glass_restoration') or the web client's kebab-case id
    ('glass-restoration').

    Raises:
        UnknownServiceError: If the code matches no service type.
    """
    if isinstance(code, ServiceType):
        return code
    key = str(code).strip().upper().replace("-", "_")
    try:
        return ServiceType(key)
    except ValueError:
        pass
    if key in SERVICE_CODE_ALIASES:
        return SERVICE_CODE_ALIASES[key]
    try:
        return ServiceType[key]
    except KeyError:
        raise UnknownServiceError(code) from None


def get_calculator(code: ServiceType | str, rate_table: RateTable) -> ServiceCalculator[Any]:
    """Build the calculator for one service code against ``rate_table``."""
    return CALCULATOR_CLASSES[resolve_service_type(code)](rate_table)


class CalculatorRegistry:
    """One calculator instance per service type, sharing a single rate table.

    Example::

        registry = CalculatorRegistry(RateTable.from_entries(SEED_SERVICE_RATES))
        result = registry.calculate("GR", {"glassArea": 240, "location": "raleigh"})
    """

    def __init__(self, rate_table: RateTable) -> None:
        self._rate_table = rate_table
        self._calculators: Mapping[ServiceType, ServiceCalculator[Any]] = MappingProxyType({
            svc: cls(rate_table) for svc, cls in CALCULATOR_CLASSES.items()
        })
        logger.debug(
            "Registered %d calculators over %d rate entries",
            len(self._calculators),
            len(rate_table),
        )

    @property
    def rate_table(self) -> RateTable:
        return self._rate_table

    def get(self, code: ServiceType | str) -> ServiceCalculator[Any]:
        return self._calculators[resolve_service_type(code)]

    def calculate(self, code: ServiceType | str, data: Any) -> CalculationResult:
        """Run the calculator for ``code`` on ``data`` (input model or mapping)."""
        return self.get(code).calculate(data)

    def service_types(self) -> list[ServiceType]:
        return list(ServiceType)
