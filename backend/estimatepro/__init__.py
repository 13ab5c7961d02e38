"""EstimatePro pricing engine for commercial building services.

Usage::

    from estimatepro import create_default_registry

    registry = create_default_registry()
    result = registry.calculate("GR", {"glassArea": 240, "location": "raleigh"})
"""

from estimatepro.calculators import ServiceCalculator
from estimatepro.data import RateTable, ServiceRate
from estimatepro.engine import EstimateEngine
from estimatepro.exceptions import (
    EstimateProError,
    RateTableError,
    UnknownServiceError,
    ValidationError,
)
from estimatepro.factory import (
    create_default_engine,
    create_default_rate_table,
    create_default_registry,
)
from estimatepro.models.enums import ServiceType
from estimatepro.models.estimate import Estimate, ServiceRequest
from estimatepro.models.result import CalculationResult
from estimatepro.registry import (
    CALCULATOR_CLASSES,
    CalculatorRegistry,
    get_calculator,
    resolve_service_type,
)

__all__ = [
    "CALCULATOR_CLASSES",
    "CalculationResult",
    "CalculatorRegistry",
    "Estimate",
    "EstimateEngine",
    "EstimateProError",
    "RateTable",
    "RateTableError",
    "ServiceCalculator",
    "ServiceRate",
    "ServiceRequest",
    "ServiceType",
    "UnknownServiceError",
    "ValidationError",
    "create_default_engine",
    "create_default_rate_table",
    "create_default_registry",
    "get_calculator",
    "resolve_service_type",
]
