"""Domain models for the EstimatePro pricing engine."""

from estimatepro.models.enums import (
    AccessMethod,
    BiofilmSeverity,
    BiofilmSurface,
    Condition,
    ContaminationLevel,
    DamageLevel,
    DeckLevel,
    DeckServiceScope,
    DrainageComplexity,
    GraniteServiceLevel,
    PressureWashSurface,
    RateTier,
    RiskLevel,
    RiskType,
    ServiceType,
    SidingMaterial,
    SurfaceComplexity,
    UnitRounding,
)
from estimatepro.models.estimate import Estimate, EstimateMetadata, ServiceRequest
from estimatepro.models.inputs import (
    BiofilmRemovalInput,
    CalculationInput,
    FinalCleanInput,
    FrameRestorationInput,
    GlassRestorationInput,
    GraniteReconditioningInput,
    HighDustingInput,
    ParkingDeckInput,
    PressureWashingInput,
    PressureWashSealInput,
    SoftWashingInput,
    WindowCleaningInput,
)
from estimatepro.models.result import (
    BreakdownLine,
    CalculationResult,
    EquipmentCost,
    MaterialItem,
    RiskFactor,
)

__all__ = [
    "AccessMethod",
    "BiofilmRemovalInput",
    "BiofilmSeverity",
    "BiofilmSurface",
    "BreakdownLine",
    "CalculationInput",
    "CalculationResult",
    "Condition",
    "ContaminationLevel",
    "DamageLevel",
    "DeckLevel",
    "DeckServiceScope",
    "DrainageComplexity",
    "EquipmentCost",
    "Estimate",
    "EstimateMetadata",
    "FinalCleanInput",
    "FrameRestorationInput",
    "GlassRestorationInput",
    "GraniteReconditioningInput",
    "GraniteServiceLevel",
    "HighDustingInput",
    "MaterialItem",
    "ParkingDeckInput",
    "PressureWashSealInput",
    "PressureWashSurface",
    "PressureWashingInput",
    "RateTier",
    "RiskFactor",
    "RiskLevel",
    "RiskType",
    "ServiceRequest",
    "ServiceType",
    "SidingMaterial",
    "SoftWashingInput",
    "SurfaceComplexity",
    "UnitRounding",
    "WindowCleaningInput",
]
