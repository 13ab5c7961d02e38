"""Enums for the EstimatePro domain models.

These enums cover the closed service catalog and the option lists each
service calculator accepts.
"""

from enum import StrEnum


class ServiceType(StrEnum):
    """Building-service offerings, keyed by their short service code."""

    WINDOW_CLEANING = "WC"
    GLASS_RESTORATION = "GR"
    PRESSURE_WASHING = "PW"
    PRESSURE_WASH_SEAL = "PWS"
    FINAL_CLEAN = "FC"
    FRAME_RESTORATION = "FR"
    HIGH_DUSTING = "HD"
    SOFT_WASHING = "SW"
    PARKING_DECK = "PD"
    GRANITE_RECONDITIONING = "GRC"
    BIOFILM_REMOVAL = "BR"


class UnitRounding(StrEnum):
    """How a raw quantity is converted into whole billing units."""

    CEIL = "ceil"
    FLOOR = "floor"
    HALF_UP = "half_up"
    NONE = "none"


class RateTier(StrEnum):
    """Point within a rate range (low = range minimum, high = maximum)."""

    LOW = "low"
    MID = "mid"
    HIGH = "high"


class AccessMethod(StrEnum):
    """How the crew reaches the work surface."""

    GROUND = "ground"
    SCISSOR_LIFT = "scissor_lift"
    BOOM_LIFT = "boom_lift"
    ROPE_DESCENT = "rope_descent"
    HIGH_REACH_BOOM = "high_reach_boom"
    SCAFFOLD = "scaffold"


class RiskType(StrEnum):
    HEIGHT = "height"
    ACCESS = "access"
    WEATHER = "weather"
    COMPLEXITY = "complexity"
    TIMELINE = "timeline"


class RiskLevel(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# --- Service options ---


class DamageLevel(StrEnum):
    """Glass damage level for restoration work."""

    LIGHT = "light"
    MODERATE = "moderate"
    HEAVY = "heavy"


class PressureWashSurface(StrEnum):
    CONCRETE = "concrete"
    BRICK = "brick"
    STONE = "stone"
    WOOD = "wood"
    METAL = "metal"


class SurfaceComplexity(StrEnum):
    """Surface complexity for high dusting."""

    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"


class SidingMaterial(StrEnum):
    """Facade materials suited to low-pressure soft washing."""

    VINYL = "vinyl"
    STUCCO = "stucco"
    WOOD = "wood"
    COMPOSITE = "composite"
    MIXED = "mixed"


class ContaminationLevel(StrEnum):
    LIGHT = "light"
    MODERATE = "moderate"
    HEAVY = "heavy"


class Condition(StrEnum):
    """Condition of frames or granite before work starts."""

    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class GraniteServiceLevel(StrEnum):
    CLEAN_ONLY = "clean_only"
    CLEAN_AND_SEAL = "clean_and_seal"
    RESTORE_AND_SEAL = "restore_and_seal"


class DeckLevel(StrEnum):
    GROUND = "ground"
    ELEVATED = "elevated"
    UNDERGROUND = "underground"


class DeckServiceScope(StrEnum):
    SWEEP_ONLY = "sweep_only"
    WASH_ONLY = "wash_only"
    SWEEP_AND_WASH = "sweep_and_wash"


class DrainageComplexity(StrEnum):
    SIMPLE = "simple"
    COMPLEX = "complex"


class BiofilmSeverity(StrEnum):
    LIGHT = "light"
    MODERATE = "moderate"
    SEVERE = "severe"


class BiofilmSurface(StrEnum):
    CONCRETE = "concrete"
    STONE = "stone"
    METAL = "metal"
    GLASS = "glass"
    MIXED = "mixed"
