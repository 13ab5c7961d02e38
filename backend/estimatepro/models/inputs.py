"""Calculation input models, one per service type.

Every model accepts both snake_case field names and the camelCase names the
web client sends (``glassArea``, ``buildingHeightStories``, ...).
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from estimatepro.models.enums import (
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
    SidingMaterial,
    SurfaceComplexity,
)


class CalculationInput(BaseModel):
    """Job parameters shared by every service calculator.

    Subclasses add the billable quantity (``quantity_field``) and their
    service-specific options.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        allow_inf_nan=False,
    )

    quantity_field: ClassVar[str] = ""

    building_height_stories: int = Field(default=1, ge=1)
    number_of_drops: int = Field(default=1, ge=0)
    crew_size: int = Field(default=2, ge=1)
    shift_length: float = Field(default=8.0, gt=0)
    location: str

    @field_validator("location")
    @classmethod
    def normalize_location(cls, v: str) -> str:
        key = v.strip().lower()
        if not key:
            msg = "location must not be blank"
            raise ValueError(msg)
        return key

    @property
    def quantity(self) -> float:
        """The raw billable quantity (sq ft, frames, spaces...)."""
        return float(getattr(self, self.quantity_field))


class GlassRestorationInput(CalculationInput):
    quantity_field: ClassVar[str] = "glass_area"

    glass_area: float = Field(gt=0)
    damage_level: DamageLevel = DamageLevel.LIGHT


class WindowCleaningInput(CalculationInput):
    quantity_field: ClassVar[str] = "glass_area"

    glass_area: float = Field(gt=0)
    has_roof_anchors: bool = False


class PressureWashingInput(CalculationInput):
    quantity_field: ClassVar[str] = "area"

    area: float = Field(gt=0)
    surface_type: PressureWashSurface = PressureWashSurface.CONCRETE
    requires_sealing: bool = False
    pressure_psi: float | None = Field(default=None, gt=0)


class PressureWashSealInput(CalculationInput):
    quantity_field: ClassVar[str] = "area"

    area: float = Field(gt=0)


class FinalCleanInput(CalculationInput):
    quantity_field: ClassVar[str] = "area"

    area: float = Field(gt=0)


class FrameRestorationInput(CalculationInput):
    quantity_field: ClassVar[str] = "number_of_frames"

    number_of_frames: int = Field(gt=0)
    frame_condition: Condition = Condition.GOOD
    requires_glass_restoration: bool = False


class HighDustingInput(CalculationInput):
    quantity_field: ClassVar[str] = "area"

    area: float = Field(gt=0)
    surface_complexity: SurfaceComplexity = SurfaceComplexity.MODERATE
    includes_fans: bool = False
    includes_fixtures: bool = False


class SoftWashingInput(CalculationInput):
    quantity_field: ClassVar[str] = "facade_area"

    facade_area: float = Field(gt=0)
    surface_material: SidingMaterial = SidingMaterial.VINYL
    contamination_level: ContaminationLevel = ContaminationLevel.LIGHT
    includes_roof: bool = False
    roof_area: float = Field(default=0.0, ge=0)


class ParkingDeckInput(CalculationInput):
    """Parking deck job; give either ``number_of_spaces`` or ``total_area``."""

    quantity_field: ClassVar[str] = "number_of_spaces"

    number_of_spaces: int | None = Field(default=None, gt=0)
    total_area: float | None = Field(default=None, gt=0)
    deck_level: DeckLevel = DeckLevel.GROUND
    service_scope: DeckServiceScope = DeckServiceScope.SWEEP_AND_WASH
    has_oil_stains: bool = False
    drainage_complexity: DrainageComplexity = DrainageComplexity.SIMPLE

    @property
    def quantity(self) -> float:
        if self.number_of_spaces is not None:
            return float(self.number_of_spaces)
        return float(self.total_area or 0.0)


class GraniteReconditioningInput(CalculationInput):
    quantity_field: ClassVar[str] = "area"

    area: float = Field(gt=0)
    granite_condition: Condition = Condition.FAIR
    service_level: GraniteServiceLevel = GraniteServiceLevel.CLEAN_AND_SEAL
    includes_polishing: bool = False
    edge_work: bool = False
    edge_linear_feet: float = Field(default=0.0, ge=0)


class BiofilmRemovalInput(CalculationInput):
    quantity_field: ClassVar[str] = "area"

    area: float = Field(gt=0)
    biofilm_severity: BiofilmSeverity = BiofilmSeverity.MODERATE
    surface_type: BiofilmSurface = BiofilmSurface.CONCRETE
    requires_sealing: bool = False
    has_water_features: bool = False
