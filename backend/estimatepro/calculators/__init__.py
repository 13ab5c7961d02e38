"""Service calculators, one per service type."""

from estimatepro.calculators.base import ServiceCalculator, Worksheet
from estimatepro.calculators.biofilm_removal import BiofilmRemovalCalculator
from estimatepro.calculators.final_clean import FinalCleanCalculator
from estimatepro.calculators.frame_restoration import FrameRestorationCalculator
from estimatepro.calculators.glass_restoration import GlassRestorationCalculator
from estimatepro.calculators.granite_reconditioning import GraniteReconditioningCalculator
from estimatepro.calculators.high_dusting import HighDustingCalculator
from estimatepro.calculators.parking_deck import ParkingDeckCalculator
from estimatepro.calculators.pressure_washing import (
    PressureWashingCalculator,
    PressureWashSealCalculator,
)
from estimatepro.calculators.soft_washing import SoftWashingCalculator
from estimatepro.calculators.window_cleaning import WindowCleaningCalculator

__all__ = [
    "BiofilmRemovalCalculator",
    "FinalCleanCalculator",
    "FrameRestorationCalculator",
    "GlassRestorationCalculator",
    "GraniteReconditioningCalculator",
    "HighDustingCalculator",
    "ParkingDeckCalculator",
    "PressureWashSealCalculator",
    "PressureWashingCalculator",
    "ServiceCalculator",
    "SoftWashingCalculator",
    "WindowCleaningCalculator",
    "Worksheet",
]
