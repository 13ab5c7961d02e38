"""Consumable materials: per-sq-ft material rates and standard supply lists.

Material rates are supplier cost per square foot of worked surface before
markup. Supply lists name the consumables a crew loads for a job; most
items scale with the area, the rest are a fixed kit.
"""

from __future__ import annotations

import math
from typing import NamedTuple

from estimatepro.models.enums import ServiceType
from estimatepro.models.result import MaterialItem

MATERIAL_MARKUP = 1.3

MATERIAL_RATES_PER_SQFT: dict[ServiceType, float] = {
    ServiceType.WINDOW_CLEANING: 0.15,
    ServiceType.GLASS_RESTORATION: 2.50,
    ServiceType.PRESSURE_WASHING: 0.08,
    ServiceType.PRESSURE_WASH_SEAL: 0.35,
    ServiceType.FINAL_CLEAN: 0.10,
    ServiceType.FRAME_RESTORATION: 1.80,
    ServiceType.HIGH_DUSTING: 0.05,
    ServiceType.SOFT_WASHING: 0.12,
    ServiceType.PARKING_DECK: 0.12,
    ServiceType.GRANITE_RECONDITIONING: 0.45,
    ServiceType.BIOFILM_REMOVAL: 0.25,
}

# Added to the pressure washing material rate when sealer is applied.
SEALER_MATERIAL_RATE_PER_SQFT = 0.20

# Heavy glass damage uses this much more compound and film.
HEAVY_DAMAGE_MATERIAL_FACTOR = 1.8


class SupplyItem(NamedTuple):
    """A supply list entry. ``sqft_per_unit`` of None means a fixed quantity."""

    name: str
    unit: str
    unit_cost: float
    sqft_per_unit: float | None = None
    fixed_quantity: int = 1

    def for_area(self, area: float) -> MaterialItem:
        if self.sqft_per_unit is None:
            quantity = self.fixed_quantity
        else:
            quantity = math.ceil(area / self.sqft_per_unit)
        return MaterialItem(
            name=self.name,
            quantity=quantity,
            unit=self.unit,
            unit_cost=self.unit_cost,
            total_cost=round(quantity * self.unit_cost, 2),
        )


SURFACE_SEALER = SupplyItem("Surface sealer", "gallon", 45.0, sqft_per_unit=400)

_PRESSURE_WASH_KIT = (
    SupplyItem("Pressure washing detergent", "gallon", 20.0, sqft_per_unit=500),
    SupplyItem("Surface cleaner", "each", 150.0),
)

SUPPLY_LISTS: dict[ServiceType, tuple[SupplyItem, ...]] = {
    ServiceType.WINDOW_CLEANING: (
        SupplyItem("Window cleaning solution", "gallon", 15.0, sqft_per_unit=1000),
        SupplyItem("Squeegees", "each", 25.0, fixed_quantity=2),
        SupplyItem("Cleaning cloths", "each", 3.0, fixed_quantity=10),
    ),
    ServiceType.GLASS_RESTORATION: (
        SupplyItem("Glass polish compound", "bottle", 45.0, sqft_per_unit=100),
        SupplyItem("Polishing pads", "each", 8.0, fixed_quantity=5),
        SupplyItem("Protective film", "roll", 25.0, sqft_per_unit=50),
    ),
    ServiceType.PRESSURE_WASHING: _PRESSURE_WASH_KIT,
    ServiceType.PRESSURE_WASH_SEAL: (*_PRESSURE_WASH_KIT, SURFACE_SEALER),
}


def supplies_for(service_type: ServiceType, area: float) -> list[MaterialItem]:
    """Standard supply list for a service over ``area`` sq ft (may be empty)."""
    return [item.for_area(area) for item in SUPPLY_LISTS.get(service_type, ())]
