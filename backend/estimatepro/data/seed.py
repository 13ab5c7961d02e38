"""Seed rate data for the EstimatePro pricing engine.

Rates are 2025 contract rates for the three North Carolina markets the
business serves: Raleigh, Charlotte and Greensboro. Production rates
(``hours_per_unit``) are crew-averaged man-hours per billing unit.
"""

from __future__ import annotations

from estimatepro.data.rates import ServiceRate
from estimatepro.models.enums import ServiceType, UnitRounding

RATE_DATA_VERSION = "2025.1"

# Square feet of glass in one average window.
WINDOW_SIZE_SQFT = 24.0

# Square feet taken by one standard parking space, drive aisle included.
PARKING_SPACE_SQFT = 180.0


def _markets(
    service_type: ServiceType,
    *,
    unit_label: str,
    rates: dict[str, float | tuple[float, float]],
    hours_per_unit: float,
    labor_rate: float,
    minimum_charge: float,
    unit_size: float = 1.0,
    rounding: UnitRounding = UnitRounding.NONE,
) -> list[ServiceRate]:
    """Expand one service's per-market rates into rate entries.

    A market rate is either a flat unit rate or a ``(low, high)`` range.
    """
    entries: list[ServiceRate] = []
    for location, rate in rates.items():
        low, high = rate if isinstance(rate, tuple) else (rate, None)
        entries.append(
            ServiceRate(
                service_type=service_type,
                location=location,
                unit_label=unit_label,
                unit_size=unit_size,
                rounding=rounding,
                unit_rate=low,
                unit_rate_high=high,
                hours_per_unit=hours_per_unit,
                labor_rate=labor_rate,
                minimum_charge=minimum_charge,
            )
        )
    return entries


SEED_SERVICE_RATES: list[ServiceRate] = [
    # --- Glass ---
    # $70 per window in Raleigh; one window = 24 sq ft, partial windows bill whole.
    *_markets(
        ServiceType.GLASS_RESTORATION,
        unit_label="window",
        unit_size=WINDOW_SIZE_SQFT,
        rounding=UnitRounding.CEIL,
        rates={"raleigh": 70.0, "charlotte": 65.0, "greensboro": 60.0},
        hours_per_unit=0.5,
        labor_rate=35.0,
        minimum_charge=350.0,
    ),
    # Hourly service; windows only drive the hours.
    *_markets(
        ServiceType.WINDOW_CLEANING,
        unit_label="window",
        unit_size=WINDOW_SIZE_SQFT,
        rounding=UnitRounding.CEIL,
        rates={"raleigh": 75.0, "charlotte": 65.0, "greensboro": 70.0},
        hours_per_unit=0.15,
        labor_rate=30.0,
        minimum_charge=250.0,
    ),
    *_markets(
        ServiceType.FRAME_RESTORATION,
        unit_label="frame",
        rates={"raleigh": 25.0, "charlotte": 23.0, "greensboro": 22.0},
        hours_per_unit=0.25,
        labor_rate=35.0,
        minimum_charge=250.0,
    ),
    # --- Facade washing ---
    *_markets(
        ServiceType.PRESSURE_WASHING,
        unit_label="sq ft",
        rates={"raleigh": 0.35, "charlotte": 0.30, "greensboro": 0.28},
        hours_per_unit=1 / 800,
        labor_rate=30.0,
        minimum_charge=300.0,
    ),
    *_markets(
        ServiceType.PRESSURE_WASH_SEAL,
        unit_label="sq ft",
        rates={"raleigh": 1.35, "charlotte": 1.25, "greensboro": 1.30},
        hours_per_unit=1 / 400,
        labor_rate=32.0,
        minimum_charge=500.0,
    ),
    *_markets(
        ServiceType.SOFT_WASHING,
        unit_label="sq ft",
        rates={"raleigh": 0.45, "charlotte": 0.42, "greensboro": 0.40},
        hours_per_unit=1 / 600,
        labor_rate=30.0,
        minimum_charge=400.0,
    ),
    *_markets(
        ServiceType.BIOFILM_REMOVAL,
        unit_label="sq ft",
        rates={
            "raleigh": (0.75, 1.00),
            "charlotte": (0.70, 0.95),
            "greensboro": (0.68, 0.92),
        },
        hours_per_unit=0.03,
        labor_rate=32.0,
        minimum_charge=400.0,
    ),
    # --- Interior ---
    *_markets(
        ServiceType.FINAL_CLEAN,
        unit_label="sq ft",
        rates={"raleigh": 70.0, "charlotte": 65.0, "greensboro": 65.0},
        hours_per_unit=1 / 2000,
        labor_rate=28.0,
        minimum_charge=350.0,
    ),
    *_markets(
        ServiceType.HIGH_DUSTING,
        unit_label="sq ft",
        rates={
            "raleigh": (0.37, 0.75),
            "charlotte": (0.35, 0.70),
            "greensboro": (0.33, 0.68),
        },
        hours_per_unit=1 / 1200,
        labor_rate=28.0,
        minimum_charge=300.0,
    ),
    *_markets(
        ServiceType.GRANITE_RECONDITIONING,
        unit_label="sq ft",
        rates={"raleigh": 1.75, "charlotte": 1.65, "greensboro": 1.60},
        hours_per_unit=0.04,
        labor_rate=35.0,
        minimum_charge=400.0,
    ),
    # --- Site ---
    *_markets(
        ServiceType.PARKING_DECK,
        unit_label="space",
        unit_size=PARKING_SPACE_SQFT,
        rounding=UnitRounding.FLOOR,
        rates={
            "raleigh": (16.0, 23.0),
            "charlotte": (15.0, 21.0),
            "greensboro": (14.0, 20.0),
        },
        hours_per_unit=0.07,
        labor_rate=28.0,
        minimum_charge=500.0,
    ),
]
