"""Factory functions for creating pre-configured EstimatePro components."""

from __future__ import annotations

import logging
import os

from estimatepro.data.rate_table import RateTable
from estimatepro.data.seed import RATE_DATA_VERSION, SEED_SERVICE_RATES
from estimatepro.engine import EstimateEngine
from estimatepro.registry import CalculatorRegistry

logger = logging.getLogger(__name__)

RATES_FILE_ENV = "ESTIMATEPRO_RATES_FILE"


def create_default_rate_table() -> RateTable:
    """Build the process-wide rate table.

    Uses the JSON file named by ``ESTIMATEPRO_RATES_FILE`` when set, and the
    built-in seed rates otherwise.

    Raises:
        RateTableError: If the configured file cannot be loaded.
    """
    path = os.environ.get(RATES_FILE_ENV, "").strip()
    if path:
        return RateTable.from_json(path)
    table = RateTable.from_entries(SEED_SERVICE_RATES)
    logger.info(
        "Using seed rate table %s (%d entries)", RATE_DATA_VERSION, len(table)
    )
    return table


def create_default_registry(rate_table: RateTable | None = None) -> CalculatorRegistry:
    """Create a CalculatorRegistry over ``rate_table`` (default: see above)."""
    if rate_table is None:
        rate_table = create_default_rate_table()
    return CalculatorRegistry(rate_table)


def create_default_engine() -> EstimateEngine:
    """Create an EstimateEngine wired up with the default rate table.

    This is the recommended way to create an EstimateEngine for typical
    usage. Callers don't need to understand the rate table and registry
    wiring.

    Example::

        from estimatepro import create_default_engine

        engine = create_default_engine()
        estimate = engine.estimate("My Project", requests)
    """
    path = os.environ.get(RATES_FILE_ENV, "").strip()
    version = f"file:{os.path.basename(path)}" if path else RATE_DATA_VERSION
    return EstimateEngine(create_default_registry(), rate_data_version=version)
