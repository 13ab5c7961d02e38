"""Rate data layer for the EstimatePro pricing engine."""

from estimatepro.data.rate_table import RateTable
from estimatepro.data.rates import ServiceRate

__all__ = [
    "RateTable",
    "ServiceRate",
]
