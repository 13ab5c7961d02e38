"""Immutable rate table keyed by (service type, location)."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from pydantic import ValidationError as PydanticValidationError

from estimatepro.data.rates import ServiceRate
from estimatepro.exceptions import RateTableError, ValidationError
from estimatepro.models.enums import ServiceType

logger = logging.getLogger(__name__)

RateKey = tuple[ServiceType, str]


class RateTable(Mapping[RateKey, ServiceRate]):
    """Read-only lookup of rate entries.

    Built once and shared by every calculator. Nothing mutates it after
    construction, so concurrent calculations need no locking.

    Example::

        from estimatepro.data.seed import SEED_SERVICE_RATES

        table = RateTable.from_entries(SEED_SERVICE_RATES)
        rate = table.get_rate(ServiceType.GLASS_RESTORATION, "raleigh")
    """

    def __init__(self, entries: Mapping[RateKey, ServiceRate]) -> None:
        self._entries: Mapping[RateKey, ServiceRate] = MappingProxyType(dict(entries))

    @classmethod
    def from_entries(cls, entries: Iterable[ServiceRate]) -> RateTable:
        """Build a table from rate entries, rejecting duplicate keys."""
        table: dict[RateKey, ServiceRate] = {}
        for entry in entries:
            key = (entry.service_type, entry.location)
            if key in table:
                msg = f"Duplicate rate entry for {entry.service_type}/{entry.location}"
                raise RateTableError(msg)
            table[key] = entry
        return cls(table)

    @classmethod
    def from_json(cls, path: str | Path) -> RateTable:
        """Load a table from a JSON file holding a list of rate entries."""
        path = Path(path)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            msg = f"Could not read rate table from {path}: {exc}"
            raise RateTableError(msg) from exc

        if not isinstance(raw, list):
            msg = f"Rate table file {path} must contain a JSON list of entries"
            raise RateTableError(msg)

        try:
            entries = [ServiceRate.model_validate(item) for item in raw]
        except PydanticValidationError as exc:
            msg = f"Invalid rate entry in {path}: {exc}"
            raise RateTableError(msg) from exc

        table = cls.from_entries(entries)
        logger.info("Loaded %d rate entries from %s", len(table), path)
        return table

    # -- Mapping protocol --

    def __getitem__(self, key: RateKey) -> ServiceRate:
        return self._entries[key]

    def __iter__(self) -> Iterator[RateKey]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    # -- Lookups --

    def get_rate(self, service_type: ServiceType, location: str) -> ServiceRate:
        """Look up the rate for a service in a market.

        Location matching is case-insensitive. Raises ``ValidationError`` on
        the ``location`` field when the market has no rate for the service.
        """
        key = (service_type, location.strip().lower())
        entry = self._entries.get(key)
        if entry is None:
            known = ", ".join(self.locations(service_type)) or "none"
            msg = (
                f"No {service_type.name.lower().replace('_', ' ')} rate for "
                f"location '{location}' (known: {known})"
            )
            raise ValidationError("location", msg)
        return entry

    def locations(self, service_type: ServiceType | None = None) -> list[str]:
        """Sorted locations, optionally limited to one service."""
        return sorted({
            loc for (svc, loc) in self._entries
            if service_type is None or svc == service_type
        })

    def services(self) -> list[ServiceType]:
        """Service types that have at least one rate entry."""
        present = {svc for (svc, _) in self._entries}
        return [svc for svc in ServiceType if svc in present]
