"""Group CSV records by fixture id and count quantities."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cckgen.csv_input.wattage import extract_wattage
from cckgen.models import CsvRecord, FixtureAggregate

logger = logging.getLogger(__name__)


class FixtureAggregator:
    """Accumulates one :class:`FixtureAggregate` per distinct fixture id.

    The first record seen for an id fixes its description and wattage;
    every later record only bumps the quantity.
    """

    def __init__(self) -> None:
        self._fixtures: dict[str, FixtureAggregate] = {}
        self.records_seen = 0

    def __len__(self) -> int:
        return len(self._fixtures)

    def __contains__(self, fixture_id: object) -> bool:
        return fixture_id in self._fixtures

    def get(self, fixture_id: str) -> FixtureAggregate | None:
        return self._fixtures.get(fixture_id)

    def ingest(
        self,
        fixture_id: str,
        description: str,
        wattage_text: str,
        line_number: int,
        record: list[str] | None = None,
    ) -> FixtureAggregate:
        """Count one record for ``fixture_id``.

        Raises:
            WattageExtractionError: First record for the id has an
                unusable wattage field.  Nothing is inserted.
        """
        existing = self._fixtures.get(fixture_id)
        if existing is not None:
            existing.add(1)
            self.records_seen += 1
            return existing

        wattage = extract_wattage(
            wattage_text, line_number=line_number, record=record,
        )
        fixture = FixtureAggregate(
            id=fixture_id, description=description, wattage=wattage,
        )
        self._fixtures[fixture_id] = fixture
        self.records_seen += 1
        logger.debug(
            "New fixture %s (%s, %dW) at line %d",
            fixture_id, description, wattage, line_number,
        )
        return fixture

    def ingest_record(self, record: CsvRecord) -> FixtureAggregate:
        return self.ingest(
            record.fixture_id,
            record.description,
            record.wattage_text,
            record.line_number,
            record=record.fields,
        )

    def ingest_all(self, records: Iterable[CsvRecord]) -> None:
        for record in records:
            self.ingest_record(record)

    def fixtures(self, order: str = "first_seen") -> list[FixtureAggregate]:
        """Return aggregates in render order.

        ``"first_seen"`` keeps input order, ``"id"`` sorts by fixture id.
        """
        if order == "first_seen":
            return list(self._fixtures.values())
        if order == "id":
            return [self._fixtures[k] for k in sorted(self._fixtures)]
        raise ValueError(f"Unknown fixture order: {order!r}")
