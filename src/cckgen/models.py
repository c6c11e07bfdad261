"""Core data models for cckgen."""

from __future__ import annotations

from pydantic import BaseModel, Field

FIXTURE_ID_FIELD = 1
DESCRIPTION_FIELD = 2
WATTAGE_FIELD = 3


class CsvRecord(BaseModel):
    """A single data record from the fixture CSV.

    Column 0 is carried along but never used.
    """

    line_number: int
    fields: list[str]

    @property
    def fixture_id(self) -> str:
        return self.fields[FIXTURE_ID_FIELD]

    @property
    def description(self) -> str:
        return self.fields[DESCRIPTION_FIELD]

    @property
    def wattage_text(self) -> str:
        return self.fields[WATTAGE_FIELD]


class FixtureAggregate(BaseModel):
    """One fixture type with its running quantity."""

    id: str
    description: str = ""
    wattage: int = Field(ge=0)
    count: int = Field(default=1, ge=1)

    def add(self, qty: int = 1) -> None:
        self.count += qty


class AggregationResult(BaseModel):
    """Complete result of aggregating one input file."""

    source: str
    records_read: int = 0
    fixtures: list[FixtureAggregate] = Field(default_factory=list)
