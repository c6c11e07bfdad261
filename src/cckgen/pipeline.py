"""Pipeline orchestrator: read, aggregate, then write fixture blocks."""

from __future__ import annotations

import logging
from pathlib import Path

from cckgen.aggregate import FixtureAggregator
from cckgen.config import CckgenConfig, get_config
from cckgen.csv_input.reader import open_records
from cckgen.models import AggregationResult
from cckgen.output.cck_text import write_blocks

logger = logging.getLogger(__name__)


def _report(stage: str, msg: str) -> None:
    logger.info("[%s] %s", stage, msg)


def aggregate_file(
    input_path: str | Path,
    skip_header: bool = True,
    config: CckgenConfig | None = None,
) -> AggregationResult:
    """Read every record of ``input_path`` and group them by fixture id.

    The input is fully consumed and closed before this returns.
    """
    if config is None:
        config = get_config()

    input_path = Path(input_path)
    aggregator = FixtureAggregator()

    _report("READ", f"Loading records from {input_path}")
    with open_records(
        input_path, skip_header=skip_header, encoding=config.encoding,
    ) as records:
        aggregator.ingest_all(records)

    fixtures = aggregator.fixtures(config.order)
    _report(
        "AGGREGATE",
        f"{aggregator.records_seen} records, {len(fixtures)} fixture types",
    )
    return AggregationResult(
        source=str(input_path),
        records_read=aggregator.records_seen,
        fixtures=fixtures,
    )


def run_and_save(
    input_path: str | Path,
    output_path: str | Path,
    skip_header: bool = True,
    config: CckgenConfig | None = None,
) -> AggregationResult:
    """Aggregate ``input_path`` and append the fixture blocks to ``output_path``."""
    if config is None:
        config = get_config()

    result = aggregate_file(input_path, skip_header=skip_header, config=config)

    _report("WRITE", f"Writing {len(result.fixtures)} blocks to {output_path}")
    write_blocks(
        result.fixtures, output_path,
        buffered=config.buffered_output, encoding=config.encoding,
    )
    return result
