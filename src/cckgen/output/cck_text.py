"""COMcheck fixture block generation."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from jinja2 import StrictUndefined, TemplateSyntaxError
from jinja2.sandbox import SandboxedEnvironment

from cckgen.exceptions import OutputError, RenderError
from cckgen.models import FixtureAggregate

logger = logging.getLogger(__name__)

BLOCK_SEPARATOR = "\r\n"

CCK_FIXTURE_TEMPLATE = """FIXTURE {{ index }} (
  list position = {{ list_position }}
  fixture use type = FIXTURE_USE_INTERIOR
  power adjustment factor = 0.000
  paf desc = None
  lamp wattage = 0.00
  lighting type = LED
  type of fixture = <|{{ fixture.id }}|>
  description = <|{{ fixture.description }}|>
  fixture type = <|{{ fixture.id }}|>
  parent number = 1
  lamp ballast description = <||>
  lamp type = Other
  ballast = UNSPECIFIED_BALLAST
  number of lamps = 1
  fixture wattage = {{ fixture.wattage }}
  quantity = {{ fixture.count }} )"""


class CckTemplateRenderer:
    """Fills the COMcheck fixture template for each aggregate."""

    def __init__(self, template_string: str = CCK_FIXTURE_TEMPLATE) -> None:
        env = SandboxedEnvironment(
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
        )
        try:
            self._template = env.from_string(template_string)
        except TemplateSyntaxError as e:
            raise RenderError(f"Error parsing template: {e}") from e

    def render_block(
        self,
        fixture: FixtureAggregate,
        index: int,
        list_position: int,
    ) -> str:
        try:
            return self._template.render(
                index=index, list_position=list_position, fixture=fixture,
            )
        except Exception as e:
            raise RenderError(
                f"Error executing template for fixture {fixture.id}: {e}"
            ) from e

    def render_all(self, fixtures: Iterable[FixtureAggregate]) -> Iterator[str]:
        """Yield the separator-prefixed block for each fixture in turn."""
        index = 1
        list_position = 1
        for fixture in fixtures:
            yield BLOCK_SEPARATOR + self.render_block(
                fixture, index, list_position,
            )
            index += 1
            list_position += 1


def write_blocks(
    fixtures: list[FixtureAggregate],
    output_path: str | Path,
    buffered: bool = False,
    renderer: CckTemplateRenderer | None = None,
    encoding: str = "utf-8",
) -> Path:
    """Append one rendered block per fixture to ``output_path``.

    The file is opened in append mode and never truncated, so repeated
    runs accumulate blocks.  Unbuffered, each block is written as soon as
    it is rendered; buffered, nothing is written unless every block
    renders.  Bytes the input could not decode are written back unchanged.
    """
    output_path = Path(output_path)
    if renderer is None:
        renderer = CckTemplateRenderer()

    blocks: Iterable[str] = renderer.render_all(fixtures)
    if buffered:
        blocks = ["".join(blocks)]

    try:
        out = open(
            output_path, "a", newline="",
            encoding=encoding, errors="surrogateescape",
        )
    except OSError as e:
        raise OutputError(f"Error opening output file: {output_path}: {e}") from e

    with out:
        for block in blocks:
            try:
                out.write(block)
            except OSError as e:
                raise OutputError(
                    f"Error writing output file: {output_path}: {e}"
                ) from e

    logger.info("Appended %d fixture blocks to %s", len(fixtures), output_path)
    return output_path
