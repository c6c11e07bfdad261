"""Pull a wattage value out of a free-text VA/watts column."""

from __future__ import annotations

import re

from cckgen.exceptions import WattageExtractionError

_LEADING_DIGITS = re.compile(r"^[0-9]+")

# Largest value the wattage column may carry (signed 64-bit).
MAX_WATTAGE = 2**63 - 1


def extract_wattage(
    text: str,
    line_number: int | None = None,
    record: list[str] | None = None,
) -> int:
    """Return the integer formed by the leading digits of ``text``.

    ``"150W"`` gives 150 and ``"0.00VA"`` gives 0.  Text that does not
    start with a digit raises :class:`WattageExtractionError`.
    """
    match = _LEADING_DIGITS.match(text)
    if match is None:
        where = f" line {line_number}" if line_number is not None else ""
        raise WattageExtractionError(
            f"Error matching digits in VA: {record if record is not None else text!r}{where}",
            text=text,
            line_number=line_number,
            record=record,
        )

    value = int(match.group(0))
    if value > MAX_WATTAGE:
        where = f"Line {line_number}: " if line_number is not None else ""
        raise WattageExtractionError(
            f"{where}Error converting VA to int: {match.group(0)} out of range",
            text=text,
            line_number=line_number,
            record=record,
        )
    return value
