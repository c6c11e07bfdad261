"""CSV input: record reading and wattage extraction."""

from cckgen.csv_input.reader import open_records, read_records
from cckgen.csv_input.wattage import extract_wattage

__all__ = ["extract_wattage", "open_records", "read_records"]
