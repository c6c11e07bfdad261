"""cckgen: COMcheck fixture blocks from lighting schedule CSV exports."""

__version__ = "0.1.0"
