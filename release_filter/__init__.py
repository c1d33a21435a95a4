"""release-filter: keep or drop music releases by year and genre tags."""

__version__ = "0.1.0"
