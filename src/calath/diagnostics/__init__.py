"""Diagnostics package.

- pretty_year, round_trip: always available, text output only
- season_chart: optional (requires the diagnostics extras: numpy, matplotlib)
"""

__all__ = ["pretty_year", "round_trip", "season_chart"]
