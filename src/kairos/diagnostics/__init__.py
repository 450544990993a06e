"""Diagnostics package.

- pretty_month, round_trip: always available (stdlib only)
- grid_coverage, drift_plot: need the diagnostics extras (numpy, matplotlib)
"""

__all__ = ["pretty_month", "round_trip", "grid_coverage", "drift_plot"]
