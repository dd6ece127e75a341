"""Diagnostics package.

- compare, info, round_trip: always available, pure integer checks
- plot_bounds: optional (requires the diagnostics extras)
"""

__all__ = ["compare", "info", "round_trip", "plot_bounds"]
