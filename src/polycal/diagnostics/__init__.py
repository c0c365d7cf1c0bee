"""Diagnostics package.

- round_trip, new_years_table: text output
- leap_months: plot (needs the `diagnostics` extra: numpy + matplotlib)
"""

__all__ = ["round_trip", "new_years_table", "leap_months"]
