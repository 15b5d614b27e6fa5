"""Diagnostics package.

Light-weight checks of the conversion core; numpy and matplotlib are needed
only here (pip install "vanatime[diagnostics]").
"""

__all__ = ["moon_cycle", "round_trip"]
