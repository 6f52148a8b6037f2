"""Small numeric helpers shared by metrics and ownership rollups."""

from .rounding import percent_share, round_half_up

__all__ = ["percent_share", "round_half_up"]
