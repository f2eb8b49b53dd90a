"""Game domain services: play statistics and grid hints.

This package contains pure(ish) domain logic that should be imported by
HTTP routes and socket handlers, keeping transport concerns separated
from the statistics aggregate and the hint ladder.
"""

from .hints import Corner, count_lit, find_lit_corners, generate_hint, is_square_grid
from .stats import GameStatistics, StatsTracker
