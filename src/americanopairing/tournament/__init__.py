"""Tournament standings.

Statistics and leaderboards derived from a schedule and its recorded scores.
"""

# Americano Pairing
# Copyright (C) 2025  Americano Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from americanopairing.tournament.stats_calculator import (
    StatsCalculator,
    calculate_player_stats,
    calculate_tournament_progress,
    check_leaderboard_integrity,
    generate_leaderboard,
    rank_leaderboard,
)

__all__ = [
    "StatsCalculator",
    "calculate_player_stats",
    "calculate_tournament_progress",
    "check_leaderboard_integrity",
    "generate_leaderboard",
    "rank_leaderboard",
]
