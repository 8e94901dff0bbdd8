"""Americano Pairing: rotating-partner doubles scheduling and standings."""

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

from americanopairing.pairing import generate_schedule
from americanopairing.tournament import calculate_player_stats, rank_leaderboard
from americanopairing.utils.validation import (
    validate_match_score,
    validate_tournament_config,
)

__version__ = "0.1.0"

__all__ = [
    "calculate_player_stats",
    "generate_schedule",
    "rank_leaderboard",
    "validate_match_score",
    "validate_tournament_config",
]
