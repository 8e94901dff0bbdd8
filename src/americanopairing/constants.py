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

# --- Constants ---

# Player constraints
PLAYERS_PER_MATCH = 4
PLAYERS_PER_TEAM = 2
MIN_PLAYERS = 4
MIN_PLAYER_NAME_LENGTH = 1
MAX_PLAYER_NAME_LENGTH = 50

# Court constraints
MIN_COURTS = 1
DEFAULT_COURTS = 2

# Points play: both team scores must add up to this total
DEFAULT_POINTS_PER_MATCH = 16
MIN_POINTS_PER_MATCH = 10
MAX_POINTS_PER_MATCH = 30

# Average length of one match, used for progress estimates (minutes)
DEFAULT_GAME_DURATION = 13

# Match status
MATCH_PENDING = "pending"
MATCH_COMPLETED = "completed"

# Repeat penalties used by the pairing optimizer
REPEAT_PARTNER_PENALTY = 10
REPEAT_OPPONENT_PENALTY = 5

# The optimizer enumerates every 4-subset of the pool, O(k^4) per call.
# Pools above this size are refused instead of silently slowing down.
MAX_POOL_SIZE = 32

# Curated round counts by player count. Anything not listed falls back
# to ceil(players / 4).
DEFAULT_ROUND_COUNTS = {
    4: 1,
    8: 3,
    12: 4,
    16: 5,
}

# Set play: tournament points for a match win and for every set won
MATCH_WIN_POINTS = 3
SET_WIN_POINTS = 1

# Scoring mode keys
SCORING_RAW_POINTS = "raw_points"
SCORING_SET_POINTS = "set_points"

SCORING_MODE_NAMES = {
    SCORING_RAW_POINTS: "Raw points",
    SCORING_SET_POINTS: "Match win + sets won",
}
