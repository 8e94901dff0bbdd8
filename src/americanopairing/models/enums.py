"""Enumerations shared by the models."""

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

from enum import Enum

from americanopairing.constants import SCORING_RAW_POINTS, SCORING_SET_POINTS


class ScoringMode(Enum):
    """How completed matches turn into leaderboard points.

    RAW_POINTS: a player's total is the sum of their team's points.
    SET_POINTS: 3 points per match won plus 1 per set won.
    """

    RAW_POINTS = SCORING_RAW_POINTS
    SET_POINTS = SCORING_SET_POINTS

    @classmethod
    def parse(cls, value) -> "ScoringMode":
        """Accept a ScoringMode, its value ("raw_points") or its name ("RAW_POINTS")."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        try:
            return cls(text.lower())
        except ValueError:
            pass
        try:
            return cls[text.upper()]
        except KeyError:
            raise ValueError(f"Unknown scoring mode: {value!r}") from None
