"""Player statistics and leaderboard data classes."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List

from americanopairing.models.enums import ScoringMode


@dataclass
class PlayerStats:
    """Aggregated results of one player.

    Derived from the rounds on demand, never stored on its own.

    Attributes
    ----------
    player : str
        Player id.
    matches_played : int
        Completed matches the player took part in.
    matches_won : int
        Completed matches the player's team won outright.
    sets_won, sets_lost : int
        Set tallies, only filled in set play.
    points_for, points_against : int
        Points scored by and against the player's teams.
    win_percentage : float
        ``matches_won / matches_played * 100``, 0 without matches.
    total_points : int
        Leaderboard points under the active scoring mode.
    average_score : float
        ``points_for / matches_played``, 0 without matches.
    rank : int
        Leaderboard position, 0 until ranked.
    """

    player: str
    matches_played: int = 0
    matches_won: int = 0
    sets_won: int = 0
    sets_lost: int = 0
    points_for: int = 0
    points_against: int = 0
    win_percentage: float = 0.0
    total_points: int = 0
    average_score: float = 0.0
    rank: int = 0

    @property
    def point_difference(self) -> int:
        return self.points_for - self.points_against

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player": self.player,
            "matches_played": self.matches_played,
            "matches_won": self.matches_won,
            "sets_won": self.sets_won,
            "sets_lost": self.sets_lost,
            "points_for": self.points_for,
            "points_against": self.points_against,
            "win_percentage": self.win_percentage,
            "total_points": self.total_points,
            "average_score": self.average_score,
            "rank": self.rank,
        }


@dataclass
class Leaderboard:
    """Ranked player statistics plus completion metadata."""

    players: List[PlayerStats] = field(default_factory=list)
    scoring_mode: ScoringMode = ScoringMode.RAW_POINTS
    total_matches: int = 0
    completed_matches: int = 0

    @property
    def is_complete(self) -> bool:
        return self.total_matches > 0 and self.completed_matches == self.total_matches

    def to_dict(self) -> Dict[str, Any]:
        return {
            "players": [p.to_dict() for p in self.players],
            "scoring_mode": self.scoring_mode.value,
            "total_matches": self.total_matches,
            "completed_matches": self.completed_matches,
            "is_complete": self.is_complete,
        }


@dataclass
class TournamentProgress:
    """How far along the schedule is."""

    total_matches: int
    completed_matches: int
    completed_rounds: int
    estimated_minutes_remaining: int

    @property
    def progress_percentage(self) -> float:
        if self.total_matches == 0:
            return 0.0
        return (self.completed_matches / self.total_matches) * 100.0
