"""Match and score data classes."""

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
from typing import Any, Dict, List, Optional, Tuple

from americanopairing.constants import MATCH_COMPLETED, MATCH_PENDING
from americanopairing.type_hints import MatchStatus, PlayerId, Team


@dataclass
class SetScore:
    """Games won by each team in a single set."""

    team1: int
    team2: int

    def to_dict(self) -> Dict[str, Any]:
        return {"team1": self.team1, "team2": self.team2}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SetScore":
        return cls(team1=data["team1"], team2=data["team2"])


@dataclass
class MatchScore:
    """Final score of a match.

    Attributes
    ----------
    team1_score : int
        Points (points play) or sets (set play) won by team 1.
    team2_score : int
        Points (points play) or sets (set play) won by team 2.
    sets : list of SetScore
        Optional set-level detail. Empty for points play.
    """

    team1_score: int
    team2_score: int
    sets: List[SetScore] = field(default_factory=list)

    @property
    def total_points(self) -> int:
        return self.team1_score + self.team2_score

    @property
    def has_sets(self) -> bool:
        return bool(self.sets)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match score to dictionary."""
        data: Dict[str, Any] = {
            "team1_score": self.team1_score,
            "team2_score": self.team2_score,
        }
        if self.sets:
            data["sets"] = [s.to_dict() for s in self.sets]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchScore":
        """Deserialize match score from dictionary."""
        return cls(
            team1_score=data["team1_score"],
            team2_score=data["team2_score"],
            sets=[SetScore.from_dict(s) for s in data.get("sets", [])],
        )


@dataclass
class Match:
    """A single doubles match on one court.

    Created once by the schedule generator. Only ``score`` and ``status``
    change afterwards, exactly once, through the result recorder.

    Attributes
    ----------
    court : int
        Court number (1-indexed).
    team1 : tuple of str
        The two players of team 1.
    team2 : tuple of str
        The two players of team 2, disjoint from team 1.
    round : int
        Round the match belongs to.
    game_number : int
        Schedule-wide game number, ``(round - 1) * courts + court``.
    score : MatchScore or None
        Recorded score, None until the match is completed.
    status : str
        "pending" or "completed".
    """

    court: int
    team1: Team
    team2: Team
    round: int
    game_number: int
    score: Optional[MatchScore] = None
    status: MatchStatus = MATCH_PENDING

    def __post_init__(self):
        self.team1 = tuple(self.team1)
        self.team2 = tuple(self.team2)

    @property
    def players(self) -> Tuple[PlayerId, PlayerId, PlayerId, PlayerId]:
        """All four players, team 1 first."""
        return (self.team1[0], self.team1[1], self.team2[0], self.team2[1])

    @property
    def is_completed(self) -> bool:
        return self.status == MATCH_COMPLETED and self.score is not None

    def team_of(self, player: PlayerId) -> Optional[int]:
        """Return 1 or 2 for the player's team, None if not in this match."""
        if player in self.team1:
            return 1
        if player in self.team2:
            return 2
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "court": self.court,
            "team1": list(self.team1),
            "team2": list(self.team2),
            "round": self.round,
            "game_number": self.game_number,
            "score": self.score.to_dict() if self.score else None,
            "status": self.status,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        score = data.get("score")
        return cls(
            court=data["court"],
            team1=tuple(data["team1"]),
            team2=tuple(data["team2"]),
            round=data["round"],
            game_number=data["game_number"],
            score=MatchScore.from_dict(score) if score else None,
            status=data.get("status", MATCH_PENDING),
        )
