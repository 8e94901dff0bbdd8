"""Data model for tournament round."""

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

from americanopairing.models.tournament.match import Match
from americanopairing.type_hints import PlayerId


@dataclass
class Round:
    """Container for the matches played concurrently in one round.

    Attributes
    ----------
    round : int
        Round number (1-indexed).
    matches : list of Match
        One match per court actually filled, in court order.
    """

    round: int
    matches: List[Match] = field(default_factory=list)

    @property
    def players(self) -> List[PlayerId]:
        """Players scheduled this round, in court order."""
        return [player for match in self.matches for player in match.players]

    @property
    def is_completed(self) -> bool:
        return bool(self.matches) and all(m.is_completed for m in self.matches)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "round": self.round,
            "matches": [m.to_dict() for m in self.matches],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Round":
        """Deserialize round data from dictionary."""
        return cls(
            round=data["round"],
            matches=[Match.from_dict(m) for m in data.get("matches", [])],
        )
