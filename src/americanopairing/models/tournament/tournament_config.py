"""TournamentConfig data class."""

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
from typing import Any, Dict, List, Optional

from americanopairing.constants import (
    DEFAULT_COURTS,
    DEFAULT_POINTS_PER_MATCH,
    MAX_POOL_SIZE,
)
from americanopairing.models.enums import ScoringMode


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    players : list of str
        Player names in entry order. The order seeds the rotation.
    courts : int
        Courts available per round.
    points_per_match : int
        Fixed total both team scores add up to in points play.
    scoring_mode : ScoringMode
        Leaderboard semantics, raw points or match win + sets won.
    round_counts : dict of int to int or None
        Overrides the curated players -> rounds table.
    max_pool_size : int
        Largest player pool handed to the exhaustive optimizer.
    use_templates : bool
        Whether curated schedule templates may replace the greedy search.
    """

    name: str
    players: List[str] = field(default_factory=list)
    courts: int = DEFAULT_COURTS
    points_per_match: int = DEFAULT_POINTS_PER_MATCH
    scoring_mode: ScoringMode = ScoringMode.RAW_POINTS
    round_counts: Optional[Dict[int, int]] = None
    max_pool_size: int = MAX_POOL_SIZE
    use_templates: bool = True

    def __post_init__(self):
        self.scoring_mode = ScoringMode.parse(self.scoring_mode)

    def validate(self) -> List[str]:
        """Return every configuration problem, empty when the config is usable."""
        # Imported here, utils.validation depends on the models package
        from americanopairing.utils.validation import (
            validate_player_names,
            validate_points_per_match,
            validate_tournament_config,
        )

        errors = []
        names = validate_player_names(self.players)
        if not names:
            errors.append(names.error_message)
        config_error = validate_tournament_config(len(self.players), self.courts)
        if config_error:
            errors.append(config_error)
        points = validate_points_per_match(self.points_per_match)
        if not points:
            errors.append(points.error_message)
        if self.max_pool_size < 4:
            errors.append(f"Pool size ceiling must be at least 4: {self.max_pool_size}")
        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "players": list(self.players),
            "courts": self.courts,
            "points_per_match": self.points_per_match,
            "scoring_mode": self.scoring_mode.value,
            "round_counts": (
                {str(k): v for k, v in self.round_counts.items()}
                if self.round_counts is not None
                else None
            ),
            "max_pool_size": self.max_pool_size,
            "use_templates": self.use_templates,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        round_counts = data.get("round_counts")
        return cls(
            name=data.get("name", "Untitled Tournament"),
            players=list(data.get("players", [])),
            courts=data.get("courts", DEFAULT_COURTS),
            points_per_match=data.get("points_per_match", DEFAULT_POINTS_PER_MATCH),
            scoring_mode=ScoringMode.parse(
                data.get("scoring_mode", ScoringMode.RAW_POINTS.value)
            ),
            round_counts=(
                {int(k): int(v) for k, v in round_counts.items()}
                if round_counts is not None
                else None
            ),
            max_pool_size=data.get("max_pool_size", MAX_POOL_SIZE),
            use_templates=data.get("use_templates", True),
        )
