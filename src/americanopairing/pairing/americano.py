"""Americano schedule generation.

Partners rotate every round. Rounds are built greedily: for each court the
optimizer picks the match with the fewest repeated partners and opponents
among the players still free that round, and the master ordering is rotated
by one position between rounds so the search starts from a different spot.
Everything here is deterministic, identical input gives identical rounds.
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

import math
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from americanopairing.constants import (
    DEFAULT_ROUND_COUNTS,
    MAX_POOL_SIZE,
    PLAYERS_PER_MATCH,
)
from americanopairing.models.tournament import (
    DiversityLedger,
    Match,
    Round,
    TournamentConfig,
)
from americanopairing.pairing.optimizer import check_pool_size, select_best_match
from americanopairing.pairing.templates import (
    ScheduleTemplate,
    build_from_template,
    find_template,
)
from americanopairing.type_hints import PlayerId
from americanopairing.utils import setup_logger
from americanopairing.utils.validation import (
    validate_player_names_strict,
    validate_tournament_config_strict,
)

logger = setup_logger(__name__)


def rounds_for_players(
    players_count: int, round_counts: Optional[Mapping[int, int]] = None
) -> int:
    """Number of rounds to schedule for an event of this size.

    Looks the count up in ``round_counts`` (the curated table by default)
    and falls back to ``ceil(players_count / 4)``.
    """
    if round_counts is None:
        round_counts = DEFAULT_ROUND_COUNTS
    if players_count in round_counts:
        return round_counts[players_count]
    return math.ceil(players_count / PLAYERS_PER_MATCH)


def game_number_for(round_number: int, court: int, courts: int) -> int:
    """Schedule-wide game number. Courts left empty leave a gap."""
    return (round_number - 1) * courts + court


def rotate_left(players: List[PlayerId]) -> None:
    """Move the first player to the end, in place."""
    if len(players) > 1:
        players.append(players.pop(0))


class RoundBuilder:
    """Fills the courts of a single round.

    This class is responsible for:
    - Asking the optimizer for the best match among the free players
    - Assigning court and game numbers
    - Recording every scheduled match in the diversity ledger
    - Removing scheduled players from the round's pool
    """

    def __init__(
        self,
        ledger: DiversityLedger,
        courts: int,
        max_pool_size: int = MAX_POOL_SIZE,
    ):
        self.ledger = ledger
        self.courts = courts
        self.max_pool_size = max_pool_size

    def build_round(self, round_number: int, ordering: Sequence[PlayerId]) -> Round:
        """Build one round from the current master ordering.

        Args:
            round_number: The round being built (1-indexed)
            ordering: Master player ordering for this round, left untouched

        Returns:
            The round, possibly with fewer matches than courts
        """
        available = list(ordering)
        matches: List[Match] = []

        for court in range(1, self.courts + 1):
            if len(available) < PLAYERS_PER_MATCH:
                break

            pairing = select_best_match(available, self.ledger, self.max_pool_size)
            if pairing is None:
                continue

            team1, team2 = pairing
            match = Match(
                court=court,
                team1=team1,
                team2=team2,
                round=round_number,
                game_number=game_number_for(round_number, court, self.courts),
            )
            self.ledger.record_played(team1, team2)
            for player in match.players:
                available.remove(player)
            matches.append(match)

            logger.debug(
                f"Round {round_number} court {court}: "
                f"{team1[0]}/{team1[1]} vs {team2[0]}/{team2[1]}"
            )

        return Round(round=round_number, matches=matches)


class ScheduleGenerator:
    """Produces a complete Americano schedule.

    Parameters
    ----------
    courts : int
        Courts available per round.
    round_counts : mapping of int to int, optional
        Players -> rounds table, replaces ``DEFAULT_ROUND_COUNTS``.
    max_pool_size : int
        Optimizer ceiling, larger events are refused up front.
    use_templates : bool
        Use a curated template when one matches (players, courts).
    templates : dict, optional
        Replaces ``SCHEDULE_TEMPLATES``.
    """

    def __init__(
        self,
        courts: int,
        round_counts: Optional[Mapping[int, int]] = None,
        max_pool_size: int = MAX_POOL_SIZE,
        use_templates: bool = True,
        templates: Optional[Dict[Tuple[int, int], ScheduleTemplate]] = None,
    ):
        self.courts = courts
        self.round_counts = round_counts
        self.max_pool_size = max_pool_size
        self.use_templates = use_templates
        self.templates = templates

    def _check_preconditions(self, players: Sequence[PlayerId]) -> List[PlayerId]:
        validate_tournament_config_strict(len(players), self.courts)
        cleaned = validate_player_names_strict(players)
        check_pool_size(len(cleaned), self.max_pool_size)
        return cleaned

    def generate(self, players: Sequence[PlayerId]) -> List[Round]:
        """Generate the schedule for the given player ordering.

        Raises:
            ConfigurationException: If players/courts cannot be scheduled.
                Nothing is generated in that case.
        """
        players = self._check_preconditions(players)

        if self.use_templates:
            template = find_template(len(players), self.courts, self.templates)
            if template is not None:
                return build_from_template(players, self.courts, template)

        max_rounds = rounds_for_players(len(players), self.round_counts)
        ordering = list(players)
        ledger = DiversityLedger(ordering)
        builder = RoundBuilder(ledger, self.courts, self.max_pool_size)
        rounds: List[Round] = []

        logger.debug(
            f"Generating {max_rounds} rounds for {len(players)} players "
            f"on {self.courts} courts"
        )

        for round_number in range(1, max_rounds + 1):
            round_data = builder.build_round(round_number, ordering)
            if round_data.matches:
                rounds.append(round_data)
            else:
                logger.warning(f"Round {round_number} produced no matches, dropped")

            if round_number < max_rounds:
                rotate_left(ordering)

        logger.debug(
            f"Schedule complete: {len(rounds)} rounds, "
            f"{sum(len(r.matches) for r in rounds)} matches, "
            f"{ledger.partnership_count()} distinct partnerships"
        )
        return rounds


def generate_schedule(
    players: Sequence[PlayerId],
    courts: int,
    round_counts: Optional[Mapping[int, int]] = None,
    max_pool_size: int = MAX_POOL_SIZE,
    use_templates: bool = True,
) -> List[Round]:
    """Generate an Americano schedule.

    Args:
        players: Unique player ids, the order seeds the rotation
        courts: Courts available per round
        round_counts: Optional override of the players -> rounds table
        max_pool_size: Optimizer ceiling
        use_templates: Allow curated templates for known shapes

    Returns:
        Ordered list of rounds

    Raises:
        ConfigurationException: For invalid players/courts, never a partial schedule
    """
    generator = ScheduleGenerator(
        courts,
        round_counts=round_counts,
        max_pool_size=max_pool_size,
        use_templates=use_templates,
    )
    return generator.generate(players)


def generate_schedule_from_config(config: TournamentConfig) -> List[Round]:
    """Generate the schedule described by a TournamentConfig."""
    return generate_schedule(
        config.players,
        config.courts,
        round_counts=config.round_counts,
        max_pool_size=config.max_pool_size,
        use_templates=config.use_templates,
    )
