"""Curated schedules for common event shapes.

A template lists, per round, the matches as pairs of teams given by player
position in the entry list. When a template exists for the requested
(players, courts) shape it replaces the greedy search, which cannot always
reach a perfect partner rotation on its own.
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

from typing import Dict, List, Optional, Sequence, Tuple

from americanopairing.models.tournament.match import Match
from americanopairing.models.tournament.round_data import Round
from americanopairing.type_hints import PlayerId
from americanopairing.utils import setup_logger

logger = setup_logger(__name__)

# ((team1 positions), (team2 positions)) for one court
TemplateMatch = Tuple[Tuple[int, int], Tuple[int, int]]
# One entry per court, in court order
TemplateRound = Tuple[TemplateMatch, ...]
ScheduleTemplate = Tuple[TemplateRound, ...]

# 8 players on 2 courts over 7 rounds: every pair partners exactly once
# and every player plays every round.
EIGHT_PLAYERS_TWO_COURTS: ScheduleTemplate = (
    (((0, 1), (2, 3)), ((4, 5), (6, 7))),
    (((0, 2), (4, 6)), ((1, 3), (5, 7))),
    (((0, 3), (5, 6)), ((1, 4), (2, 7))),
    (((0, 4), (1, 7)), ((2, 5), (3, 6))),
    (((0, 5), (3, 7)), ((1, 6), (2, 4))),
    (((0, 6), (1, 2)), ((3, 5), (4, 7))),
    (((0, 7), (3, 4)), ((1, 5), (2, 6))),
)

# (players, courts) -> template
SCHEDULE_TEMPLATES: Dict[Tuple[int, int], ScheduleTemplate] = {
    (8, 2): EIGHT_PLAYERS_TWO_COURTS,
}


def find_template(
    players_count: int,
    courts: int,
    templates: Optional[Dict[Tuple[int, int], ScheduleTemplate]] = None,
) -> Optional[ScheduleTemplate]:
    """Return the template for this shape, or None."""
    if templates is None:
        templates = SCHEDULE_TEMPLATES
    return templates.get((players_count, courts))


def build_from_template(
    players: Sequence[PlayerId], courts: int, template: ScheduleTemplate
) -> List[Round]:
    """Materialize a template for concrete players.

    Game numbers follow the same ``(round - 1) * courts + court`` rule as
    the generated schedules.
    """
    rounds: List[Round] = []
    for round_number, template_round in enumerate(template, start=1):
        matches = []
        for court, (team1, team2) in enumerate(template_round[:courts], start=1):
            matches.append(
                Match(
                    court=court,
                    team1=(players[team1[0]], players[team1[1]]),
                    team2=(players[team2[0]], players[team2[1]]),
                    round=round_number,
                    game_number=(round_number - 1) * courts + court,
                )
            )
        rounds.append(Round(round=round_number, matches=matches))

    logger.debug(
        f"Built {len(rounds)} rounds from template for "
        f"{len(players)} players on {courts} courts"
    )
    return rounds
