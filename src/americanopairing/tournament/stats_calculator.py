"""Player statistics and leaderboard calculation.

This module folds completed matches into per-player statistics. Two scoring
modes exist and the caller always chooses one explicitly:

- Raw points: a player's total is the sum of their team's points.
- Set points: 3 points per match won plus 1 point per set won.
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

from dataclasses import replace
from typing import Dict, Iterable, List, Sequence, Tuple, Union

from americanopairing.constants import (
    DEFAULT_GAME_DURATION,
    MATCH_WIN_POINTS,
    SET_WIN_POINTS,
)
from americanopairing.models.enums import ScoringMode
from americanopairing.models.tournament import (
    Leaderboard,
    Match,
    PlayerStats,
    Round,
    TournamentProgress,
)
from americanopairing.type_hints import PlayerId
from americanopairing.utils import setup_logger
from americanopairing.utils.validation import ValidationResult

logger = setup_logger(__name__)


class StatsCalculator:
    """Calculates player statistics for tournament standings.

    Only matches that are completed and carry a score are counted, but every
    player appearing anywhere in the rounds gets a row.

    Raw points mode:
    - points_for / points_against from the team scores
    - total_points = points_for
    - a match is won when the team's score beats the opponent's

    Set points mode:
    - with set detail, sets_won / sets_lost from individual set outcomes and
      points_for / points_against from per-set scores
    - without set detail the team scores are the set counts, no points
    - total_points = matches_won * 3 + sets_won
    """

    def __init__(self, scoring_mode: Union[ScoringMode, str] = ScoringMode.RAW_POINTS):
        self.scoring_mode = ScoringMode.parse(scoring_mode)

    def calculate_player_stats(self, rounds: Sequence[Round]) -> List[PlayerStats]:
        """Calculate statistics for every scheduled player.

        Args:
            rounds: Snapshot of the schedule with whatever scores are attached

        Returns:
            One PlayerStats per player, in order of first appearance
        """
        stats: Dict[PlayerId, PlayerStats] = {}
        for match in _iter_matches(rounds):
            for player in match.players:
                if player not in stats:
                    stats[player] = PlayerStats(player=player)

        counted = 0
        for match in _iter_matches(rounds):
            if not match.is_completed:
                continue
            if self.scoring_mode is ScoringMode.SET_POINTS:
                self._add_set_result(match, stats)
            else:
                self._add_points_result(match, stats)
            counted += 1

        for player_stats in stats.values():
            self._finalize(player_stats)

        logger.debug(
            f"Calculated {self.scoring_mode.value} stats for {len(stats)} players "
            f"from {counted} completed matches"
        )
        return list(stats.values())

    def _add_points_result(self, match: Match, stats: Dict[PlayerId, PlayerStats]) -> None:
        score = match.score
        sides = (
            (match.team1, score.team1_score, score.team2_score),
            (match.team2, score.team2_score, score.team1_score),
        )
        for team, own, other in sides:
            for player in team:
                player_stats = stats[player]
                player_stats.matches_played += 1
                player_stats.points_for += own
                player_stats.points_against += other
                if own > other:
                    player_stats.matches_won += 1

    def _add_set_result(self, match: Match, stats: Dict[PlayerId, PlayerStats]) -> None:
        score = match.score
        if score.sets:
            team1_sets = sum(1 for s in score.sets if s.team1 > s.team2)
            team2_sets = sum(1 for s in score.sets if s.team2 > s.team1)
            team1_points = sum(s.team1 for s in score.sets)
            team2_points = sum(s.team2 for s in score.sets)
        else:
            team1_sets, team2_sets = score.team1_score, score.team2_score
            team1_points = team2_points = 0

        sides = (
            (match.team1, team1_sets, team2_sets, team1_points, team2_points),
            (match.team2, team2_sets, team1_sets, team2_points, team1_points),
        )
        for team, own_sets, other_sets, own_points, other_points in sides:
            for player in team:
                player_stats = stats[player]
                player_stats.matches_played += 1
                player_stats.sets_won += own_sets
                player_stats.sets_lost += other_sets
                player_stats.points_for += own_points
                player_stats.points_against += other_points
                if own_sets > other_sets:
                    player_stats.matches_won += 1

    def _finalize(self, player_stats: PlayerStats) -> None:
        """Fill in the derived fields."""
        played = player_stats.matches_played
        if played:
            player_stats.win_percentage = player_stats.matches_won / played * 100
            player_stats.average_score = player_stats.points_for / played
        else:
            player_stats.win_percentage = 0.0
            player_stats.average_score = 0.0

        if self.scoring_mode is ScoringMode.SET_POINTS:
            player_stats.total_points = (
                player_stats.matches_won * MATCH_WIN_POINTS
                + player_stats.sets_won * SET_WIN_POINTS
            )
        else:
            player_stats.total_points = player_stats.points_for


def _iter_matches(rounds: Iterable[Round]) -> Iterable[Match]:
    for round_data in rounds:
        yield from round_data.matches


def _ranking_key(stats: PlayerStats) -> Tuple[int, int, int, str]:
    return (
        -stats.total_points,
        -stats.point_difference,
        -stats.matches_won,
        stats.player,
    )


def _tie_key(stats: PlayerStats) -> Tuple[int, int, int]:
    return _ranking_key(stats)[:3]


def rank_leaderboard(stats: Sequence[PlayerStats]) -> List[PlayerStats]:
    """Sort player statistics into leaderboard order and assign ranks.

    Order: total points, then point difference, then matches won (all
    descending), then player id ascending. Players level on all three
    numbers share a rank and the next rank is skipped ("1, 1, 3").
    The input is left untouched, ranked copies are returned.
    """
    ordered = sorted(stats, key=_ranking_key)
    ranked: List[PlayerStats] = []
    for position, player_stats in enumerate(ordered, start=1):
        rank = position
        if ranked and _tie_key(ranked[-1]) == _tie_key(player_stats):
            rank = ranked[-1].rank
        ranked.append(replace(player_stats, rank=rank))
    return ranked


def calculate_player_stats(
    rounds: Sequence[Round],
    scoring_mode: Union[ScoringMode, str] = ScoringMode.RAW_POINTS,
) -> List[PlayerStats]:
    """Per-player statistics for the rounds under the given scoring mode."""
    return StatsCalculator(scoring_mode).calculate_player_stats(rounds)


def generate_leaderboard(
    rounds: Sequence[Round],
    scoring_mode: Union[ScoringMode, str] = ScoringMode.RAW_POINTS,
) -> Leaderboard:
    """Ranked leaderboard with completion metadata."""
    mode = ScoringMode.parse(scoring_mode)
    matches = list(_iter_matches(rounds))
    return Leaderboard(
        players=rank_leaderboard(calculate_player_stats(rounds, mode)),
        scoring_mode=mode,
        total_matches=len(matches),
        completed_matches=sum(1 for m in matches if m.is_completed),
    )


def calculate_tournament_progress(
    rounds: Sequence[Round], game_duration: int = DEFAULT_GAME_DURATION
) -> TournamentProgress:
    """Completed vs scheduled matches and a rough time estimate.

    Matches on different courts run concurrently but the estimate does not
    account for that: it is ``remaining matches * game_duration`` minutes.
    """
    matches = list(_iter_matches(rounds))
    completed = sum(1 for m in matches if m.is_completed)
    return TournamentProgress(
        total_matches=len(matches),
        completed_matches=completed,
        completed_rounds=sum(1 for r in rounds if r.is_completed),
        estimated_minutes_remaining=(len(matches) - completed) * game_duration,
    )


def check_leaderboard_integrity(
    leaderboard: Leaderboard, rounds: Sequence[Round]
) -> ValidationResult:
    """Check a leaderboard against the rounds it was built from.

    Every scheduled player must appear exactly once, nobody else may, and
    the rows must be in ranking order with non-decreasing ranks.
    """
    errors: List[str] = []
    scheduled = {player for round_data in rounds for player in round_data.players}
    listed = [s.player for s in leaderboard.players]

    missing = sorted(scheduled - set(listed))
    if missing:
        errors.append(f"Players missing from leaderboard: {', '.join(missing)}")
    extra = sorted(set(listed) - scheduled)
    if extra:
        errors.append(f"Unknown players on leaderboard: {', '.join(extra)}")
    duplicated = sorted({p for p in listed if listed.count(p) > 1})
    if duplicated:
        errors.append(f"Players listed more than once: {', '.join(duplicated)}")

    rows = leaderboard.players
    for previous, current in zip(rows, rows[1:]):
        if _ranking_key(previous) > _ranking_key(current) or previous.rank > current.rank:
            errors.append(
                f"Leaderboard out of order at {current.player} (rank {current.rank})"
            )
            break

    if errors:
        logger.warning(f"Leaderboard integrity check failed: {errors}")
        return ValidationResult(is_valid=False, error_message="; ".join(errors))
    return ValidationResult(is_valid=True, sanitized_value=leaderboard)
