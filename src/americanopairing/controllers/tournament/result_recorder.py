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

from typing import List, Optional, Sequence, Tuple

from americanopairing.constants import DEFAULT_POINTS_PER_MATCH, MATCH_COMPLETED
from americanopairing.exceptions import (
    DuplicateResultException,
    InvalidScoreException,
    MatchNotFoundException,
)
from americanopairing.models.tournament import Match, MatchScore, Round, SetScore
from americanopairing.utils import setup_logger
from americanopairing.utils.validation import validate_match_score_strict

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording and validating match results.

    This class is responsible for:
    - Validating submitted scores before they touch a match
    - Attaching the score and marking the match completed, exactly once
    - Looking matches up by game number
    """

    def __init__(self, points_per_match: int = DEFAULT_POINTS_PER_MATCH):
        """Initialize the recorder.

        Args:
            points_per_match: Fixed total both team scores must reach in points play
        """
        self.points_per_match = points_per_match

    def record_score(
        self,
        match: Match,
        team1_score: int,
        team2_score: int,
        sets: Optional[Sequence[SetScore]] = None,
    ) -> Match:
        """Validate a score and attach it to the match.

        Without ``sets`` the points-play rules apply (scores add up to
        ``points_per_match``). With ``sets`` the team scores count sets won.

        Args:
            match: The pending match
            team1_score: Score of team 1
            team2_score: Score of team 2
            sets: Optional per-set detail

        Returns:
            The same match, now completed

        Raises:
            DuplicateResultException: If the match already has a score
            InvalidScoreException: If the score breaks the scoring rules
        """
        if match.score is not None or match.status == MATCH_COMPLETED:
            logger.warning(
                f"Game {match.game_number} already has a result, "
                "refusing to overwrite it"
            )
            raise DuplicateResultException(
                f"Game {match.game_number} (round {match.round}, court {match.court}) "
                "is already completed"
            )

        try:
            validate_match_score_strict(
                team1_score, team2_score, self.points_per_match, sets=sets
            )
        except InvalidScoreException as e:
            logger.error(f"Rejected score for game {match.game_number}: {e}")
            raise

        match.score = MatchScore(
            team1_score=team1_score,
            team2_score=team2_score,
            sets=list(sets or []),
        )
        match.status = MATCH_COMPLETED

        logger.debug(
            f"Recorded game {match.game_number}: "
            f"{'/'.join(match.team1)} {team1_score} - {team2_score} {'/'.join(match.team2)}"
        )
        return match

    def find_match(self, rounds: Sequence[Round], game_number: int) -> Match:
        """Find a match by its game number.

        Raises:
            MatchNotFoundException: If no match has that game number
        """
        for round_data in rounds:
            for match in round_data.matches:
                if match.game_number == game_number:
                    return match
        raise MatchNotFoundException(f"No match with game number {game_number}")

    def record_game(
        self,
        rounds: Sequence[Round],
        game_number: int,
        team1_score: int,
        team2_score: int,
        sets: Optional[Sequence[SetScore]] = None,
    ) -> Match:
        """Record a score for the match with the given game number."""
        match = self.find_match(rounds, game_number)
        return self.record_score(match, team1_score, team2_score, sets)

    def record_round_results(
        self,
        round_data: Round,
        results_data: List[Tuple[int, int, int]],
    ) -> bool:
        """Record results for several matches of a round.

        Invalid or duplicate entries are logged and skipped, the rest are
        still recorded.

        Args:
            round_data: The round to record results for
            results_data: List of (court, team1_score, team2_score) tuples

        Returns:
            True if all results recorded successfully, False if any errors occurred
        """
        by_court = {match.court: match for match in round_data.matches}
        success = True

        for court, team1_score, team2_score in results_data:
            match = by_court.get(court)
            if match is None:
                logger.error(f"Round {round_data.round} has no match on court {court}")
                success = False
                continue
            try:
                self.record_score(match, team1_score, team2_score)
            except (InvalidScoreException, DuplicateResultException):
                success = False
                continue

        pending = [m.court for m in round_data.matches if not m.is_completed]
        if pending:
            logger.warning(
                f"Round {round_data.round}: courts still without a result: {pending}"
            )

        return success
