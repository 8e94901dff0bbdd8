"""Validation utilities for Americano Pairing.

This module provides reusable validation functions with consistent error handling.
Every check comes in two flavours: a plain function returning a result object
that can be used in boolean context, and a ``*_strict`` variant raising the
matching exception from :mod:`americanopairing.exceptions`.
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

from typing import Any, Dict, List, Optional, Sequence

from americanopairing.constants import (
    DEFAULT_POINTS_PER_MATCH,
    MAX_PLAYER_NAME_LENGTH,
    MAX_POINTS_PER_MATCH,
    MIN_COURTS,
    MIN_PLAYER_NAME_LENGTH,
    MIN_PLAYERS,
    MIN_POINTS_PER_MATCH,
    PLAYERS_PER_MATCH,
)
from americanopairing.exceptions import (
    DuplicatePlayerException,
    InvalidConfigurationException,
    InvalidScoreException,
)
from americanopairing.models.tournament.match import SetScore


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Optional[Any] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Tournament Configuration ==========


def validate_tournament_config(players_count: int, courts_count: int) -> Optional[str]:
    """Check that a players/courts combination can be scheduled.

    The rules are evaluated in order and the first failure wins.

    Args:
        players_count: Number of registered players
        courts_count: Number of courts available per round

    Returns:
        None when the configuration is usable, otherwise the error message
    """
    if players_count < MIN_PLAYERS:
        return f"minimum {MIN_PLAYERS} players required"

    if players_count % PLAYERS_PER_MATCH != 0:
        return f"player count must be a multiple of {PLAYERS_PER_MATCH}"

    if courts_count < MIN_COURTS:
        return f"at least {MIN_COURTS} court required"

    if courts_count > players_count // PLAYERS_PER_MATCH:
        return "too many courts for player count"

    return None


def validate_tournament_config_strict(players_count: int, courts_count: int) -> None:
    """Validate players/courts and raise if unusable.

    Raises:
        InvalidConfigurationException: If the configuration is invalid
    """
    error = validate_tournament_config(players_count, courts_count)
    if error is not None:
        raise InvalidConfigurationException(error)


def validate_points_per_match(points: Optional[int]) -> ValidationResult:
    """Validate the fixed point total played in every match."""
    if points is None:
        return ValidationResult(
            is_valid=False,
            error_message="Points per match is required",
        )

    if isinstance(points, bool) or not isinstance(points, int):
        return ValidationResult(
            is_valid=False,
            error_message=f"Points per match must be a whole number: {points!r}",
        )

    if points < MIN_POINTS_PER_MATCH or points > MAX_POINTS_PER_MATCH:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Points per match must be between {MIN_POINTS_PER_MATCH} "
                f"and {MAX_POINTS_PER_MATCH}: {points}"
            ),
        )

    return ValidationResult(is_valid=True, sanitized_value=points)


# ========== Player Names ==========


def validate_player_names(players: Sequence[str]) -> ValidationResult:
    """Validate the list of player names entered for a tournament.

    Names are stripped. Duplicates are detected case-insensitively, so
    "alice" and "Alice" cannot both enter the same event.

    Args:
        players: Player names in entry order

    Returns:
        ValidationResult whose sanitized_value is the list of stripped names
    """
    if not players:
        return ValidationResult(
            is_valid=False,
            error_message="Player list cannot be empty",
        )

    errors: List[str] = []
    seen: Dict[str, str] = {}
    duplicates: List[str] = []
    cleaned: List[str] = []

    for index, player in enumerate(players):
        name = str(player).strip()
        cleaned.append(name)

        if len(name) < MIN_PLAYER_NAME_LENGTH:
            errors.append(f"Player {index + 1}: Name cannot be empty")
            continue
        if len(name) > MAX_PLAYER_NAME_LENGTH:
            errors.append(
                f"Player {index + 1}: Name too long "
                f"(max {MAX_PLAYER_NAME_LENGTH} characters)"
            )

        key = name.casefold()
        if key in seen and name not in duplicates:
            duplicates.append(name)
        seen.setdefault(key, name)

    if duplicates:
        errors.insert(0, f"Duplicate player names: {', '.join(duplicates)}")

    if errors:
        return ValidationResult(is_valid=False, error_message="; ".join(errors))

    return ValidationResult(is_valid=True, sanitized_value=cleaned)


def validate_player_names_strict(players: Sequence[str]) -> List[str]:
    """Validate player names and return the cleaned list or raise.

    Raises:
        DuplicatePlayerException: If two names only differ in case/whitespace
        InvalidConfigurationException: If a name is empty or too long
    """
    result = validate_player_names(players)
    if not result.is_valid:
        message = result.error_message or "Invalid player list"
        if message.startswith("Duplicate player names"):
            raise DuplicatePlayerException(message)
        raise InvalidConfigurationException(message)
    return result.sanitized_value


# ========== Score Validation ==========


class MatchScoreValidation:
    """Outcome of validating one submitted match score.

    Attributes:
        team1_score: Score submitted for team 1
        team2_score: Score submitted for team 2
        total_points: Sum of both scores (0 if they are not numbers)
        errors: Every rule the score breaks, empty when valid
    """

    def __init__(
        self,
        team1_score: Any,
        team2_score: Any,
        total_points: int,
        errors: Optional[List[str]] = None,
    ):
        self.team1_score = team1_score
        self.team2_score = team2_score
        self.total_points = total_points
        self.errors = list(errors or [])

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.is_valid

    def __repr__(self) -> str:
        status = "VALID" if self.is_valid else "INVALID"
        return (
            f"MatchScoreValidation({status}, {self.team1_score}-{self.team2_score}, "
            f"errors={self.errors!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "team1_score": self.team1_score,
            "team2_score": self.team2_score,
            "total_points": self.total_points,
            "is_valid": self.is_valid,
            "errors": list(self.errors),
        }


def _is_whole_number(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_match_score(
    team1_score: int,
    team2_score: int,
    fixed_point_total: int = DEFAULT_POINTS_PER_MATCH,
) -> MatchScoreValidation:
    """Validate a points-play score.

    A score is valid when both values are whole numbers in
    ``[0, fixed_point_total]`` and they add up to exactly ``fixed_point_total``.

    Example:
        >>> validate_match_score(10, 6, 16).is_valid
        True
        >>> validate_match_score(8, 6, 16).errors
        ['Total points must equal 16 (currently 14)']
    """
    if not (_is_whole_number(team1_score) and _is_whole_number(team2_score)):
        return MatchScoreValidation(
            team1_score, team2_score, 0, ["Scores must be whole numbers"]
        )

    errors: List[str] = []
    total_points = team1_score + team2_score

    if team1_score < 0 or team2_score < 0:
        errors.append("Scores cannot be negative")

    if total_points != fixed_point_total:
        errors.append(
            f"Total points must equal {fixed_point_total} (currently {total_points})"
        )

    if team1_score > fixed_point_total or team2_score > fixed_point_total:
        errors.append(f"Individual scores cannot exceed {fixed_point_total}")

    return MatchScoreValidation(team1_score, team2_score, total_points, errors)


def validate_set_score(
    team1_score: int,
    team2_score: int,
    sets: Sequence[SetScore],
    fixed_point_total: Optional[int] = None,
) -> MatchScoreValidation:
    """Validate a score that comes with set-level detail.

    In set play the match score counts sets: team1_score must equal the
    number of sets team 1 won, and the same for team 2. Drawn sets count
    for neither side. When ``fixed_point_total`` is given the points-play
    rules of :func:`validate_match_score` are checked as well.

    Args:
        team1_score: Sets won by team 1 as declared by the submitter
        team2_score: Sets won by team 2 as declared by the submitter
        sets: Per-set scores in playing order
        fixed_point_total: Optional fixed total the match score must reach

    Returns:
        MatchScoreValidation listing every broken rule
    """
    if fixed_point_total is not None:
        result = validate_match_score(team1_score, team2_score, fixed_point_total)
        errors = list(result.errors)
        total_points = result.total_points
    elif not (_is_whole_number(team1_score) and _is_whole_number(team2_score)):
        return MatchScoreValidation(
            team1_score, team2_score, 0, ["Scores must be whole numbers"]
        )
    else:
        errors = []
        total_points = team1_score + team2_score
        if team1_score < 0 or team2_score < 0:
            errors.append("Scores cannot be negative")

    if not sets:
        errors.append("At least one set score is required")
        return MatchScoreValidation(team1_score, team2_score, total_points, errors)

    for number, set_score in enumerate(sets, start=1):
        if not (
            _is_whole_number(set_score.team1) and _is_whole_number(set_score.team2)
        ):
            errors.append(f"Set {number}: scores must be whole numbers")
            return MatchScoreValidation(team1_score, team2_score, total_points, errors)
        if set_score.team1 < 0 or set_score.team2 < 0:
            errors.append(f"Set {number}: scores cannot be negative")

    team1_sets = sum(1 for s in sets if s.team1 > s.team2)
    team2_sets = sum(1 for s in sets if s.team2 > s.team1)

    if team1_score != team1_sets:
        errors.append(
            f"Team 1 score {team1_score} does not match sets won ({team1_sets})"
        )
    if team2_score != team2_sets:
        errors.append(
            f"Team 2 score {team2_score} does not match sets won ({team2_sets})"
        )

    return MatchScoreValidation(team1_score, team2_score, total_points, errors)


def validate_match_score_strict(
    team1_score: int,
    team2_score: int,
    fixed_point_total: int = DEFAULT_POINTS_PER_MATCH,
    sets: Optional[Sequence[SetScore]] = None,
) -> MatchScoreValidation:
    """Validate a score and raise if it cannot be accepted.

    With ``sets`` the set-play rules apply, without them the points-play rules.

    Raises:
        InvalidScoreException: If the score breaks any rule
    """
    if sets:
        result = validate_set_score(team1_score, team2_score, sets)
    else:
        result = validate_match_score(team1_score, team2_score, fixed_point_total)

    if not result.is_valid:
        raise InvalidScoreException("; ".join(result.errors), result.errors)
    return result
