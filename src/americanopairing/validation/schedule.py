"""Schedule compliance checker for Americano schedules.

This module audits a schedule, generated here or loaded from elsewhere,
against the structural rules every round must satisfy and against the
rotation quality an Americano event aims for.
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

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Sequence

from americanopairing.constants import PLAYERS_PER_MATCH, PLAYERS_PER_TEAM
from americanopairing.models.tournament import Match, Round
from americanopairing.type_hints import PlayerId
from americanopairing.utils import setup_logger

logger = setup_logger(__name__)

PairKey = FrozenSet[PlayerId]


class CriterionStatus(Enum):
    """Status of a schedule criterion."""

    COMPLIANT = "COMPLIANT"
    VIOLATION = "VIOLATION"
    NOT_APPLICABLE = "NOT_APPLICABLE"


class ViolationType(Enum):
    """Types of schedule violations."""

    ABSOLUTE = "ABSOLUTE"  # S1-S4: schedule is unusable
    QUALITY = "QUALITY"  # Q1: rotation should avoid it
    WARNING = "WARNING"  # Q2-Q4: worth a look


@dataclass
class CriterionResult:
    """Result of checking a single criterion."""

    criterion: str
    status: CriterionStatus
    violation_type: Optional[ViolationType] = None
    description: str = ""
    details: Dict[str, object] = field(default_factory=dict)

    @property
    def criterion_id(self) -> str:
        return self.criterion.split(":")[0].strip()

    @property
    def is_violation(self) -> bool:
        return self.status is CriterionStatus.VIOLATION


@dataclass
class ScheduleReport:
    """Complete report for one schedule.

    ``partner_counts`` and ``opponent_counts`` map each unordered pair of
    players to how often they shared a team or faced each other.
    """

    total_criteria: int
    compliant_count: int
    violations: List[CriterionResult]
    overall_status: CriterionStatus
    summary: str
    quality_warnings: List[CriterionResult] = field(default_factory=list)
    partner_counts: Dict[PairKey, int] = field(default_factory=dict)
    opponent_counts: Dict[PairKey, int] = field(default_factory=dict)
    matches_per_player: Dict[PlayerId, int] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return self.overall_status is not CriterionStatus.VIOLATION

    @property
    def is_valid(self) -> bool:
        return bool(self)

    @property
    def compliance_percentage(self) -> float:
        if self.total_criteria == 0:
            return 100.0
        return (self.compliant_count / self.total_criteria) * 100.0

    @property
    def distinct_partnerships(self) -> int:
        return len(self.partner_counts)

    def to_dict(self) -> Dict[str, object]:
        """Serialize the report, pair keys become "a/b" strings."""
        return {
            "valid": self.is_valid,
            "summary": self.summary,
            "total_criteria": self.total_criteria,
            "compliant_count": self.compliant_count,
            "violations": [_result_to_dict(v) for v in self.violations],
            "quality_warnings": [_result_to_dict(w) for w in self.quality_warnings],
            "partner_counts": _pair_counts_to_dict(self.partner_counts),
            "opponent_counts": _pair_counts_to_dict(self.opponent_counts),
            "matches_per_player": dict(self.matches_per_player),
        }


def _result_to_dict(result: CriterionResult) -> Dict[str, object]:
    return {
        "criterion": result.criterion,
        "status": result.status.value,
        "type": result.violation_type.value if result.violation_type else None,
        "description": result.description,
        "details": result.details,
    }


def _pair_counts_to_dict(counts: Dict[PairKey, int]) -> Dict[str, int]:
    return {"/".join(sorted(pair)): n for pair, n in counts.items()}


def _pair(a: PlayerId, b: PlayerId) -> PairKey:
    return frozenset((a, b))


class StructureChecker:
    """Validates the structural criteria (S1-S4) of a single round."""

    def check_s1_match_shape(self, round_data: Round) -> CriterionResult:
        """S1: Four distinct players per match, two per team."""
        for match in round_data.matches:
            teams = (match.team1, match.team2)
            if any(len(team) != PLAYERS_PER_TEAM for team in teams):
                return CriterionResult(
                    criterion="S1",
                    status=CriterionStatus.VIOLATION,
                    violation_type=ViolationType.ABSOLUTE,
                    description=f"Game {match.game_number}: teams must have two players",
                    details={"game_number": match.game_number},
                )
            if len(set(match.players)) != PLAYERS_PER_MATCH:
                return CriterionResult(
                    criterion="S1",
                    status=CriterionStatus.VIOLATION,
                    violation_type=ViolationType.ABSOLUTE,
                    description=(
                        f"Game {match.game_number}: a player appears twice "
                        f"({', '.join(match.players)})"
                    ),
                    details={"game_number": match.game_number},
                )
        return CriterionResult(
            criterion="S1",
            status=CriterionStatus.COMPLIANT,
            description="All matches have four distinct players",
        )

    def check_s2_no_double_booking(self, round_data: Round) -> CriterionResult:
        """S2: No player in more than one match of the same round."""
        seen = Counter(_round_players(round_data))
        doubled = sorted(p for p, n in seen.items() if n > 1)
        if doubled:
            return CriterionResult(
                criterion="S2",
                status=CriterionStatus.VIOLATION,
                violation_type=ViolationType.ABSOLUTE,
                description=f"Players booked twice: {', '.join(doubled)}",
                details={"players": doubled},
            )
        return CriterionResult(
            criterion="S2",
            status=CriterionStatus.COMPLIANT,
            description="No double bookings",
        )

    def check_s3_courts(
        self, round_data: Round, courts: Optional[int]
    ) -> CriterionResult:
        """S3: Court numbers unique and within the available courts."""
        numbers = [m.court for m in round_data.matches]
        if len(numbers) != len(set(numbers)):
            return CriterionResult(
                criterion="S3",
                status=CriterionStatus.VIOLATION,
                violation_type=ViolationType.ABSOLUTE,
                description="Court used by more than one match",
                details={"courts": numbers},
            )
        bad = [c for c in numbers if c < 1 or (courts is not None and c > courts)]
        if bad:
            return CriterionResult(
                criterion="S3",
                status=CriterionStatus.VIOLATION,
                violation_type=ViolationType.ABSOLUTE,
                description=f"Court numbers out of range: {bad}",
                details={"courts": bad},
            )
        return CriterionResult(
            criterion="S3",
            status=CriterionStatus.COMPLIANT,
            description="Court assignment valid",
        )

    def check_s4_game_numbers(
        self, round_data: Round, previous_game: int
    ) -> CriterionResult:
        """S4: Game numbers strictly increase through the schedule."""
        last = previous_game
        for match in round_data.matches:
            if match.game_number <= last:
                return CriterionResult(
                    criterion="S4",
                    status=CriterionStatus.VIOLATION,
                    violation_type=ViolationType.ABSOLUTE,
                    description=(
                        f"Game number {match.game_number} does not follow {last}"
                    ),
                    details={"game_number": match.game_number},
                )
            last = match.game_number
        return CriterionResult(
            criterion="S4",
            status=CriterionStatus.COMPLIANT,
            description="Game numbers increasing",
        )


class ScheduleValidator:
    """Main schedule validator.

    Structural criteria are checked per round. Rotation quality is checked
    once over the whole schedule:

    - Q1: repeated partnerships (violation, quality type)
    - Q2: repeated opponents (warning)
    - Q3: players sitting out a round (warning)
    - Q4: match counts differ by more than one between players (warning)
    """

    def __init__(self, courts: Optional[int] = None):
        self.courts = courts
        self.structure_checker = StructureChecker()

    def validate(
        self, rounds: Sequence[Round], players: Optional[Sequence[PlayerId]] = None
    ) -> ScheduleReport:
        """Validate a whole schedule.

        Args:
            rounds: The schedule to check
            players: Entry list. Defaults to every player seen in the rounds

        Returns:
            ScheduleReport, falsy when any violation was found
        """
        if not rounds:
            return ScheduleReport(
                total_criteria=0,
                compliant_count=0,
                violations=[],
                overall_status=CriterionStatus.NOT_APPLICABLE,
                summary="No rounds to validate",
            )

        logger.debug(f"Validating schedule with {len(rounds)} rounds")

        total_criteria = 0
        compliant_count = 0
        violations: List[CriterionResult] = []
        quality_warnings: List[CriterionResult] = []
        previous_game = 0

        for round_data in rounds:
            results = [
                self.structure_checker.check_s1_match_shape(round_data),
                self.structure_checker.check_s2_no_double_booking(round_data),
                self.structure_checker.check_s3_courts(round_data, self.courts),
                self.structure_checker.check_s4_game_numbers(round_data, previous_game),
            ]
            for result in results:
                total_criteria += 1
                if result.is_violation:
                    result.details["round"] = round_data.round
                    violations.append(result)
                else:
                    compliant_count += 1
            if round_data.matches:
                previous_game = max(previous_game, round_data.matches[-1].game_number)

        partner_counts, opponent_counts = self.count_pairs(rounds)
        matches_per_player: Counter = Counter(
            p for round_data in rounds for p in _round_players(round_data)
        )
        entry_list = list(players) if players is not None else list(matches_per_player)
        for player in entry_list:
            matches_per_player.setdefault(player, 0)

        for result in (
            self.check_q1_partner_repeats(partner_counts),
            self.check_q2_opponent_repeats(opponent_counts),
            self.check_q3_sitting_out(rounds, entry_list),
            self.check_q4_balance(matches_per_player),
        ):
            total_criteria += 1
            if not result.is_violation:
                compliant_count += 1
            elif result.violation_type is ViolationType.WARNING:
                quality_warnings.append(result)
            else:
                violations.append(result)

        overall_status = (
            CriterionStatus.VIOLATION if violations else CriterionStatus.COMPLIANT
        )
        if violations or quality_warnings:
            ids = [r.criterion_id for r in violations + quality_warnings]
            summary = (
                f"Schedule validation complete - {len(violations)} violations, "
                f"{len(quality_warnings)} warnings ({' '.join(ids)})"
            )
        else:
            summary = "Schedule validation complete"

        if violations:
            logger.warning(summary)
        else:
            logger.debug(summary)

        return ScheduleReport(
            total_criteria=total_criteria,
            compliant_count=compliant_count,
            violations=violations,
            quality_warnings=quality_warnings,
            overall_status=overall_status,
            summary=summary,
            partner_counts=partner_counts,
            opponent_counts=opponent_counts,
            matches_per_player=dict(matches_per_player),
        )

    @staticmethod
    def count_pairs(rounds: Sequence[Round]):
        """Count how often each pair partnered and faced each other."""
        partner_counts: Counter = Counter()
        opponent_counts: Counter = Counter()
        for round_data in rounds:
            for match in round_data.matches:
                _count_match(match, partner_counts, opponent_counts)
        return dict(partner_counts), dict(opponent_counts)

    def check_q1_partner_repeats(
        self, partner_counts: Dict[PairKey, int]
    ) -> CriterionResult:
        """Q1: Nobody partners the same player twice."""
        repeats = sorted(
            "/".join(sorted(pair)) for pair, n in partner_counts.items() if n > 1
        )
        if repeats:
            return CriterionResult(
                criterion="Q1",
                status=CriterionStatus.VIOLATION,
                violation_type=ViolationType.QUALITY,
                description=f"Partnership repeated: {', '.join(repeats)}",
                details={"pairs": repeats},
            )
        return CriterionResult(
            criterion="Q1",
            status=CriterionStatus.COMPLIANT,
            description="No repeated partnerships",
        )

    def check_q2_opponent_repeats(
        self, opponent_counts: Dict[PairKey, int]
    ) -> CriterionResult:
        """Q2: Opponents repeat as rarely as possible."""
        repeats = sorted(
            "/".join(sorted(pair)) for pair, n in opponent_counts.items() if n > 1
        )
        if repeats:
            return CriterionResult(
                criterion="Q2",
                status=CriterionStatus.VIOLATION,
                violation_type=ViolationType.WARNING,
                description=f"{len(repeats)} opponent pairs meet more than once",
                details={"pairs": repeats},
            )
        return CriterionResult(
            criterion="Q2",
            status=CriterionStatus.COMPLIANT,
            description="No repeated opponents",
        )

    def check_q3_sitting_out(
        self, rounds: Sequence[Round], players: Sequence[PlayerId]
    ) -> CriterionResult:
        """Q3: Every player is on court every round."""
        idle: Dict[int, List[PlayerId]] = {}
        for round_data in rounds:
            on_court = set(_round_players(round_data))
            missing = [p for p in players if p not in on_court]
            if missing:
                idle[round_data.round] = missing
        if idle:
            return CriterionResult(
                criterion="Q3",
                status=CriterionStatus.VIOLATION,
                violation_type=ViolationType.WARNING,
                description=f"Players sit out in rounds {sorted(idle)}",
                details={"sitting_out": idle},
            )
        return CriterionResult(
            criterion="Q3",
            status=CriterionStatus.COMPLIANT,
            description="All players play every round",
        )

    def check_q4_balance(self, matches_per_player: Dict[PlayerId, int]) -> CriterionResult:
        """Q4: Match counts differ by at most one between players."""
        if not matches_per_player:
            return CriterionResult(
                criterion="Q4",
                status=CriterionStatus.NOT_APPLICABLE,
                description="No players",
            )
        most = max(matches_per_player.values())
        least = min(matches_per_player.values())
        if most - least > 1:
            return CriterionResult(
                criterion="Q4",
                status=CriterionStatus.VIOLATION,
                violation_type=ViolationType.WARNING,
                description=f"Unbalanced match counts: {least} to {most} per player",
                details={"min": least, "max": most},
            )
        return CriterionResult(
            criterion="Q4",
            status=CriterionStatus.COMPLIANT,
            description="Match counts balanced",
        )


def _round_players(round_data: Round) -> List[PlayerId]:
    return [p for m in round_data.matches for p in (*m.team1, *m.team2)]


def _count_match(match: Match, partner_counts: Counter, opponent_counts: Counter) -> None:
    for team in (match.team1, match.team2):
        if len(team) == 2 and team[0] != team[1]:
            partner_counts[_pair(team[0], team[1])] += 1
    for a in match.team1:
        for b in match.team2:
            if a != b:
                opponent_counts[_pair(a, b)] += 1


def create_schedule_validator(courts: Optional[int] = None) -> ScheduleValidator:
    """Create and configure a schedule validator instance."""
    return ScheduleValidator(courts=courts)


def validate_schedule(
    rounds: Sequence[Round], courts: Optional[int] = None, **kwargs
) -> ScheduleReport:
    """Quick validation function for a schedule."""
    return create_schedule_validator(courts).validate(rounds, **kwargs)
