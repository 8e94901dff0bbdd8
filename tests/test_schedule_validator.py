from americanopairing.models.tournament import Match, Round
from americanopairing.pairing import generate_schedule
from americanopairing.validation.schedule import (
    CriterionStatus,
    ViolationType,
    create_schedule_validator,
    validate_schedule,
)

PLAYERS = ["A", "B", "C", "D", "E", "F", "G", "H"]


def _match(team1, team2, round_number, court, courts=2):
    return Match(
        court=court,
        team1=team1,
        team2=team2,
        round=round_number,
        game_number=(round_number - 1) * courts + court,
    )


def _criteria(results):
    return {r.criterion_id for r in results}


def test_full_rotation_is_valid():
    rounds = generate_schedule(PLAYERS, 2)
    report = create_schedule_validator(courts=2).validate(rounds, PLAYERS)

    assert report
    assert report.overall_status is CriterionStatus.COMPLIANT
    assert report.violations == []
    assert report.distinct_partnerships == 28
    assert all(n == 1 for n in report.partner_counts.values())
    assert all(n == 7 for n in report.matches_per_player.values())
    # seven rounds against seven possible opponents means opponents repeat
    assert _criteria(report.quality_warnings) == {"Q2"}


def test_sitting_out_is_a_warning():
    rounds = generate_schedule(PLAYERS, 1)
    report = validate_schedule(rounds, courts=1, players=PLAYERS)

    assert report.is_valid
    assert "Q3" in _criteria(report.quality_warnings)
    sitting_out = next(w for w in report.quality_warnings if w.criterion_id == "Q3")
    assert sitting_out.violation_type is ViolationType.WARNING
    assert set(sitting_out.details["sitting_out"][1]) == {"E", "F", "G", "H"}


def test_double_booking_detected():
    rounds = [
        Round(
            1,
            [
                _match(("A", "B"), ("C", "D"), 1, 1),
                _match(("A", "E"), ("F", "G"), 1, 2),
            ],
        )
    ]
    report = validate_schedule(rounds, courts=2)

    assert not report
    assert report.overall_status is CriterionStatus.VIOLATION
    violation = next(v for v in report.violations if v.criterion_id == "S2")
    assert violation.details["players"] == ["A"]
    assert violation.details["round"] == 1


def test_repeated_partnership_is_a_violation():
    rounds = [
        Round(1, [_match(("A", "B"), ("C", "D"), 1, 1, courts=1)]),
        Round(2, [_match(("B", "A"), ("D", "C"), 2, 1, courts=1)]),
    ]
    report = validate_schedule(rounds, courts=1)

    assert not report.is_valid
    repeat = next(v for v in report.violations if v.criterion_id == "Q1")
    assert repeat.violation_type is ViolationType.QUALITY
    assert repeat.details["pairs"] == ["A/B", "C/D"]
    assert report.partner_counts[frozenset(("A", "B"))] == 2


def test_structural_problems():
    rounds = [
        Round(
            1,
            [
                _match(("A", "A"), ("C", "D"), 1, 1),
                _match(("E", "F"), ("G", "H"), 1, 3),
            ],
        ),
        Round(2, [_match(("A", "C"), ("E", "G"), 2, 1, courts=0)]),
    ]
    report = validate_schedule(rounds, courts=2)

    assert {"S1", "S3", "S4"} <= _criteria(report.violations)


def test_unbalanced_match_counts_warn():
    rounds = [
        Round(1, [_match(("A", "B"), ("C", "D"), 1, 1, courts=1)]),
        Round(2, [_match(("A", "C"), ("B", "D"), 2, 1, courts=1)]),
    ]
    report = validate_schedule(rounds, courts=1, players=["A", "B", "C", "D", "E"])
    assert {"Q3", "Q4"} <= _criteria(report.quality_warnings)


def test_empty_schedule_not_applicable():
    report = validate_schedule([])
    assert report.overall_status is CriterionStatus.NOT_APPLICABLE
    assert report.compliance_percentage == 100.0


def test_report_to_dict():
    rounds = generate_schedule(["A", "B", "C", "D"], 1)
    data = validate_schedule(rounds).to_dict()
    assert data["valid"] is True
    assert data["partner_counts"] == {"A/B": 1, "C/D": 1}
    assert data["matches_per_player"] == {"A": 1, "B": 1, "C": 1, "D": 1}
