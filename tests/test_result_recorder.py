import pytest

from americanopairing.controllers.tournament import ResultRecorder
from americanopairing.exceptions import (
    DuplicateResultException,
    InvalidScoreException,
    MatchNotFoundException,
)
from americanopairing.models.tournament import SetScore
from americanopairing.pairing import generate_schedule


@pytest.fixture
def rounds():
    return generate_schedule(["Ana", "Ben", "Cleo", "Dev", "Eli", "Fay", "Gus", "Hal"], 2)


def test_record_score_completes_match(rounds):
    recorder = ResultRecorder()
    match = rounds[0].matches[0]

    returned = recorder.record_score(match, 11, 5)

    assert returned is match
    assert match.status == "completed"
    assert match.is_completed
    assert match.score.team1_score == 11
    assert match.score.team2_score == 5
    assert match.score.sets == []


def test_invalid_score_leaves_match_pending(rounds):
    recorder = ResultRecorder()
    match = rounds[0].matches[0]

    with pytest.raises(InvalidScoreException) as exc_info:
        recorder.record_score(match, 8, 6)

    assert exc_info.value.errors == ["Total points must equal 16 (currently 14)"]
    assert match.status == "pending"
    assert match.score is None


def test_score_cannot_be_recorded_twice(rounds):
    recorder = ResultRecorder()
    match = rounds[0].matches[0]
    recorder.record_score(match, 10, 6)

    with pytest.raises(DuplicateResultException):
        recorder.record_score(match, 6, 10)
    assert match.score.team1_score == 10


def test_points_per_match_setting(rounds):
    recorder = ResultRecorder(points_per_match=24)
    with pytest.raises(InvalidScoreException):
        recorder.record_score(rounds[0].matches[0], 10, 6)
    recorder.record_score(rounds[0].matches[0], 14, 10)


def test_record_with_sets(rounds):
    recorder = ResultRecorder()
    match = rounds[0].matches[1]
    sets = [SetScore(6, 4), SetScore(3, 6), SetScore(7, 5)]

    recorder.record_score(match, 2, 1, sets)

    assert match.score.has_sets
    assert match.score.to_dict()["sets"][2] == {"team1": 7, "team2": 5}


def test_record_game_by_number(rounds):
    recorder = ResultRecorder()
    match = recorder.record_game(rounds, 4, 9, 7)
    assert match.round == 2
    assert match.court == 2
    assert match.is_completed

    with pytest.raises(MatchNotFoundException):
        recorder.find_match(rounds, 99)


def test_record_round_results_skips_bad_entries(rounds):
    recorder = ResultRecorder()
    round_data = rounds[0]

    ok = recorder.record_round_results(round_data, [(1, 10, 6), (2, 9, 9), (3, 8, 8)])

    assert ok is False
    assert round_data.matches[0].is_completed
    assert not round_data.matches[1].is_completed

    assert recorder.record_round_results(round_data, [(2, 16, 0)]) is True
    assert round_data.is_completed
