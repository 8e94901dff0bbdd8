import json

import pytest

from americanopairing.models.enums import ScoringMode
from americanopairing.testing import ResultPattern, SimulatorConfig, TournamentSimulator


def _run(**kwargs):
    config = SimulatorConfig(**kwargs)
    simulator = TournamentSimulator(config)
    return simulator, simulator.run()


def test_simulation_completes_every_match():
    _, data = _run(num_players=8, courts=2, seed=11)

    matches = [m for r in data["rounds"] for m in r.matches]
    assert len(matches) == 14
    assert all(m.is_completed for m in matches)
    assert all(m.score.total_points == 16 for m in matches)

    leaderboard = data["leaderboard"]
    assert leaderboard.is_complete
    assert len(leaderboard.players) == 8
    # every match hands out 16 points to each of two players per team
    assert sum(s.total_points for s in leaderboard.players) == 14 * 32
    assert data["progress"].progress_percentage == 100.0
    assert data["schedule_report"].is_valid


def test_same_seed_same_event():
    first_sim, first = _run(num_players=12, courts=3, seed=5)
    second_sim, second = _run(num_players=12, courts=3, seed=5)
    assert first_sim.export_json_format(first) == second_sim.export_json_format(second)


@pytest.mark.parametrize("pattern", list(ResultPattern))
def test_result_patterns_produce_valid_scores(pattern):
    _, data = _run(num_players=8, courts=1, seed=3, result_pattern=pattern, points_per_match=21)
    for round_data in data["rounds"]:
        for match in round_data.matches:
            assert match.score.team1_score + match.score.team2_score == 21


def test_set_play_simulation():
    _, data = _run(num_players=8, courts=2, seed=9, scoring_mode="set_points")
    for round_data in data["rounds"]:
        for match in round_data.matches:
            score = match.score
            assert score.has_sets
            assert max(score.team1_score, score.team2_score) == 2
            assert 2 <= len(score.sets) <= 3

    leaderboard = data["leaderboard"]
    assert leaderboard.scoring_mode is ScoringMode.SET_POINTS
    for stats in leaderboard.players:
        assert stats.total_points == stats.matches_won * 3 + stats.sets_won


def test_export_json_format():
    simulator, data = _run(num_players=4, courts=1, seed=1)
    exported = json.loads(simulator.export_json_format(data))
    assert exported["tournament_config"]["seed"] == 1
    assert len(exported["rounds"]) == 1
    assert exported["leaderboard"]["is_complete"] is True
    assert exported["schedule_report"]["valid"] is True
