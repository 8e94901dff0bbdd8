import itertools
import logging
import json
import math

import pytest

from americanopairing.exceptions import (
    ConfigurationException,
    DuplicatePlayerException,
    InvalidConfigurationException,
    PoolSizeExceededException,
)
from americanopairing.models.tournament import DiversityLedger, TournamentConfig
from americanopairing.pairing import (
    RoundBuilder,
    generate_schedule,
    generate_schedule_from_config,
    rounds_for_players,
)
from americanopairing.pairing.americano import game_number_for, rotate_left
from americanopairing.pairing.templates import find_template


def _players(count):
    return [f"P{i}" for i in range(1, count + 1)]


def _partnerships(rounds):
    pairs = []
    for round_data in rounds:
        for match in round_data.matches:
            pairs.append(frozenset(match.team1))
            pairs.append(frozenset(match.team2))
    return pairs


@pytest.mark.parametrize(
    "count, expected",
    [(4, 1), (8, 3), (12, 4), (16, 5), (20, 5), (24, 6), (28, 7)],
)
def test_round_count_policy(count, expected):
    assert rounds_for_players(count) == expected
    assert rounds_for_players(count) == {4: 1, 8: 3, 12: 4, 16: 5}.get(
        count, math.ceil(count / 4)
    )


def test_round_count_table_is_overridable():
    assert rounds_for_players(8, {8: 7}) == 7
    assert rounds_for_players(12, {8: 7}) == 3


@pytest.mark.parametrize(
    "count, courts",
    [(4, 1), (8, 1), (8, 2), (12, 1), (12, 3), (16, 2), (16, 4), (20, 5), (24, 3)],
)
def test_schedule_shape(count, courts):
    players = _players(count)
    rounds = generate_schedule(players, courts, use_templates=False)

    assert len(rounds) == rounds_for_players(count)
    for number, round_data in enumerate(rounds, start=1):
        assert round_data.round == number
        assert 1 <= len(round_data.matches) <= courts
        on_court = round_data.players
        assert len(on_court) == len(set(on_court))
        for match in round_data.matches:
            assert len(set(match.players)) == 4
            assert set(match.team1).isdisjoint(match.team2)
            assert set(match.players) <= set(players)
            assert match.game_number == (number - 1) * courts + match.court
            assert match.status == "pending"
            assert match.score is None


def test_four_players_one_court():
    rounds = generate_schedule(["A", "B", "C", "D"], 1)
    assert len(rounds) == 1
    match = rounds[0].matches[0]
    assert match.team1 == ("A", "B")
    assert match.team2 == ("C", "D")
    assert match.court == 1
    assert match.game_number == 1


def test_rotation_moves_search_start():
    rounds = generate_schedule(_players(8), 1)
    assert len(rounds) == 3
    first, second = rounds[0].matches[0], rounds[1].matches[0]
    assert (first.team1, first.team2) == (("P1", "P2"), ("P3", "P4"))
    # P1 rotated to the back, P2/P3 are fresh partners facing fresh opponents
    assert (second.team1, second.team2) == (("P2", "P3"), ("P5", "P6"))


def test_eight_players_two_courts_full_rotation():
    players = ["Ana", "Ben", "Cleo", "Dev", "Eli", "Fay", "Gus", "Hal"]
    rounds = generate_schedule(players, 2)

    assert len(rounds) == 7
    matches = [m for r in rounds for m in r.matches]
    assert len(matches) == 14
    for player in players:
        assert sum(player in m.players for m in matches) == 7

    pairs = _partnerships(rounds)
    assert len(pairs) == len(set(pairs)) == 28
    assert set(pairs) == {frozenset(p) for p in itertools.combinations(players, 2)}
    assert [m.game_number for m in matches] == list(range(1, 15))


def test_eight_players_two_courts_without_template():
    rounds = generate_schedule(_players(8), 2, use_templates=False)
    assert len(rounds) == 3
    assert all(len(r.matches) == 2 for r in rounds)
    pairs = _partnerships(rounds)
    assert len(pairs) == len(set(pairs))


def test_generation_is_deterministic():
    first = generate_schedule(_players(12), 3)
    second = generate_schedule(_players(12), 3)
    assert json.dumps([r.to_dict() for r in first]) == json.dumps(
        [r.to_dict() for r in second]
    )


def test_template_lookup():
    assert find_template(8, 2) is not None
    assert find_template(8, 1) is None
    assert find_template(12, 3) is None


@pytest.mark.parametrize(
    "players, courts, error",
    [
        (["A", "B", "C"], 1, InvalidConfigurationException),
        (_players(6), 1, InvalidConfigurationException),
        (_players(8), 3, InvalidConfigurationException),
        (_players(8), 0, InvalidConfigurationException),
        (["A", "B", "C", "a"], 1, DuplicatePlayerException),
        (_players(36), 2, PoolSizeExceededException),
    ],
)
def test_invalid_input_raises_before_generation(players, courts, error):
    with pytest.raises(error):
        generate_schedule(players, courts)
    assert issubclass(error, ConfigurationException)


def test_custom_pool_ceiling():
    with pytest.raises(PoolSizeExceededException):
        generate_schedule(_players(12), 1, max_pool_size=8)


def test_generate_from_config():
    config = TournamentConfig(
        name="Sunday",
        players=_players(12),
        courts=3,
        round_counts={12: 2},
    )
    rounds = generate_schedule_from_config(config)
    assert len(rounds) == 2
    assert all(len(r.matches) == 3 for r in rounds)


def test_round_builder_leaves_gap_for_unfilled_court():
    players = ["A", "B", "C", "D"]
    ledger = DiversityLedger(players)
    builder = RoundBuilder(ledger, courts=2)

    round_data = builder.build_round(2, players)

    assert len(round_data.matches) == 1
    assert round_data.matches[0].game_number == 3
    assert ledger.has_partnered("A", "B")
    assert ledger.has_opposed("A", "C")


def test_helpers():
    assert game_number_for(1, 1, 3) == 1
    assert game_number_for(3, 2, 3) == 8

    ordering = ["A", "B", "C"]
    rotate_left(ordering)
    assert ordering == ["B", "C", "A"]


def test_player_names_are_stripped_before_scheduling():
    rounds = generate_schedule([" A", "B", "C ", "D"], 1)
    assert rounds[0].players == ["A", "B", "C", "D"]

    rounds = generate_schedule([" P1"] + _players(8)[1:], 2)
    assert "P1" in rounds[0].players
    assert " P1" not in rounds[0].players


@pytest.mark.parametrize("use_templates", [True, False])
def test_generation_is_quiet_at_info_level(caplog, use_templates):
    caplog.set_level(logging.INFO)
    generate_schedule(_players(8), 2, use_templates=use_templates)
    assert not [r for r in caplog.records if r.name.startswith("americanopairing.pairing")]
