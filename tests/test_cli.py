import json

import pytest

from americanopairing.exceptions import FileLoadException
from americanopairing.testing.__main__ import (
    COMMANDS,
    create_completer,
    load_schedule_file,
    main,
)


def test_completer_accepts_both_command_forms():
    options = create_completer().options
    for command in COMMANDS:
        assert command in options
        assert f"/{command}" in options
    assert "/list" in options


def test_cli_help(capsys):
    assert main(["help", "simulate"]) == 0
    out = capsys.readouterr().out
    assert "Command: simulate" in out
    assert "--scoring" in out


def test_cli_generate_and_validate(tmp_path, capsys):
    output = tmp_path / "schedule.json"
    assert main(["generate", "--players", "8", "--courts", "2", "--output", str(output)]) == 0

    rounds, players, courts = load_schedule_file(output)
    assert len(rounds) == 7
    assert courts == 2
    assert len(players) == 8

    assert main(["validate", "--file", str(output), "--detailed"]) == 0
    captured = capsys.readouterr()
    assert "Distinct partnerships: 28" in captured.out


def test_cli_simulate_output_can_be_validated(tmp_path):
    output = tmp_path / "event.json"
    report = tmp_path / "report.json"
    assert main(["simulate", "--players", "8", "--courts", "1", "--seed", "2", "--output", str(output)]) == 0
    assert main(["validate", "--file", str(output), "--export", str(report)]) == 0
    assert json.loads(report.read_text(encoding="utf-8"))["valid"] is True


def test_cli_rejects_bad_configuration(capsys):
    assert main(["generate", "--players", "6", "--courts", "1"]) == 1
    assert "multiple of 4" in capsys.readouterr().out


def test_load_schedule_file_errors(tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(FileLoadException):
        load_schedule_file(broken)

    empty = tmp_path / "empty.json"
    empty.write_text("{}", encoding="utf-8")
    with pytest.raises(FileLoadException):
        load_schedule_file(empty)


@pytest.mark.parametrize(
    "payload",
    [
        {
            "rounds": [
                {
                    "round": 1,
                    "matches": [
                        {
                            "court": "1",
                            "team1": ["A", "B"],
                            "team2": ["C", "D"],
                            "round": 1,
                            "game_number": 1,
                        }
                    ],
                }
            ]
        },
        {"rounds": [{"round": True, "matches": []}]},
        {"rounds": [], "tournament_config": ["courts", 2]},
        {"rounds": [], "courts": "2"},
    ],
)
def test_load_schedule_file_rejects_wrong_field_types(tmp_path, payload):
    path = tmp_path / "schedule.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(FileLoadException):
        load_schedule_file(path)
