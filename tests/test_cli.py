import json

import pytest

from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document

from swisspairing.cli import create_completer, create_main_parser, main
from swisspairing.pairing.queries import find_pairing
from swisspairing.utils.serialization import load_tournament


def _side(player_id):
    return {"id": player_id, "name": player_id, "record": "0-0"}


@pytest.fixture
def event_file(tmp_path):
    path = tmp_path / "event.json"
    exit_code = main(
        ["generate", "--players", "20", "--rounds", "3", "--seed", "1", "--output", str(path)]
    )
    assert exit_code == 0
    return path


def test_generate_writes_tournament(event_file, capsys):
    tournament = load_tournament(event_file)

    assert len(tournament.players) == 20
    assert len(tournament.pairings) == 30
    assert tournament.config.seed == 1
    assert all(p.is_resolved for p in tournament.pairings)


def test_generate_with_pending_rounds_and_validation(tmp_path, capsys):
    path = tmp_path / "pending.json"

    exit_code = main(
        [
            "generate",
            "--players", "12",
            "--rounds", "4",
            "--seed", "3",
            "--resolved-through", "3",
            "--output", str(path),
            "--validate",
        ]
    )

    assert exit_code == 0
    assert "All pairings are valid!" in capsys.readouterr().out
    pending = [p for p in load_tournament(path).pairings if not p.is_resolved]
    assert {p.round for p in pending} == {4}


def test_generate_from_roster_and_config(tmp_path, capsys):
    roster = tmp_path / "roster.json"
    roster.write_text(
        json.dumps([{"id": f"player-{n}", "name": f"Player {n}"} for n in range(8)]),
        encoding="utf-8",
    )
    config = tmp_path / "config.json"
    config.write_text(
        json.dumps(
            {
                "name": "Pinned Cup",
                "num_rounds": 2,
                "seed": 9,
                "pinned_pairings": [
                    {"round": 2, "table": 4, "player1": "player-0", "player2": "player-7"}
                ],
            }
        ),
        encoding="utf-8",
    )
    output = tmp_path / "out.json"

    exit_code = main(
        ["generate", "--roster", str(roster), "--config", str(config), "--output", str(output)]
    )

    assert exit_code == 0
    tournament = load_tournament(output)
    assert tournament.config.name == "Pinned Cup"
    assert find_pairing(tournament.pairings, "player-0", "player-7", 2).table == 4


def test_generate_odd_roster_fails(capsys):
    assert main(["generate", "--players", "7", "--rounds", "2"]) == 1
    assert "odd-sized roster" in capsys.readouterr().out


def test_validate_clean_file(event_file, capsys):
    assert main(["validate", "--file", str(event_file)]) == 0
    assert "All pairings are valid!" in capsys.readouterr().out


def test_validate_corrupted_file(tmp_path, capsys):
    path = tmp_path / "corrupt.json"
    path.write_text(
        json.dumps(
            {
                "pairings": [
                    {"round": 1, "table": 1, "player1": _side("p1"), "player2": _side("p2")},
                    {"round": 1, "table": 2, "player1": _side("p1"), "player2": _side("p3")},
                ]
            }
        ),
        encoding="utf-8",
    )
    export = tmp_path / "report.json"

    exit_code = main(
        ["validate", "--file", str(path), "--players", "4", "--export", str(export)]
    )

    assert exit_code == 1
    assert "Duplicate players: p1 appears 2 times" in capsys.readouterr().out
    assert json.loads(export.read_text(encoding="utf-8"))["isValid"] is False


def test_validate_missing_file(tmp_path, capsys):
    assert main(["validate", "--file", str(tmp_path / "nope.json")]) == 1
    assert "File not found" in capsys.readouterr().out


def test_force_pairing_command(event_file, tmp_path, capsys):
    output = tmp_path / "forced.json"

    exit_code = main(
        [
            "force-pairing",
            "--file", str(event_file),
            "--round", "2",
            "--table", "3",
            "--player1", "p1",
            "--player2", "p2",
            "--output", str(output),
        ]
    )

    assert exit_code == 0
    assert "Forced pairing: R2 T3" in capsys.readouterr().out
    forced = load_tournament(output)
    assert find_pairing(forced.pairings, "p1", "p2", 2).table == 3
    assert main(["validate", "--file", str(output)]) == 0


def test_force_pairing_unknown_player(event_file, capsys):
    exit_code = main(
        [
            "force-pairing",
            "--file", str(event_file),
            "--round", "1",
            "--table", "1",
            "--player1", "p1",
            "--player2", "ghost",
        ]
    )

    assert exit_code == 1
    assert "ghost" in capsys.readouterr().out


def test_find_pairing_command(event_file, capsys):
    tournament = load_tournament(event_file)
    first = tournament.pairings[0]
    player1, player2 = first.player_ids

    assert main(["find-pairing", "--file", str(event_file), "--player1", player2, "--player2", player1]) == 0
    assert f"R1 T{first.table}" in capsys.readouterr().out
    assert main(["find-pairing", "--file", str(event_file), "--player1", "p1", "--player2", "ghost"]) == 1


def test_pairings_for_player_command(event_file, capsys):
    assert main(["pairings-for-player", "--file", str(event_file), "--player", "p5"]) == 0
    out = capsys.readouterr().out
    assert "R1 " in out and "R2 " in out and "R3 " in out

    assert main(["pairings-for-player", "--file", str(event_file), "--player", "ghost"]) == 1


@pytest.mark.parametrize(
    "argv",
    [
        ["generate"],
        ["validate", "--file", "event.json"],
        ["force-pairing", "--file", "event.json", "--round", "3", "--table", "12",
         "--player1", "manraj-sidhu", "--player2", "david-kim"],
        ["find-pairing", "--file", "event.json", "--player1", "a", "--player2", "b"],
        ["pairings-for-player", "--file", "event.json", "--player", "a"],
    ],
)
def test_main_parser_knows_every_command(argv):
    args = create_main_parser().parse_args(argv)

    assert args.command == argv[0]
    assert callable(args.func)


def test_validate_export_failure_returns_error(event_file, tmp_path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    exit_code = main(
        ["validate", "--file", str(event_file), "--export", str(blocker / "report.json")]
    )

    assert exit_code == 1
    assert "Could not write" in capsys.readouterr().out


def _completions(text):
    completer = create_completer()
    return {c.text for c in completer.get_completions(Document(text), CompleteEvent())}


def test_completer_offers_commands_and_options():
    commands = _completions("")
    assert {"generate", "/generate", "force-pairing", "/help"} <= commands
    assert "/list" not in commands
    assert "force-pairing" in _completions("for")
    assert "--export" in _completions("validate ")
