import json

import pytest

from swisspairing.exceptions import FileLoadException
from swisspairing.models.tournament_config import TournamentConfig
from swisspairing.player.base_player import Player
from swisspairing.tournament.generator import generate
from swisspairing.utils.serialization import (
    TournamentFile,
    load_config,
    load_roster,
    load_tournament,
    save_tournament,
)


def _roster():
    return [Player(id=f"p{n}", name=f"Player {n}", country="Canada") for n in range(1, 7)]


def test_tournament_round_trip(tmp_path):
    roster = _roster()
    config = TournamentConfig(name="Round Trip", num_rounds=3, resolved_through=2, seed=4)
    pairings = generate(roster, 3, resolved_round_cutoff=2, seed=4)
    path = tmp_path / "nested" / "event.json"

    save_tournament(TournamentFile(config=config, players=roster, pairings=pairings), path)
    loaded = load_tournament(path)

    assert loaded.config == config
    assert [p.to_dict() for p in loaded.players] == [p.to_dict() for p in roster]
    assert loaded.pairings == pairings


def test_saved_file_layout(tmp_path):
    pairings = generate(_roster(), 1, seed=1)
    path = save_tournament(TournamentFile(players=_roster(), pairings=pairings), tmp_path / "e.json")

    data = json.loads(path.read_text(encoding="utf-8"))

    assert set(data) == {"config", "players", "pairings"}
    first = data["pairings"][0]
    assert set(first) == {"round", "table", "player1", "player2", "result"}
    assert set(first["result"]) == {"winnerId", "score"}


def test_missing_file(tmp_path):
    with pytest.raises(FileLoadException):
        load_tournament(tmp_path / "absent.json")


def test_malformed_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(FileLoadException):
        load_tournament(path)


def test_invalid_tournament_content(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"pairings": [{"round": 1}]}), encoding="utf-8")

    with pytest.raises(FileLoadException):
        load_tournament(path)


def test_load_roster_accepts_list_or_object(tmp_path):
    entries = [{"id": "manraj-sidhu", "name": "Manraj Sidhu"}, {"id": "david-kim", "name": "David Kim"}]
    as_list = tmp_path / "list.json"
    as_object = tmp_path / "object.json"
    as_list.write_text(json.dumps(entries), encoding="utf-8")
    as_object.write_text(json.dumps({"players": entries}), encoding="utf-8")

    assert [p.id for p in load_roster(as_list)] == ["manraj-sidhu", "david-kim"]
    assert [p.id for p in load_roster(as_object)] == ["manraj-sidhu", "david-kim"]


def test_load_roster_rejects_bad_entries(tmp_path):
    duplicate = tmp_path / "dup.json"
    duplicate.write_text(json.dumps([{"id": "p1", "name": "A"}, {"id": "p1", "name": "B"}]))
    not_a_list = tmp_path / "scalar.json"
    not_a_list.write_text(json.dumps({"players": 3}))

    with pytest.raises(FileLoadException):
        load_roster(duplicate)
    with pytest.raises(FileLoadException):
        load_roster(not_a_list)


def test_load_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"name": "Cup", "num_rounds": 5}), encoding="utf-8")

    assert load_config(path) == TournamentConfig(name="Cup", num_rounds=5)

    path.write_text(json.dumps({"num_rounds": "five"}), encoding="utf-8")
    with pytest.raises(FileLoadException):
        load_config(path)


def test_save_adds_json_suffix(tmp_path):
    path = save_tournament(TournamentFile(), tmp_path / "untitled")

    assert path.name == "untitled.json"
    assert load_tournament(path).pairings == []
