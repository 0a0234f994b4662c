import pytest

from swisspairing.exceptions import FileSaveException
from swisspairing.models.pairing import Pairing, PairingSide
from swisspairing.player.base_player import Player
from swisspairing.tournament.generator import generate
from swisspairing.validation import format_validation_report, log_validation, save_report
from swisspairing.validation.validator import validate_pairings


def _pairing(round_number, table, player1, player2):
    return Pairing(
        round=round_number,
        table=table,
        player1=PairingSide(player1, player1, "0-0"),
        player2=PairingSide(player2, player2, "0-0"),
    )


def _clean_event():
    roster = [Player(id=f"p{n}", name=f"Player {n}") for n in range(1, 5)]
    return generate(roster, 2, seed=42)


def test_clean_event_is_valid():
    report = validate_pairings(_clean_event(), 4)

    assert report.is_valid
    assert report.expected_pairings_per_round == 2
    assert report.summary.total_rounds == 2
    assert report.summary.total_pairings == 4
    assert report.summary.total_expected_pairings == 4
    assert all(not r.issues for r in report.rounds)


def test_duplicate_player_flagged():
    pairings = [
        _pairing(1, 1, "p1", "p2"),
        _pairing(1, 2, "p1", "p3"),
        _pairing(2, 1, "p1", "p3"),
        _pairing(2, 2, "p2", "p4"),
    ]

    report = validate_pairings(pairings, 4)
    round_one = report.round_report(1)

    assert not report.is_valid
    assert not round_one.is_valid
    assert "Duplicate players: p1 appears 2 times" in round_one.issues
    assert "Expected 4 unique players, got 3" in round_one.issues
    assert report.round_report(2).is_valid


def test_self_pairing_flagged_in_its_round():
    pairings = [
        _pairing(1, 1, "p1", "p2"),
        _pairing(1, 2, "p3", "p4"),
        _pairing(2, 1, "p2", "p2"),
        _pairing(2, 2, "p3", "p4"),
    ]

    report = validate_pairings(pairings, 4)

    assert report.round_report(1).is_valid
    assert "Self-pairings found: 1" in report.round_report(2).issues
    assert [r.round for r in report.invalid_rounds] == [2]


def test_missing_pairing_flagged():
    pairings = [_pairing(1, 1, "p1", "p2")]

    report = validate_pairings(pairings, 4)

    assert report.round_report(1).issues == [
        "Expected 2 pairings, got 1",
        "Expected 4 unique players, got 2",
    ]
    assert not report.summary.overall_valid


def test_validation_is_idempotent():
    pairings = _clean_event()

    assert validate_pairings(pairings, 4) == validate_pairings(pairings, 4)
    assert validate_pairings(pairings, 6).to_dict() == validate_pairings(pairings, 6).to_dict()


def test_empty_input_never_raises():
    report = validate_pairings([], 10)

    assert report.rounds == []
    assert report.summary.total_rounds == 0
    assert report.is_valid


def test_report_dict_uses_camel_case():
    data = validate_pairings(_clean_event(), 4).to_dict()

    assert data["totalPlayers"] == 4
    assert data["expectedPairingsPerRound"] == 2
    assert data["summary"]["overallValid"] is True


def test_text_report_and_log(caplog):
    pairings = [_pairing(1, 1, "p1", "p1"), _pairing(1, 2, "p3", "p4")]
    report = validate_pairings(pairings, 4)

    text = format_validation_report(report, "Regional Open")
    log_validation(report, "Regional Open")

    assert "Validating Regional Open" in text
    assert "Pairing validation failed!" in text
    assert "[FAIL] Round 1" in text
    assert "Self-pairings found: 1" in caplog.text


def test_save_report_writes_json(tmp_path):
    path = tmp_path / "reports" / "event.json"

    save_report(validate_pairings(_clean_event(), 4), path)

    assert '"overallValid": true' in path.read_text(encoding="utf-8")


def test_save_report_wraps_os_errors(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not folder", encoding="utf-8")

    with pytest.raises(FileSaveException):
        save_report(validate_pairings(_clean_event(), 4), blocker / "report.json")


def test_odd_roster_expects_whole_pairings():
    pairings = [_pairing(1, 1, "p1", "p2"), _pairing(1, 2, "p3", "p4")]

    report = validate_pairings(pairings, 5)

    assert report.expected_pairings_per_round == 2
    assert report.round_report(1).issues == ["Expected 5 unique players, got 4"]
