import pytest

from swisspairing.exceptions import (
    InvalidPairingException,
    RoundNotFoundException,
    UnknownPlayerError,
)
from swisspairing.models.pairing import MatchResult, Pairing, PairingSide
from swisspairing.pairing.override import force_pairing, tables_by_round
from swisspairing.pairing.queries import find_pairing, pairings_for_round
from swisspairing.player.base_player import Player
from swisspairing.player.factory import RosterFactory
from swisspairing.tournament.generator import generate
from swisspairing.validation.validator import validate_pairings

FEATURED = [
    Player(id="manraj-sidhu", name="Manraj Sidhu", country="Canada"),
    Player(id="david-kim", name="David Kim", country="USA"),
]


def _pairing(round_number, table, player1, player2, winner=None, records=("0-0", "0-0")):
    result = None
    if winner is not None:
        result = MatchResult(winner_id=winner, score="2-0" if winner == player1 else "2-1")
    return Pairing(
        round=round_number,
        table=table,
        player1=PairingSide(player1, player1.upper(), records[0]),
        player2=PairingSide(player2, player2.upper(), records[1]),
        result=result,
    )


def _round_one():
    return [
        _pairing(1, 1, "a", "b"),
        _pairing(1, 2, "c", "d"),
        _pairing(1, 3, "e", "f"),
    ]


def _seats(pairings):
    return [tuple(p.player_ids) for p in pairings]


@pytest.fixture(scope="module")
def large_event():
    roster = RosterFactory(seed=7).create_roster(600, featured=FEATURED)
    return generate(roster, 8, seed=42)


def test_force_pairing_in_large_event(large_event):
    forced = force_pairing(large_event, 3, 12, "manraj-sidhu", "david-kim")

    report = validate_pairings(forced, 600)
    round_three = report.round_report(3)
    assert report.is_valid
    assert round_three.actual_pairings == 300
    assert round_three.actual_players == 600

    pairing = find_pairing(forced, "manraj-sidhu", "david-kim", 3)
    assert pairing.table == 12
    assert pairing.round == 3

    others = [p for p in pairings_for_round(forced, 3) if p is not pairing]
    assert not any(p.involves("manraj-sidhu") or p.involves("david-kim") for p in others)
    assert tables_by_round(forced)[3] == list(range(1, 301))


def test_force_pairing_leaves_other_rounds_alone(large_event):
    forced = force_pairing(large_event, 3, 12, "manraj-sidhu", "david-kim")

    assert [p for p in forced if p.round != 3] == [p for p in large_event if p.round != 3]
    assert len(forced) == len(large_event)


def test_force_pairing_does_not_mutate_input():
    pairings = _round_one()
    before = list(pairings)

    force_pairing(pairings, 1, 1, "a", "c")

    assert pairings == before


def test_opponents_of_forced_players_are_repaired():
    forced = force_pairing(_round_one(), 1, 1, "a", "c")

    assert _seats(forced) == [("a", "c"), ("b", "d"), ("e", "f")]
    assert [p.table for p in forced] == [1, 2, 3]


def test_repaired_pairing_keeps_first_displaced_position():
    forced = force_pairing(_round_one(), 1, 3, "b", "e")

    assert _seats(forced) == [("a", "f"), ("c", "d"), ("b", "e")]


def test_existing_pairing_moved_to_requested_table():
    forced = force_pairing(_round_one(), 1, 3, "a", "b")

    assert _seats(forced) == [("c", "d"), ("e", "f"), ("a", "b")]
    assert [p.table for p in forced] == [1, 2, 3]


def test_forced_pairing_is_pending_with_pre_round_records():
    pairings = [
        _pairing(1, 1, "a", "b", winner="a", records=("1-0", "0-1")),
        _pairing(1, 2, "c", "d", winner="d", records=("0-1", "1-0")),
        _pairing(2, 1, "a", "d", records=("1-0", "1-0")),
        _pairing(2, 2, "b", "c", records=("0-1", "0-1")),
    ]

    forced = force_pairing(pairings, 2, 2, "a", "c")
    pairing = find_pairing(forced, "a", "c", 2)

    assert pairing.result is None
    assert pairing.player1.record == "1-0"
    assert pairing.player2.record == "0-1"
    assert pairing.player1.name == "A"
    repaired = find_pairing(forced, "d", "b", 2)
    assert repaired.table == 1


def test_same_player_twice_rejected():
    with pytest.raises(InvalidPairingException):
        force_pairing(_round_one(), 1, 1, "a", "a")


def test_missing_round_rejected():
    with pytest.raises(RoundNotFoundException):
        force_pairing(_round_one(), 4, 1, "a", "c")


@pytest.mark.parametrize("table", [0, 4, -1])
def test_table_out_of_range_rejected(table):
    with pytest.raises(InvalidPairingException):
        force_pairing(_round_one(), 1, table, "a", "c")


def test_unknown_player_rejected():
    with pytest.raises(UnknownPlayerError) as excinfo:
        force_pairing(_round_one(), 1, 1, "a", "zz")

    assert excinfo.value.player_id == "zz"
    assert excinfo.value.round_number == 1
