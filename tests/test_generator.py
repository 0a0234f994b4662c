import random
import time
from collections import Counter

import pytest

from swisspairing.exceptions import DuplicatePlayerException, RosterSizeError
from swisspairing.models.tournament_config import PinnedPairing, TournamentConfig
from swisspairing.pairing.override import tables_by_round
from swisspairing.pairing.queries import (
    find_pairing,
    pairings_for_round,
    player_result,
    record_before_round,
    rounds_in,
)
from swisspairing.pairing.swiss import pair_round
from swisspairing.player.base_player import Player
from swisspairing.player.factory import RosterFactory
from swisspairing.tournament.generator import TournamentGenerator, generate
from swisspairing.tournament.record_tracker import RecordTracker
from swisspairing.tournament.result_assigner import assign_result


def _roster(size):
    return [Player(id=f"p{n}", name=f"Player {n}") for n in range(1, size + 1)]


def _final_records(pairings):
    wins = Counter()
    losses = Counter()
    for pairing in pairings:
        for player_id in pairing.player_ids:
            outcome = player_result(pairing, player_id)
            if outcome == "win":
                wins[player_id] += 1
            elif outcome == "loss":
                losses[player_id] += 1
    return wins, losses


def test_same_seed_reproduces_pairings():
    first = generate(_roster(4), 2, seed=42)
    second = generate(_roster(4), 2, seed=42)

    assert first == second
    assert len(first) == 4
    assert rounds_in(first) == [1, 2]


def test_injected_rng_matches_seed():
    assert generate(_roster(8), 3, rng=random.Random(9)) == generate(_roster(8), 3, seed=9)


def test_every_round_covers_the_roster():
    roster = _roster(32)
    pairings = generate(roster, 6, seed=1)
    roster_ids = sorted(p.id for p in roster)

    for round_number in range(1, 7):
        round_pairings = pairings_for_round(pairings, round_number)
        seated = [pid for p in round_pairings for pid in p.player_ids]
        assert sorted(seated) == roster_ids
        assert all(p.player1.id != p.player2.id for p in round_pairings)


def test_records_add_up_to_rounds_played():
    roster = _roster(24)
    pairings = generate(roster, 5, seed=3)
    wins, losses = _final_records(pairings)

    for player in roster:
        assert wins[player.id] + losses[player.id] == 5


def test_tables_are_contiguous():
    pairings = generate(_roster(50), 8, seed=12)

    for tables in tables_by_round(pairings).values():
        assert tables == list(range(1, 26))


def test_resolved_sides_show_post_round_record():
    pairings = generate(_roster(16), 1, seed=4)

    for pairing in pairings:
        winner = pairing.result.winner_id
        for side in (pairing.player1, pairing.player2):
            assert side.record == ("1-0" if side.id == winner else "0-1")


def test_pending_rounds_after_cutoff():
    pairings = generate(_roster(20), 4, resolved_round_cutoff=2, seed=8)

    resolved = {p.round for p in pairings if p.is_resolved}
    pending = {p.round for p in pairings if not p.is_resolved}
    assert resolved == {1, 2}
    assert pending == {3, 4}

    for pairing in pairings_for_round(pairings, 3):
        for side in (pairing.player1, pairing.player2):
            assert side.record == record_before_round(pairings, side.id, 3).key
            wins, losses = (int(n) for n in side.record.split("-"))
            assert wins + losses == 2


def test_zero_cutoff_leaves_everything_pending():
    pairings = generate(_roster(8), 3, resolved_round_cutoff=0, seed=2)

    assert not any(p.is_resolved for p in pairings)


@pytest.mark.parametrize("requested, expected", [(0, 1), (-3, 1), (12, 8)])
def test_round_count_is_clamped(requested, expected, caplog):
    pairings = generate(_roster(4), requested, seed=1)

    assert rounds_in(pairings) == list(range(1, expected + 1))
    assert "clamped" in caplog.text


@pytest.mark.parametrize("size", [0, 5])
def test_unpairable_roster_rejected(size):
    with pytest.raises(RosterSizeError):
        generate(_roster(size), 3, seed=1)


def test_duplicate_ids_rejected():
    roster = _roster(4) + [Player(id="p1", name="Someone Else")]
    roster.append(Player(id="p6", name="Player 6"))

    with pytest.raises(DuplicatePlayerException):
        generate(roster, 2, seed=1)


def test_large_event_is_fast():
    roster = RosterFactory(seed=5).create_roster(600)

    start = time.perf_counter()
    pairings = generate(roster, 8, seed=5)
    elapsed = time.perf_counter() - start

    assert len(pairings) == 600 // 2 * 8
    assert elapsed < 1.0


def test_generator_applies_pinned_pairings():
    config = TournamentConfig(
        name="Pinned",
        num_rounds=3,
        seed=21,
        pinned_pairings=[PinnedPairing(round=2, table=1, player1="p3", player2="p7")],
    )

    pairings = TournamentGenerator(config).generate(_roster(10))

    pinned = find_pairing(pairings, "p3", "p7", round_number=2)
    assert pinned is not None
    assert pinned.table == 1


def test_generator_seed_from_config():
    config = TournamentConfig(num_rounds=4, seed=77)

    first = TournamentGenerator(config).generate(_roster(12))
    second = TournamentGenerator(config).generate(_roster(12))

    assert first == second


def test_opponent_history_grows_and_records_track_rounds():
    ids = [f"p{n}" for n in range(1, 41)]
    tracker = RecordTracker.for_players(ids)
    rng = random.Random(13)
    snapshots = []

    for round_number in range(1, 9):
        for pairing in pair_round(round_number, ids, tracker, rng):
            assign_result(pairing, tracker, rng)

        snapshot = {pid: set(opps) for pid, opps in tracker.previous_opponents.items()}
        for earlier in snapshots:
            assert all(earlier[pid] <= snapshot[pid] for pid in ids)
        assert all(tracker.record_of(pid).games_played == round_number for pid in ids)
        snapshots.append(snapshot)
