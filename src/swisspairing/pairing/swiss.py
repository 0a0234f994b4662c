"""Record-bracket Swiss pairing for a single round.

Players are grouped into buckets by identical win-loss record, buckets are
walked from the strongest record down, and each bucket is shuffled and
paired off in adjacent pairs. An odd bucket sends one player down into the
next bucket. Rematch avoidance is a best-effort forward scan inside the
bucket; when no unplayed candidate exists the rematch is accepted.
"""

# Swiss Pairing
# Copyright (C) 2025  Swiss Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import random
from typing import Dict, List, Mapping, Optional, Sequence

from swisspairing.exceptions import DuplicatePlayerException, RosterSizeError
from swisspairing.models.pairing import Pairing, PairingSide
from swisspairing.models.record import Record
from swisspairing.tournament.record_tracker import RecordTracker
from swisspairing.type_hints import Buckets
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


def bucket_players(player_ids: Sequence[str], tracker: RecordTracker) -> Buckets:
    """Group player ids by their current ``"W-L"`` record, keeping input order."""
    buckets: Buckets = {}
    for player_id in player_ids:
        buckets.setdefault(tracker.record_key(player_id), []).append(player_id)
    return buckets


def sorted_bucket_keys(buckets: Mapping[str, Sequence[str]]) -> List[str]:
    """Order bucket keys strongest first: wins descending, then losses ascending."""

    def strength(key: str):
        wins, losses = Record.parse_key(key)
        return -wins, losses

    return sorted(buckets, key=strength)


def _avoid_rematch(group: List[str], index: int, tracker: RecordTracker) -> bool:
    """Swap a fresh opponent into ``group[index + 1]`` if it would be a rematch.

    Only candidates later in the same bucket are considered, and the
    candidate must not have met either player already seated at the table.

    Returns True when a swap was made.
    """
    player_a = group[index]
    player_b = group[index + 1]
    if not tracker.have_played(player_a, player_b):
        return False

    for candidate_index in range(index + 2, len(group)):
        candidate = group[candidate_index]
        if tracker.have_played(player_a, candidate) or tracker.have_played(player_b, candidate):
            continue
        group[index + 1], group[candidate_index] = candidate, player_b
        return True

    logger.debug("No swap available, accepting rematch %s vs %s", player_a, player_b)
    return False


def _side(player_id: str, tracker: RecordTracker, names: Mapping[str, str]) -> PairingSide:
    return PairingSide(
        id=player_id,
        name=names.get(player_id, player_id),
        record=tracker.record_key(player_id),
    )


def pair_round(
    round_number: int,
    player_ids: Sequence[str],
    tracker: RecordTracker,
    rng: random.Random,
    names: Optional[Dict[str, str]] = None,
) -> List[Pairing]:
    """Pair one round from the players' current records.

    Parameters
    ----------
    round_number : int
        Round being paired (stamped on every pairing).
    player_ids : sequence of str
        Everyone playing this round. Must be non-empty and even.
    tracker : RecordTracker
        Pre-round records and opponent history. Opponent history is
        updated with the new pairings; records are not.
    rng : random.Random
        Source for the bucket shuffles.
    names : dict of str to str, optional
        Display names by id. Ids are used when missing.

    Returns
    -------
    list of Pairing
        Pending pairings with tables numbered from 1 in bucket order.

    Raises
    ------
    RosterSizeError
        If there are no players or an odd number of them.
    """
    player_ids = list(player_ids)
    if not player_ids or len(player_ids) % 2:
        raise RosterSizeError(len(player_ids))
    if len(set(player_ids)) != len(player_ids):
        raise DuplicatePlayerException(f"Duplicate player ids in round {round_number}")
    names = names or {}

    buckets = bucket_players(player_ids, tracker)
    keys = sorted_bucket_keys(buckets)

    pairings: List[Pairing] = []
    swaps = 0
    for position, key in enumerate(keys):
        group = list(buckets[key])
        rng.shuffle(group)

        if len(group) % 2 == 1 and position < len(keys) - 1:
            downfloater = group.pop()
            buckets[keys[position + 1]].append(downfloater)
            logger.debug(
                "Round %s: %s pairs down from %s to %s",
                round_number,
                downfloater,
                key,
                keys[position + 1],
            )

        for index in range(0, len(group) - 1, 2):
            if _avoid_rematch(group, index, tracker):
                swaps += 1
            player1, player2 = group[index], group[index + 1]
            tracker.add_pairing(player1, player2)
            pairings.append(
                Pairing(
                    round=round_number,
                    table=len(pairings) + 1,
                    player1=_side(player1, tracker, names),
                    player2=_side(player2, tracker, names),
                )
            )

    logger.debug(
        "Round %s: %s pairings across %s buckets (%s rematch swaps)",
        round_number,
        len(pairings),
        len(keys),
        swaps,
    )
    return pairings
