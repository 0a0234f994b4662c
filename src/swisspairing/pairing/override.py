"""Pinned pairing override.

Forces two players to meet at a given round and table after generation.
Their existing pairings in that round are broken up, the two opponents left
without a partner are paired with each other, and the round's tables are
renumbered so they stay contiguous. Both new pairings are pending.
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

from dataclasses import replace
from typing import Dict, List, Sequence

from swisspairing.exceptions import (
    InvalidPairingException,
    RoundNotFoundException,
    UnknownPlayerError,
)
from swisspairing.models.pairing import Pairing, PairingSide
from swisspairing.models.tournament_config import PinnedPairing
from swisspairing.pairing.queries import record_before_round
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


def _seat(
    pairings: Sequence[Pairing],
    round_pairings: Sequence[Pairing],
    player_id: str,
    round_number: int,
) -> PairingSide:
    """Seat for a re-paired player: same name, record as of the start of the round."""
    for pairing in round_pairings:
        if pairing.player1.id == player_id:
            name = pairing.player1.name
            break
        if pairing.player2.id == player_id:
            name = pairing.player2.name
            break
    else:
        raise UnknownPlayerError(player_id, round_number)
    record = record_before_round(pairings, player_id, round_number)
    return PairingSide(id=player_id, name=name, record=record.key)


def renumber_tables(round_pairings: Sequence[Pairing]) -> List[Pairing]:
    """Copies of the pairings with tables 1..N in list order."""
    return [replace(pairing, table=index) for index, pairing in enumerate(round_pairings, start=1)]


def force_pairing(
    pairings: Sequence[Pairing],
    round_number: int,
    table: int,
    player_id1: str,
    player_id2: str,
) -> List[Pairing]:
    """Force ``player_id1`` vs ``player_id2`` at ``table`` in ``round_number``.

    Parameters
    ----------
    pairings : sequence of Pairing
        Full pairing list. Not modified.
    round_number : int
        Round to rewrite. Other rounds are returned untouched.
    table : int
        Target table, 1 to the number of pairings in the round.
    player_id1, player_id2 : str
        Players to seat together. Both must be paired in the round.

    Returns
    -------
    list of Pairing
        New pairing list with the round rewritten in place.

    Raises
    ------
    InvalidPairingException
        If both ids are the same or the table is out of range.
    RoundNotFoundException
        If the round has no pairings.
    UnknownPlayerError
        If either player is not paired in the round.
    """
    if player_id1 == player_id2:
        raise InvalidPairingException(f"Cannot pair {player_id1} against themselves")

    round_pairings = sorted(
        (p for p in pairings if p.round == round_number), key=lambda p: p.table
    )
    if not round_pairings:
        raise RoundNotFoundException(f"Round {round_number} has no pairings")
    if not 1 <= table <= len(round_pairings):
        raise InvalidPairingException(
            f"Table {table} is out of range for round {round_number} (1-{len(round_pairings)})"
        )

    for player_id in (player_id1, player_id2):
        if not any(p.involves(player_id) for p in round_pairings):
            raise UnknownPlayerError(player_id, round_number)

    displaced_positions = [
        index
        for index, pairing in enumerate(round_pairings)
        if pairing.involves(player_id1) or pairing.involves(player_id2)
    ]
    if len(displaced_positions) > 2:
        raise InvalidPairingException(
            f"Round {round_number} seats {player_id1} or {player_id2} more than once"
        )
    forced = Pairing(
        round=round_number,
        table=table,
        player1=_seat(pairings, round_pairings, player_id1, round_number),
        player2=_seat(pairings, round_pairings, player_id2, round_number),
    )

    remaining = [
        pairing
        for index, pairing in enumerate(round_pairings)
        if index not in displaced_positions
    ]
    if len(displaced_positions) == 2:
        first, second = (round_pairings[i] for i in displaced_positions)
        orphan1 = first.opponent_of(player_id1) or first.opponent_of(player_id2)
        orphan2 = second.opponent_of(player_id1) or second.opponent_of(player_id2)
        repaired = Pairing(
            round=round_number,
            table=first.table,
            player1=_seat(pairings, round_pairings, orphan1, round_number),
            player2=_seat(pairings, round_pairings, orphan2, round_number),
        )
        remaining.insert(displaced_positions[0], repaired)
        logger.info(
            "Round %s: re-paired displaced opponents %s and %s",
            round_number,
            orphan1,
            orphan2,
        )

    remaining.insert(table - 1, forced)
    new_round = renumber_tables(remaining)
    logger.info(
        "Round %s: forced %s vs %s at table %s", round_number, player_id1, player_id2, table
    )

    result: List[Pairing] = []
    round_emitted = False
    for pairing in pairings:
        if pairing.round != round_number:
            result.append(pairing)
        elif not round_emitted:
            result.extend(new_round)
            round_emitted = True
    return result


def apply_pinned_pairings(
    pairings: Sequence[Pairing], pins: Sequence[PinnedPairing]
) -> List[Pairing]:
    """Apply a list of :class:`PinnedPairing` overrides in order."""
    result = list(pairings)
    for pin in pins:
        result = force_pairing(result, pin.round, pin.table, pin.player1, pin.player2)
    return result


def tables_by_round(pairings: Sequence[Pairing]) -> Dict[int, List[int]]:
    """Table numbers per round in list order, for contiguity checks."""
    tables: Dict[int, List[int]] = {}
    for pairing in pairings:
        tables.setdefault(pairing.round, []).append(pairing.table)
    return tables
