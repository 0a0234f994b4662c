"""Read-only lookups over a pairing list.

Nothing here mutates its input. Functions take the flat pairing list as
produced by the generator (or loaded from a tournament file) and return
pairings in input order.
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

from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence, Union

from swisspairing.constants import DAY2_MIN_WINS, DAY2_ROUND, RESULT_LOSS, RESULT_WIN
from swisspairing.models.pairing import Pairing
from swisspairing.models.record import Record
from swisspairing.player.base_player import Player
from swisspairing.type_hints import PlayerOutcome


def find_pairing(
    pairings: Iterable[Pairing],
    player_id1: str,
    player_id2: str,
    round_number: Optional[int] = None,
) -> Optional[Pairing]:
    """Return the first pairing seating both players, or None.

    Seat order does not matter. ``round_number`` restricts the search to one
    round.
    """
    for pairing in pairings:
        if round_number is not None and pairing.round != round_number:
            continue
        if pairing.involves(player_id1) and pairing.involves(player_id2):
            return pairing
    return None


def pairings_for_player(pairings: Iterable[Pairing], player_id: str) -> List[Pairing]:
    """All pairings in any round involving ``player_id``."""
    return [p for p in pairings if p.involves(player_id)]


def rounds_in(pairings: Iterable[Pairing]) -> List[int]:
    """Distinct round numbers present, ascending."""
    return sorted({p.round for p in pairings})


def pairings_for_round(pairings: Iterable[Pairing], round_number: int) -> List[Pairing]:
    return [p for p in pairings if p.round == round_number]


def completed_pairings(pairings: Iterable[Pairing], round_number: int) -> List[Pairing]:
    return [p for p in pairings if p.round == round_number and p.is_resolved]


def pending_pairings(pairings: Iterable[Pairing], round_number: int) -> List[Pairing]:
    return [p for p in pairings if p.round == round_number and not p.is_resolved]


def player_result(pairing: Pairing, player_id: str) -> Optional[PlayerOutcome]:
    """``"win"`` or ``"loss"`` from the player's side, None if pending or not seated."""
    if pairing.result is None or not pairing.involves(player_id):
        return None
    return RESULT_WIN if pairing.result.winner_id == player_id else RESULT_LOSS


def latest_round(pairings: Iterable[Pairing], player_id: Optional[str] = None) -> int:
    """Highest round present (for one player if given), 0 if none."""
    return max(
        (p.round for p in pairings if player_id is None or p.involves(player_id)),
        default=0,
    )


def latest_resolved_round(pairings: Iterable[Pairing]) -> int:
    """Highest round with at least one result, 0 if nothing is resolved."""
    return max((p.round for p in pairings if p.is_resolved), default=0)


def current_round(pairings: Iterable[Pairing]) -> int:
    """Round the event is playing.

    While any pairing is pending this is the round after the highest one with
    a result (1 if nothing is resolved yet). A fully resolved event is on its
    last round.
    """
    pairings = list(pairings)
    if pairings and all(p.is_resolved for p in pairings):
        return latest_round(pairings)
    return latest_resolved_round(pairings) + 1


def current_round_for_player(pairings: Iterable[Pairing], player_id: str) -> int:
    """Round a player is currently in.

    Their latest pending round if they have one, else their latest round,
    else 1.
    """
    own = [p for p in pairings if p.involves(player_id)]
    pending = [p.round for p in own if not p.is_resolved]
    if pending:
        return max(pending)
    return max((p.round for p in own), default=1)


def is_day2_qualified(record: Union[Record, str], round_number: int) -> bool:
    """Whether a record makes the day-2 cut, judged only in the final Swiss round."""
    if round_number != DAY2_ROUND:
        return False
    wins = record.wins if isinstance(record, Record) else Record.parse_key(record)[0]
    return wins >= DAY2_MIN_WINS


def record_before_round(
    pairings: Iterable[Pairing], player_id: str, round_number: int
) -> Record:
    """Rebuild a player's record from resolved pairings of earlier rounds."""
    record = Record()
    for pairing in pairings:
        if pairing.round >= round_number or not pairing.involves(player_id):
            continue
        outcome = player_result(pairing, player_id)
        if outcome == RESULT_WIN:
            record.add_win()
        elif outcome == RESULT_LOSS:
            record.add_loss()
    return record


def display_names(players: Sequence[Player]) -> Dict[str, str]:
    """Presentation names by player id.

    Unique names are used as-is. Shared names get the country appended,
    and the id as well if that is still ambiguous. Identity stays the id.
    """
    name_counts = Counter(player.name for player in players)
    labels: Dict[str, str] = {}
    for player in players:
        if name_counts[player.name] == 1:
            labels[player.id] = player.name
        elif player.country:
            labels[player.id] = f"{player.name} ({player.country})"
        else:
            labels[player.id] = f"{player.name} ({player.id})"

    label_counts = Counter(labels.values())
    for player in players:
        if label_counts[labels[player.id]] > 1:
            if player.country:
                labels[player.id] = f"{player.name} ({player.country}, {player.id})"
            else:
                labels[player.id] = f"{player.name} ({player.id})"
    return labels
