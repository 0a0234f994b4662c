"""Per-run record and opponent tracking."""

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

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable

from swisspairing.exceptions import UnknownPlayerError
from swisspairing.models.record import Record
from swisspairing.type_hints import OpponentHistory


@dataclass
class RecordTracker:
    """
    Win/loss records and previous opponents for one generation run.

    Build a fresh tracker per run; nothing here is shared between runs.

    Attributes
    ----------
    records : dict of str to Record
        Current record of every rostered player.
    previous_opponents : dict of str to set of str
        Opponent ids each player has already been paired against.
        Append-only for the lifetime of the tracker.
    """

    records: Dict[str, Record] = field(default_factory=dict)
    previous_opponents: OpponentHistory = field(default_factory=dict)

    @classmethod
    def for_players(cls, player_ids: Iterable[str]) -> "RecordTracker":
        """Start every player at 0-0 with no opponents."""
        tracker = cls()
        for player_id in player_ids:
            tracker.records[player_id] = Record()
            tracker.previous_opponents[player_id] = set()
        return tracker

    def record_of(self, player_id: str) -> Record:
        try:
            return self.records[player_id]
        except KeyError:
            raise UnknownPlayerError(player_id) from None

    def record_key(self, player_id: str) -> str:
        """Bucket key of the player's current record."""
        return self.record_of(player_id).key

    def opponents_of(self, player_id: str) -> FrozenSet[str]:
        if player_id not in self.previous_opponents:
            raise UnknownPlayerError(player_id)
        return frozenset(self.previous_opponents[player_id])

    def add_pairing(self, player1_id: str, player2_id: str) -> None:
        """Record that two players have been paired."""
        self.previous_opponents.setdefault(player1_id, set()).add(player2_id)
        self.previous_opponents.setdefault(player2_id, set()).add(player1_id)

    def have_played(self, player1_id: str, player2_id: str) -> bool:
        """Check if two players have previously been paired."""
        return player2_id in self.previous_opponents.get(player1_id, ())

    def record_match(self, winner_id: str, loser_id: str) -> None:
        """Apply a resolved match to both records."""
        self.record_of(winner_id).add_win()
        self.record_of(loser_id).add_loss()
