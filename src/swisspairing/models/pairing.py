"""Pairing data classes."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass
class PairingSide:
    """One seat of a pairing.

    Attributes
    ----------
    id : str
        Stable player id.
    name : str
        Display name (already disambiguated for presentation).
    record : str
        ``"W-L"`` record. After the round for resolved pairings, before the
        round for pending ones.
    """

    id: str
    name: str
    record: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "record": self.record}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PairingSide":
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            record=data.get("record", "0-0"),
        )


@dataclass
class MatchResult:
    """Outcome of a resolved pairing.

    Attributes
    ----------
    winner_id : str
        ID of the winning player.
    score : str
        Symbolic games summary, ``"2-0"`` or ``"2-1"``.
    """

    winner_id: str
    score: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match result to dictionary."""
        return {"winnerId": self.winner_id, "score": self.score}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchResult":
        """Deserialize match result from dictionary."""
        winner = data.get("winnerId", data.get("winner"))
        return cls(winner_id=str(winner), score=data["score"])


@dataclass
class Pairing:
    """A single head-to-head pairing at a table in a round.

    ``result`` is ``None`` while the match is pending.
    """

    round: int
    table: int
    player1: PairingSide
    player2: PairingSide
    result: Optional[MatchResult] = None

    @property
    def is_resolved(self) -> bool:
        return self.result is not None

    @property
    def player_ids(self) -> Tuple[str, str]:
        return self.player1.id, self.player2.id

    def involves(self, player_id: str) -> bool:
        """Check if a player sits at this table."""
        return self.player1.id == player_id or self.player2.id == player_id

    def opponent_of(self, player_id: str) -> Optional[str]:
        """Return the other player's id, or None if ``player_id`` is not seated here."""
        if self.player1.id == player_id:
            return self.player2.id
        if self.player2.id == player_id:
            return self.player1.id
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing to dictionary."""
        data = {
            "round": self.round,
            "table": self.table,
            "player1": self.player1.to_dict(),
            "player2": self.player2.to_dict(),
        }
        if self.result is not None:
            data["result"] = self.result.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pairing":
        """Deserialize pairing from dictionary."""
        result = data.get("result")
        return cls(
            round=int(data["round"]),
            table=int(data["table"]),
            player1=PairingSide.from_dict(data["player1"]),
            player2=PairingSide.from_dict(data["player2"]),
            result=MatchResult.from_dict(result) if result else None,
        )

    def __str__(self) -> str:
        status = f"{self.result.winner_id} {self.result.score}" if self.result else "pending"
        return (
            f"R{self.round} T{self.table}: {self.player1.name} ({self.player1.record})"
            f" vs {self.player2.name} ({self.player2.record}) [{status}]"
        )


#  LocalWords:  PairingSide
