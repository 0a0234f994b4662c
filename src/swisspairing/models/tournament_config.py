"""TournamentConfig data class."""

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
from typing import Any, Dict, List, Optional

from swisspairing.constants import MAX_ROUNDS
from swisspairing.exceptions import InvalidConfigurationException


@dataclass
class PinnedPairing:
    """Two players forced to meet at a given round and table."""

    round: int
    table: int
    player1: str
    player2: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "round": self.round,
            "table": self.table,
            "player1": self.player1,
            "player2": self.player2,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PinnedPairing":
        try:
            return cls(
                round=int(data["round"]),
                table=int(data["table"]),
                player1=str(data["player1"]),
                player2=str(data["player2"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidConfigurationException(f"Invalid pinned pairing {data!r}: {e}") from e


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    num_rounds : int
        Number of Swiss rounds. Clamped to 1-8 at generation time.
    resolved_through : int or None
        Last round with results. Later rounds are pending. None resolves all.
    seed : int or None
        Seed for the pairing/result random source. None draws a fresh one.
    pinned_pairings : list of PinnedPairing
        Forced pairings applied after generation, in order.
    """

    name: str = "Untitled Tournament"
    num_rounds: int = MAX_ROUNDS
    resolved_through: Optional[int] = None
    seed: Optional[int] = None
    pinned_pairings: List[PinnedPairing] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "num_rounds": self.num_rounds,
            "resolved_through": self.resolved_through,
            "seed": self.seed,
            "pinned_pairings": [p.to_dict() for p in self.pinned_pairings],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        try:
            num_rounds = int(data.get("num_rounds", MAX_ROUNDS))
            resolved_through = data.get("resolved_through")
            seed = data.get("seed")
            return cls(
                name=data.get("name", "Untitled Tournament"),
                num_rounds=num_rounds,
                resolved_through=int(resolved_through) if resolved_through is not None else None,
                seed=int(seed) if seed is not None else None,
                pinned_pairings=[
                    PinnedPairing.from_dict(p) for p in data.get("pinned_pairings", [])
                ],
            )
        except (TypeError, ValueError) as e:
            raise InvalidConfigurationException(f"Invalid tournament configuration: {e}") from e
