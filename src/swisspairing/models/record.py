"""Win/loss record data class."""

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
from typing import Tuple


@dataclass
class Record:
    """A player's match record within one generation run.

    Attributes
    ----------
    wins : int
        Matches won so far.
    losses : int
        Matches lost so far.
    """

    wins: int = 0
    losses: int = 0

    @property
    def key(self) -> str:
        """Bucket key, e.g. ``"2-1"``."""
        return f"{self.wins}-{self.losses}"

    @property
    def games_played(self) -> int:
        return self.wins + self.losses

    def add_win(self) -> None:
        self.wins += 1

    def add_loss(self) -> None:
        self.losses += 1

    def __str__(self) -> str:
        return self.key

    @staticmethod
    def parse_key(key: str) -> Tuple[int, int]:
        """Split a ``"W-L"`` key into its integer parts."""
        wins, losses = key.split("-")
        return int(wins), int(losses)

    @classmethod
    def from_key(cls, key: str) -> "Record":
        wins, losses = cls.parse_key(key)
        return cls(wins=wins, losses=losses)
