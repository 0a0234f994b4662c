"""Roster construction helpers."""

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
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Sequence

from swisspairing.exceptions import DuplicatePlayerException
from swisspairing.player.base_player import Player
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)

REGION_COUNTRIES: Dict[str, List[str]] = {
    "North America": ["United States", "Canada", "Mexico"],
    "Europe": ["United Kingdom", "Germany", "France", "Italy", "Spain"],
    "Asia-Pacific": ["Japan", "South Korea", "Taiwan", "Australia", "China"],
    "Latin America": ["Brazil", "Argentina", "Chile", "Peru", "Colombia"],
}

# Small pools on purpose: shared names are common in large rosters
REGION_NAMES: Dict[str, List[str]] = {
    "North America": [
        "Michael Brown", "Jessica Lee", "Christopher Davis", "Amanda Wilson",
        "Daniel Martinez", "Ashley Taylor", "Matthew Anderson", "Nicole Garcia",
        "Kevin Jackson", "Lauren Martin", "Steven Thompson", "Samantha King",
    ],
    "Europe": [
        "Hans Mueller", "Anna Schmidt", "Thomas Wagner", "Claudia Fischer",
        "Jean Dupont", "Marie Martin", "Pierre Durand", "Sophie Bernard",
        "Isabella Rossi", "Marco Bianchi", "Giulia Romano", "Luca Ferrari",
    ],
    "Asia-Pacific": [
        "Takashi Yamamoto", "Yuki Tanaka", "Hiroshi Sato", "Aiko Watanabe",
        "Min-ji Park", "Jin-woo Kim", "Soo-jin Lee", "Wei Chen",
        "Li Wang", "Arjun Patel", "Priya Sharma", "Raj Singh",
    ],
    "Latin America": [
        "Carlos Rodriguez", "Ana Silva", "Miguel Torres", "Valentina Morales",
        "Diego Fernandez", "Gabriel Santos", "Camila Lima", "Rafael Oliveira",
        "Sofia Gonzalez", "Alejandro Lopez", "Maria Garcia", "Luis Rodriguez",
    ],
}


class RosterFactory:
    """Factory for creating synthetic rosters.

    Example:
        >>> factory = RosterFactory(seed=7)
        >>> roster = factory.create_roster(600)
        >>> roster[0].id
        'p1'
    """

    def __init__(self, seed: Optional[int] = None):
        self.random = random.Random(seed) if seed is not None else random.Random()

    def create_roster(
        self, size: int, featured: Optional[Sequence[Player]] = None
    ) -> List[Player]:
        """Create ``size`` players, starting with any ``featured`` players.

        Generated players get ids ``p{n}`` numbered after the featured ones.
        """
        players = list(featured or [])
        for number in range(len(players) + 1, size + 1):
            players.append(self._create_player(number))
        check_unique_ids(players)
        logger.info("Created roster of %s players", len(players))
        return players[:size]

    def _create_player(self, number: int) -> Player:
        region = self.random.choice(sorted(REGION_NAMES))
        return Player(
            id=f"p{number}",
            name=self.random.choice(REGION_NAMES[region]),
            country=self.random.choice(REGION_COUNTRIES[region]),
            region=region,
            rating=1400 + self.random.randint(0, 399),
            date_of_birth=date(self.random.randint(1975, 2015), 1, 1),
        )


def check_unique_ids(players: Iterable[Player]) -> None:
    """Raise if two roster entries share an id."""
    seen = set()
    for player in players:
        if player.id in seen:
            raise DuplicatePlayerException(f"Duplicate player id in roster: {player.id}")
        seen.add(player.id)


def create_roster_from_dicts(entries: Iterable[Dict[str, Any]]) -> List[Player]:
    """Build a roster from serialized player entries.

    Raises:
        InvalidPlayerDataException: If an entry is malformed
        DuplicatePlayerException: If two entries share an id
    """
    players = [Player.from_dict(entry) for entry in entries]
    check_unique_ids(players)
    return players
