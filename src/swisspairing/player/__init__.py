from swisspairing.player.base_player import Player, division_for_birth_date
from swisspairing.player.factory import (
    RosterFactory,
    check_unique_ids,
    create_roster_from_dicts,
)

__all__ = [
    "Player",
    "RosterFactory",
    "check_unique_ids",
    "create_roster_from_dicts",
    "division_for_birth_date",
]
