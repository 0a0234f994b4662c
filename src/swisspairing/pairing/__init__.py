"""Round pairing, pinned overrides and pairing queries."""

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

from swisspairing.pairing.override import (
    apply_pinned_pairings,
    force_pairing,
    renumber_tables,
    tables_by_round,
)
from swisspairing.pairing.queries import (
    completed_pairings,
    current_round,
    current_round_for_player,
    display_names,
    find_pairing,
    is_day2_qualified,
    latest_resolved_round,
    latest_round,
    pairings_for_player,
    pairings_for_round,
    pending_pairings,
    player_result,
    record_before_round,
    rounds_in,
)
from swisspairing.pairing.swiss import bucket_players, pair_round, sorted_bucket_keys

__all__ = [
    "apply_pinned_pairings",
    "bucket_players",
    "completed_pairings",
    "current_round",
    "current_round_for_player",
    "display_names",
    "find_pairing",
    "force_pairing",
    "is_day2_qualified",
    "latest_resolved_round",
    "latest_round",
    "pair_round",
    "pairings_for_player",
    "pairings_for_round",
    "pending_pairings",
    "player_result",
    "record_before_round",
    "renumber_tables",
    "rounds_in",
    "sorted_bucket_keys",
    "tables_by_round",
]
