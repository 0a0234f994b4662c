"""Tournament generation: pair and resolve every round of a Swiss event."""

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
from dataclasses import replace
from typing import List, Optional, Sequence

from swisspairing.exceptions import RosterSizeError
from swisspairing.models.pairing import Pairing
from swisspairing.models.tournament_config import TournamentConfig
from swisspairing.pairing.override import apply_pinned_pairings
from swisspairing.pairing.queries import display_names
from swisspairing.pairing.swiss import pair_round
from swisspairing.player.base_player import Player
from swisspairing.player.factory import check_unique_ids
from swisspairing.tournament.record_tracker import RecordTracker
from swisspairing.tournament.result_assigner import assign_result
from swisspairing.utils import setup_logger
from swisspairing.utils.validation import clamp_round_count

logger = setup_logger(__name__)


def _resolve_round(
    round_pairings: List[Pairing], tracker: RecordTracker, rng: random.Random
) -> List[Pairing]:
    """Assign results and restamp both sides with their post-round records."""
    resolved = []
    for pairing in round_pairings:
        result = assign_result(pairing, tracker, rng)
        resolved.append(
            replace(
                pairing,
                player1=replace(pairing.player1, record=tracker.record_key(pairing.player1.id)),
                player2=replace(pairing.player2, record=tracker.record_key(pairing.player2.id)),
                result=result,
            )
        )
    return resolved


def generate(
    roster: Sequence[Player],
    total_rounds: int,
    resolved_round_cutoff: Optional[int] = None,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> List[Pairing]:
    """Generate the full pairing list for a Swiss tournament.

    Parameters
    ----------
    roster : sequence of Player
        Every player, each with a unique id. Must be non-empty and even.
    total_rounds : int
        Rounds to pair. Clamped into 1-8.
    resolved_round_cutoff : int, optional
        Last round that gets results. Later rounds are emitted pending, as
        in a tournament still in progress. Defaults to every round.
    rng : random.Random, optional
        Source of all randomness for the run. Takes precedence over ``seed``.
    seed : int, optional
        Seed for a fresh ``random.Random`` when ``rng`` is not given.

    Returns
    -------
    list of Pairing
        Pairings ordered by round, then table.

    Raises
    ------
    RosterSizeError
        If the roster is empty or odd-sized.
    DuplicatePlayerException
        If two players share an id.
    """
    roster = list(roster)
    check_unique_ids(roster)
    if not roster or len(roster) % 2:
        raise RosterSizeError(len(roster))

    rounds = clamp_round_count(total_rounds)
    if rounds != total_rounds:
        logger.warning("Requested %s rounds, clamped to %s", total_rounds, rounds)
    cutoff = rounds if resolved_round_cutoff is None else max(0, min(rounds, resolved_round_cutoff))

    if rng is None:
        rng = random.Random(seed)

    player_ids = [player.id for player in roster]
    tracker = RecordTracker.for_players(player_ids)
    names = display_names(roster)

    pairings: List[Pairing] = []
    for round_number in range(1, rounds + 1):
        round_pairings = pair_round(round_number, player_ids, tracker, rng, names)
        if round_number <= cutoff:
            round_pairings = _resolve_round(round_pairings, tracker, rng)
        pairings.extend(round_pairings)

    logger.info(
        "Generated %s pairings: %s players, %s rounds (%s resolved)",
        len(pairings),
        len(roster),
        rounds,
        cutoff,
    )
    return pairings


class TournamentGenerator:
    """Generate a tournament from a :class:`TournamentConfig`.

    Applies the config's pinned pairings after generation.
    """

    def __init__(self, config: TournamentConfig, rng: Optional[random.Random] = None):
        self.config = config
        if rng is None:
            rng = random.Random(config.seed) if config.seed is not None else random.Random()
        self.random = rng

    def generate(self, roster: Sequence[Player]) -> List[Pairing]:
        logger.info("Generating tournament: %s", self.config.name)
        pairings = generate(
            roster,
            self.config.num_rounds,
            resolved_round_cutoff=self.config.resolved_through,
            rng=self.random,
        )
        if self.config.pinned_pairings:
            pairings = apply_pinned_pairings(pairings, self.config.pinned_pairings)
        return pairings
