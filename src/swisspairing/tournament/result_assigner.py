"""Simulated match outcomes for resolved rounds."""

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

from swisspairing.constants import (
    SCORE_PLAYER1_WIN,
    SCORE_PLAYER2_WIN,
    WIN_PROBABILITY_BASE,
    WIN_PROBABILITY_STEP,
)
from swisspairing.models.pairing import MatchResult, Pairing
from swisspairing.tournament.record_tracker import RecordTracker


def win_probability(wins1: int, wins2: int) -> float:
    """Chance that player 1 beats player 2, from pre-round win counts.

    Clamped to [0, 1]; with eight rounds the raw value can reach 1.2.
    """
    probability = WIN_PROBABILITY_BASE + WIN_PROBABILITY_STEP * (wins1 - wins2)
    return max(0.0, min(1.0, probability))


def assign_result(pairing: Pairing, tracker: RecordTracker, rng: random.Random) -> MatchResult:
    """Decide a pairing and apply it to the tracker.

    Player 1 wins ``2-0`` when the draw falls under :func:`win_probability`,
    otherwise player 2 wins ``2-1``.
    """
    player1_id, player2_id = pairing.player_ids
    probability = win_probability(
        tracker.record_of(player1_id).wins, tracker.record_of(player2_id).wins
    )

    if rng.random() < probability:
        tracker.record_match(player1_id, player2_id)
        return MatchResult(winner_id=player1_id, score=SCORE_PLAYER1_WIN)

    tracker.record_match(player2_id, player1_id)
    return MatchResult(winner_id=player2_id, score=SCORE_PLAYER2_WIN)
