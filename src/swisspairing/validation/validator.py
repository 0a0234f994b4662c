"""Structural audit of a finished pairing list.

The validator is stateless and never raises: every finding comes back as an
issue string on the round it belongs to. Callers decide whether an invalid
report is fatal.
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
from typing import List, Sequence

from swisspairing.models.pairing import Pairing
from swisspairing.models.report import RoundValidation, ValidationReport, ValidationSummary
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


def _validate_round(
    round_number: int, round_pairings: List[Pairing], total_players: int
) -> RoundValidation:
    expected_pairings = total_players // 2

    appearances: Counter = Counter()
    for pairing in round_pairings:
        appearances[pairing.player1.id] += 1
        appearances[pairing.player2.id] += 1
    actual_players = len(appearances)

    issues: List[str] = []
    if len(round_pairings) != expected_pairings:
        issues.append(f"Expected {expected_pairings} pairings, got {len(round_pairings)}")
    if actual_players != total_players:
        issues.append(f"Expected {total_players} unique players, got {actual_players}")

    duplicates = [
        f"{player_id} appears {count} times"
        for player_id, count in appearances.items()
        if count > 1
    ]
    if duplicates:
        issues.append(f"Duplicate players: {', '.join(duplicates)}")

    self_pairings = sum(1 for p in round_pairings if p.player1.id == p.player2.id)
    if self_pairings:
        issues.append(f"Self-pairings found: {self_pairings}")

    return RoundValidation(
        round=round_number,
        actual_pairings=len(round_pairings),
        expected_pairings=expected_pairings,
        actual_players=actual_players,
        expected_players=total_players,
        issues=issues,
    )


def validate_pairings(pairings: Sequence[Pairing], total_players: int) -> ValidationReport:
    """Audit every round present in ``pairings`` against a roster size.

    Per round: pairing count vs ``total_players // 2``, distinct players vs
    ``total_players``, players seated more than once, self-pairings.

    The expected pairing count is floored, so an odd ``total_players`` of 5
    expects 2 pairings (not 2.5) and the shortfall is reported through the
    unique-player check instead.

    Parameters
    ----------
    pairings : sequence of Pairing
        Pairing list to audit. Not modified.
    total_players : int
        Roster size every round should cover.

    Returns
    -------
    ValidationReport
        Per-round findings plus a summary. ``summary.overall_valid`` requires
        every round valid and the total pairing count to match.
    """
    by_round = {}
    for pairing in pairings:
        by_round.setdefault(pairing.round, []).append(pairing)

    rounds = [
        _validate_round(round_number, by_round[round_number], total_players)
        for round_number in sorted(by_round)
    ]

    expected_per_round = total_players // 2
    total_pairings = len(pairings)
    total_expected = expected_per_round * len(rounds)
    summary = ValidationSummary(
        total_rounds=len(rounds),
        total_pairings=total_pairings,
        total_expected_pairings=total_expected,
        overall_valid=all(r.is_valid for r in rounds) and total_pairings == total_expected,
    )
    return ValidationReport(
        total_players=total_players,
        expected_pairings_per_round=expected_per_round,
        rounds=rounds,
        summary=summary,
    )
