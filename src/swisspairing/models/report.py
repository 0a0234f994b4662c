"""Validation report data classes."""

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


@dataclass
class RoundValidation:
    """Structural audit of a single round."""

    round: int
    actual_pairings: int
    expected_pairings: int
    actual_players: int
    expected_players: int
    issues: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.issues

    def to_dict(self) -> Dict[str, Any]:
        return {
            "round": self.round,
            "actualPairings": self.actual_pairings,
            "expectedPairings": self.expected_pairings,
            "actualPlayers": self.actual_players,
            "expectedPlayers": self.expected_players,
            "isValid": self.is_valid,
            "issues": list(self.issues),
        }


@dataclass
class ValidationSummary:
    """Totals across every audited round."""

    total_rounds: int
    total_pairings: int
    total_expected_pairings: int
    overall_valid: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalRounds": self.total_rounds,
            "totalPairings": self.total_pairings,
            "totalExpectedPairings": self.total_expected_pairings,
            "overallValid": self.overall_valid,
        }


@dataclass
class ValidationReport:
    """Complete validation report for a pairing list."""

    total_players: int
    expected_pairings_per_round: int
    rounds: List[RoundValidation]
    summary: ValidationSummary

    @property
    def is_valid(self) -> bool:
        return self.summary.overall_valid

    @property
    def invalid_rounds(self) -> List[RoundValidation]:
        return [r for r in self.rounds if not r.is_valid]

    def round_report(self, round_number: int) -> Optional[RoundValidation]:
        """Return the audit of one round, or None if the round was not present."""
        for round_validation in self.rounds:
            if round_validation.round == round_number:
                return round_validation
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "isValid": self.is_valid,
            "totalPlayers": self.total_players,
            "expectedPairingsPerRound": self.expected_pairings_per_round,
            "rounds": [r.to_dict() for r in self.rounds],
            "summary": self.summary.to_dict(),
        }
