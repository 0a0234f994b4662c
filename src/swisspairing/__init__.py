"""Swiss-system pairing generation, pinned pairings and pairing validation."""

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

from swisspairing.exceptions import (
    DuplicatePlayerException,
    FileLoadException,
    FileSaveException,
    InvalidConfigurationException,
    InvalidPairingException,
    InvalidPlayerDataException,
    RosterSizeError,
    RoundNotFoundException,
    SwissPairingException,
    UnknownPlayerError,
)
from swisspairing.models import (
    MatchResult,
    Pairing,
    PairingSide,
    PinnedPairing,
    Record,
    RoundValidation,
    TournamentConfig,
    ValidationReport,
    ValidationSummary,
)
from swisspairing.player import Player, RosterFactory
from swisspairing.tournament import RecordTracker, assign_result, win_probability
from swisspairing.pairing import (
    bucket_players,
    find_pairing,
    force_pairing,
    pair_round,
    pairings_for_player,
    sorted_bucket_keys,
)
from swisspairing.tournament.generator import TournamentGenerator, generate
from swisspairing.validation import format_validation_report, log_validation, validate_pairings
from swisspairing.utils.serialization import TournamentFile, load_tournament, save_tournament

__version__ = "0.1.0"

__all__ = [
    "DuplicatePlayerException",
    "FileLoadException",
    "FileSaveException",
    "InvalidConfigurationException",
    "InvalidPairingException",
    "InvalidPlayerDataException",
    "MatchResult",
    "Pairing",
    "PairingSide",
    "PinnedPairing",
    "Player",
    "Record",
    "RecordTracker",
    "RosterFactory",
    "RosterSizeError",
    "RoundNotFoundException",
    "RoundValidation",
    "SwissPairingException",
    "TournamentConfig",
    "TournamentFile",
    "TournamentGenerator",
    "UnknownPlayerError",
    "ValidationReport",
    "ValidationSummary",
    "assign_result",
    "bucket_players",
    "find_pairing",
    "force_pairing",
    "format_validation_report",
    "generate",
    "load_tournament",
    "log_validation",
    "pair_round",
    "pairings_for_player",
    "save_tournament",
    "sorted_bucket_keys",
    "validate_pairings",
    "win_probability",
]
