"""Exceptions for use in Swiss Pairing"""

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


# ========== Base Application Exception ==========


class SwissPairingException(Exception):
    """Base exception for all Swiss Pairing errors.

    All custom exceptions in the package inherit from this class, so callers
    can catch every library error with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(SwissPairingException):
    """Base exception for pairing-related errors."""

    pass


class InvalidPairingException(PairingException):
    """Raised when a pairing request or pairing list is malformed."""

    pass


class RosterSizeError(PairingException):
    """Raised when a roster cannot be paired (empty or odd-sized)."""

    def __init__(self, size: int):
        self.size = size
        if size == 0:
            message = "Cannot pair an empty roster"
        else:
            message = f"Cannot pair an odd-sized roster of {size} players (byes are not supported)"
        super().__init__(message)


# ========== Tournament Exceptions ==========


class TournamentException(SwissPairingException):
    """Base exception for tournament-related errors."""

    pass


class RoundNotFoundException(TournamentException):
    """Raised when a requested round does not exist."""

    pass


class DuplicatePlayerException(TournamentException):
    """Raised when the same player id appears twice in a roster."""

    pass


# ========== Player Exceptions ==========


class PlayerException(SwissPairingException):
    """Base exception for player-related errors."""

    pass


class UnknownPlayerError(PlayerException):
    """Raised when a player id is not part of the round or roster."""

    def __init__(self, player_id: str, round_number: int = None):
        self.player_id = player_id
        self.round_number = round_number
        if round_number is None:
            message = f"Unknown player: {player_id}"
        else:
            message = f"Player {player_id} is not paired in round {round_number}"
        super().__init__(message)


class InvalidPlayerDataException(PlayerException):
    """Raised when player data is invalid or incomplete."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(SwissPairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(SwissPairingException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass
