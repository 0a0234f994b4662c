"""Reading and writing tournament files.

A tournament file is a JSON document::

    {"config": {...}, "players": [...], "pairings": [...]}

A roster file is either a bare JSON list of player entries or an object with
a ``players`` key.
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

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

from swisspairing.constants import SAVE_FILE_EXTENSION
from swisspairing.exceptions import (
    FileLoadException,
    FileSaveException,
    SwissPairingException,
)
from swisspairing.models.pairing import Pairing
from swisspairing.models.tournament_config import TournamentConfig
from swisspairing.player.base_player import Player
from swisspairing.player.factory import create_roster_from_dicts
from swisspairing.utils.logging import setup_logger

logger = setup_logger(__name__)

PathLike = Union[str, Path]


@dataclass
class TournamentFile:
    """Everything stored in a tournament file."""

    config: TournamentConfig = field(default_factory=TournamentConfig)
    players: List[Player] = field(default_factory=list)
    pairings: List[Pairing] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "config": self.config.to_dict(),
            "players": [player.to_dict() for player in self.players],
            "pairings": [pairing.to_dict() for pairing in self.pairings],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentFile":
        return cls(
            config=TournamentConfig.from_dict(data.get("config") or {}),
            players=create_roster_from_dicts(data.get("players") or []),
            pairings=[Pairing.from_dict(p) for p in data.get("pairings") or []],
        )


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise FileLoadException(f"File not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise FileLoadException(f"Could not read {path}: {e}") from e


def _write_json(path: Path, data: Any) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise FileSaveException(f"Could not write {path}: {e}") from e


def load_tournament(path: PathLike) -> TournamentFile:
    """Load a tournament file.

    Raises:
        FileLoadException: If the file is missing, unreadable, or malformed
    """
    path = Path(path)
    data = _read_json(path)
    if not isinstance(data, dict):
        raise FileLoadException(f"{path} does not contain a tournament object")
    try:
        tournament = TournamentFile.from_dict(data)
    except SwissPairingException as e:
        raise FileLoadException(f"Invalid tournament file {path}: {e}") from e
    except (KeyError, TypeError, ValueError) as e:
        raise FileLoadException(f"Invalid tournament file {path}: {e!r}") from e
    logger.info(
        "Loaded %s: %s players, %s pairings",
        path,
        len(tournament.players),
        len(tournament.pairings),
    )
    return tournament


def save_tournament(tournament: TournamentFile, path: PathLike) -> Path:
    """Write a tournament file and return its path.

    A path without a suffix gets ``.json`` appended.
    """
    path = Path(path)
    if not path.suffix:
        path = path.with_suffix(SAVE_FILE_EXTENSION)
    _write_json(path, tournament.to_dict())
    logger.info("Tournament saved to: %s", path)
    return path


def load_roster(path: PathLike) -> List[Player]:
    """Load a roster from a list of player entries or a ``{"players": [...]}`` object."""
    path = Path(path)
    data = _read_json(path)
    entries = data.get("players") if isinstance(data, dict) else data
    if not isinstance(entries, list):
        raise FileLoadException(f"{path} does not contain a player list")
    try:
        return create_roster_from_dicts(entries)
    except SwissPairingException as e:
        raise FileLoadException(f"Invalid roster file {path}: {e}") from e


def load_config(path: PathLike) -> TournamentConfig:
    """Load a :class:`TournamentConfig` from a JSON file."""
    path = Path(path)
    data = _read_json(path)
    if not isinstance(data, dict):
        raise FileLoadException(f"{path} does not contain a configuration object")
    try:
        return TournamentConfig.from_dict(data)
    except SwissPairingException as e:
        raise FileLoadException(f"Invalid configuration file {path}: {e}") from e
