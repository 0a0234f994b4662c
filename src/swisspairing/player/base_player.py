"""A player on a tournament roster."""

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

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional

from dateutil.relativedelta import relativedelta

from swisspairing.constants import (
    DIVISION_JUNIOR,
    DIVISION_MASTER,
    DIVISION_SENIOR,
    DIVISIONS,
    JUNIOR_MAX_AGE,
    SENIOR_MAX_AGE,
)
from swisspairing.exceptions import InvalidPlayerDataException
from swisspairing.type_hints import Division
from swisspairing.utils import setup_logger
from swisspairing.utils.validation import validate_player_id, validate_player_name

logger = setup_logger(__name__)


def division_for_birth_date(date_of_birth: date, season_year: int) -> Division:
    """Age division for a season.

    Divisions go by the age a player reaches during the season year, so
    everyone born in the same year lands in the same division.
    """
    age_in_season = relativedelta(date(season_year, 12, 31), date_of_birth).years
    if age_in_season <= JUNIOR_MAX_AGE:
        return DIVISION_JUNIOR
    if age_in_season <= SENIOR_MAX_AGE:
        return DIVISION_SENIOR
    return DIVISION_MASTER


class Player:
    """Represents a player on a tournament roster.

    Identity is always the stable ``id``. The display name may collide with
    other players; :func:`swisspairing.pairing.queries.display_names`
    disambiguates it for presentation.

    Attributes:
        id: Stable, unique identifier (e.g. ``manraj-sidhu``)
        name: Display name
        country: Country, used to disambiguate shared names
        region: Competitive region
        rating: Optional seed rating, not used by the pairer
        dob: Date of birth
    """

    def __init__(
        self,
        id: str,
        name: str,
        country: Optional[str] = None,
        region: Optional[str] = None,
        rating: Optional[int] = None,
        date_of_birth: Optional[date] = None,
        division: Optional[str] = None,
    ) -> None:
        id_result = validate_player_id(id)
        if not id_result:
            raise InvalidPlayerDataException(id_result.error_message)
        name_result = validate_player_name(name)
        if not name_result:
            raise InvalidPlayerDataException(f"{id_result.sanitized_value}: {name_result.error_message}")
        if division is not None and division not in DIVISIONS:
            raise InvalidPlayerDataException(
                f"{id_result.sanitized_value}: unknown division '{division}'"
            )

        self.id: str = id_result.sanitized_value
        self.name: str = name_result.sanitized_value
        self.country: Optional[str] = country
        self.region: Optional[str] = region
        self.rating: Optional[int] = rating
        self.dob: Optional[date] = date_of_birth
        self._division: Optional[str] = division

    @property
    def age(self) -> Optional[int]:
        """Calculate age from date of birth.

        Returns:
            Player's age in years, or None if date of birth is unknown
        """
        if self.dob is None:
            logger.debug("%s has no date of birth set", self.name)
            return None
        return relativedelta(date.today(), self.dob).years

    @property
    def date_of_birth(self) -> Optional[date]:
        return self.dob

    @date_of_birth.setter
    def date_of_birth(self, value: Optional[date]) -> None:
        self.dob = value

    @property
    def division(self) -> Optional[str]:
        """Explicit division, else the one implied by date of birth this season."""
        if self._division is not None:
            return self._division
        if self.dob is not None:
            return division_for_birth_date(self.dob, date.today().year)
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player data to dictionary format.

        Date objects are converted to ISO format strings.
        """
        return {
            "id": self.id,
            "name": self.name,
            "country": self.country,
            "region": self.region,
            "rating": self.rating,
            "date_of_birth": self.dob.isoformat() if self.dob else None,
            "division": self._division,
        }

    @classmethod
    def from_dict(cls, player_data: Dict[str, Any]) -> "Player":
        """Create a Player from serialized dictionary data.

        Accepts ``displayName`` as an alias of ``name`` and ``dob`` as an
        alias of ``date_of_birth``.

        Raises:
            InvalidPlayerDataException: If required fields are missing or invalid
        """
        if "id" not in player_data:
            raise InvalidPlayerDataException(f"Player entry has no id: {player_data!r}")

        dob_value = player_data.get("date_of_birth") or player_data.get("dob")
        date_of_birth = None
        if isinstance(dob_value, date):
            date_of_birth = dob_value
        elif dob_value:
            try:
                date_of_birth = date.fromisoformat(str(dob_value))
            except ValueError:
                logger.warning(
                    "Invalid date of birth for %s: %s", player_data["id"], dob_value
                )

        return cls(
            id=player_data["id"],
            name=player_data.get("name") or player_data.get("displayName"),
            country=player_data.get("country"),
            region=player_data.get("region"),
            rating=player_data.get("rating"),
            date_of_birth=date_of_birth,
            division=player_data.get("division"),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Player(id='{self.id}', name='{self.name}', country={self.country!r})"

    def __str__(self) -> str:
        return self.name
