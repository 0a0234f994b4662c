"""Validation utilities for Swiss Pairing.

This module provides reusable input validation functions with consistent
error handling. They check caller input; auditing finished pairing lists is
the job of :mod:`swisspairing.validation.validator`.
"""

import re
from typing import Optional

from swisspairing.constants import MAX_ROUNDS, MIN_ROUNDS


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Optional[str] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Player Id Validation ==========


def validate_player_id(player_id: Optional[str]) -> ValidationResult:
    """Validate a stable player id.

    Ids are slugs such as ``manraj-sidhu`` or ``p42``: letters, digits,
    dashes, underscores and dots, no whitespace.

    Example:
        >>> bool(validate_player_id("david-kim"))
        True
        >>> bool(validate_player_id("david kim"))
        False
    """
    if player_id is None or not str(player_id).strip():
        return ValidationResult(is_valid=False, error_message="Player id is required")

    player_id = str(player_id).strip()
    if re.match(r"^[A-Za-z0-9][A-Za-z0-9._-]*$", player_id):
        return ValidationResult(is_valid=True, sanitized_value=player_id)

    return ValidationResult(
        is_valid=False,
        error_message=f"Invalid player id '{player_id}'. Use letters, digits, '-', '_' or '.'",
    )


# ========== Name Validation ==========


def validate_player_name(name: Optional[str]) -> ValidationResult:
    """Validate a display name, collapsing internal whitespace."""
    if name is None or not name.strip():
        return ValidationResult(is_valid=False, error_message="Player name is required")

    cleaned = " ".join(name.split())
    if len(cleaned) > 100:
        return ValidationResult(
            is_valid=False,
            error_message=f"Player name too long ({len(cleaned)} characters, max 100)",
        )
    return ValidationResult(is_valid=True, sanitized_value=cleaned)


# ========== Round Count ==========


def clamp_round_count(total_rounds: int) -> int:
    """Clamp a requested round count into the supported range.

    Out-of-range values are normalized, not rejected.

    Example:
        >>> clamp_round_count(12)
        8
        >>> clamp_round_count(0)
        1
    """
    return max(MIN_ROUNDS, min(MAX_ROUNDS, int(total_rounds)))
