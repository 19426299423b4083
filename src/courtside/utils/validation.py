"""Validation utilities for Courtside.

This module provides reusable validation functions with consistent error handling.
"""

from typing import Optional, Type

from courtside.constants import MIN_TOURNAMENT_PLAYERS
from courtside.exceptions import CourtsideException, InvalidTournamentException
from courtside.type_hints import Roster


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


# ========== Identifier Validation ==========


def validate_identifier(value: Optional[str], label: str = "ID") -> ValidationResult:
    """Validate an opaque identifier (player, team, venue or match id).

    Identifiers are compared as strings; surrounding whitespace is not
    significant, an empty value is never valid.

    Args:
        value: Identifier to validate
        label: Name used in the error message

    Returns:
        ValidationResult with the stripped identifier

    Example:
        >>> result = validate_identifier("  venue-1 ", "venue ID")
        >>> result.sanitized_value
        'venue-1'
    """
    if value is None or not str(value).strip():
        return ValidationResult(
            is_valid=False,
            error_message=f"{label} is required",
        )
    return ValidationResult(is_valid=True, sanitized_value=str(value).strip())


def validate_identifier_strict(
    value: Optional[str],
    label: str = "ID",
    exception_type: Type[CourtsideException] = CourtsideException,
) -> str:
    """Validate an identifier and return it, or raise ``exception_type``.

    Raises:
        CourtsideException: (or the given subclass) if the identifier is empty
    """
    result = validate_identifier(value, label)
    if not result.is_valid:
        raise exception_type(result.error_message)
    return result.sanitized_value or ""


# ========== Roster Validation ==========


def validate_doubles_roster(player_ids: Roster) -> ValidationResult:
    """Validate a player roster for a doubles tournament.

    A roster needs at least four players, an even count so that every player
    has a partner, and distinct non-empty ids.

    Args:
        player_ids: Player ids in registration order

    Returns:
        ValidationResult with validation status
    """
    if len(player_ids) < MIN_TOURNAMENT_PLAYERS:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"minimum {MIN_TOURNAMENT_PLAYERS} players required for tournament"
            ),
        )

    if len(player_ids) % 2 != 0:
        return ValidationResult(
            is_valid=False,
            error_message="player count must be even for doubles",
        )

    seen = set()
    for player_id in player_ids:
        if not validate_identifier(player_id):
            return ValidationResult(
                is_valid=False,
                error_message="player roster contains an empty player ID",
            )
        if player_id in seen:
            return ValidationResult(
                is_valid=False,
                error_message=f"player {player_id} is listed more than once",
            )
        seen.add(player_id)

    return ValidationResult(is_valid=True)


def validate_doubles_roster_strict(
    player_ids: Roster,
    exception_type: Type[CourtsideException] = InvalidTournamentException,
) -> None:
    """Validate a doubles roster and raise ``exception_type`` if invalid."""
    result = validate_doubles_roster(player_ids)
    if not result.is_valid:
        raise exception_type(result.error_message)
