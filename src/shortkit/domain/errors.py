"""Domain-layer error definitions."""

from enum import Enum

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidTransitionError(DomainError):
    """Raised when an aggregate is in an invalid state for the attempted action."""


# ============================================================================
#                       ShortUrl related errors
# ============================================================================


class RegenerationBlockedReason(Enum):
    """Why a short code could not be regenerated."""

    CUSTOM_SLUG = "custom_slug"
    ALREADY_PERSISTED = "already_persisted"


class ShortCodeCannotBeRegenerated(InvalidTransitionError):
    """Raised when regenerating the short code of a short URL is not allowed.

    Attributes:
        reason (RegenerationBlockedReason): The rule that blocked regeneration.
    """

    _MESSAGES = {
        RegenerationBlockedReason.CUSTOM_SLUG: (
            "The short code cannot be regenerated on short URLs where a custom "
            "slug was provided."
        ),
        RegenerationBlockedReason.ALREADY_PERSISTED: (
            "The short code can be regenerated only on new short URLs which "
            "have not been persisted yet."
        ),
    }

    def __init__(self, reason: RegenerationBlockedReason) -> None:
        super().__init__(self._MESSAGES[reason])
        self.reason = reason

    @classmethod
    def for_short_url_with_custom_slug(cls) -> "ShortCodeCannotBeRegenerated":
        """Build the error for short URLs created with a user-chosen slug."""
        return cls(RegenerationBlockedReason.CUSTOM_SLUG)

    @classmethod
    def for_short_url_already_persisted(cls) -> "ShortCodeCannotBeRegenerated":
        """Build the error for short URLs that already have an identity."""
        return cls(RegenerationBlockedReason.ALREADY_PERSISTED)


class ShortUrlAlreadyPersistedError(InvalidTransitionError):
    """Raised when a persisted short URL is given a different identity."""

    def __init__(self, current_id: int | str, new_id: int | str) -> None:
        super().__init__(
            f"Short URL is already persisted with ID '{current_id}', "
            f"cannot rebind it to '{new_id}'."
        )
        self.current_id = current_id
        self.new_id = new_id
