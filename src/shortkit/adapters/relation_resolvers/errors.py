"""Errors raised by relation resolver adapters."""


class RelationResolutionError(Exception):
    """Base class for relation resolution errors."""


class InvalidDomainError(RelationResolutionError):
    """Raised when a domain authority cannot be turned into a domain.

    Attributes:
        authority (str): The rejected authority.
        reason (str): Why it was rejected.
    """

    def __init__(self, authority: str, reason: str) -> None:
        super().__init__(f"Invalid domain authority {authority!r}: {reason}")
        self.authority = authority
        self.reason = reason
