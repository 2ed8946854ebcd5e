"""Request identities.

There is no role model: a request either carries the admin session token or it
does not.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """Base for all request identities."""

    @property
    def is_admin(self) -> bool:
        return False


@dataclass(frozen=True)
class Anonymous(Identity):
    """Public visitor."""


@dataclass(frozen=True)
class Administrator(Identity):
    """Request carrying a valid admin session."""

    @property
    def is_admin(self) -> bool:
        return True
