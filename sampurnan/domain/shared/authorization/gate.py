"""Handler-level authorization gates: public() and admin_only()."""

from __future__ import annotations

from dataclasses import dataclass


class Gate:
    """Base for handler-level authorization gates.

    Every CommandHandler/QueryHandler must declare ``__auth__: ClassVar[Gate]``.
    """

    def allows(self, identity: object) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class Public(Gate):
    """No session required."""

    def allows(self, identity: object) -> bool:
        return True


@dataclass(frozen=True)
class AdminOnly(Gate):
    """Requires an admin session."""

    def allows(self, identity: object) -> bool:
        return bool(getattr(identity, "is_admin", False))


_PUBLIC = Public()
_ADMIN_ONLY = AdminOnly()


def public() -> Public:
    """Mark a handler as publicly accessible."""
    return _PUBLIC


def admin_only() -> AdminOnly:
    """Mark a handler as requiring an admin session."""
    return _ADMIN_ONLY
