"""Tests for handler __auth__ gates and their startup validation."""

import pytest

from sampurnan.domain.auth.model.identity import Administrator, Anonymous, Identity
from sampurnan.domain.shared.authorization.gate import admin_only, public
from sampurnan.domain.shared.authorization.startup import check_handler_class, validate_all_handlers
from sampurnan.domain.shared.command import Command, CommandHandler, Result
from sampurnan.domain.shared.error import AuthorizationError, ConfigurationError


class Ping(Command):
    pass


class Pong(Result):
    pass


class AdminPingHandler(CommandHandler[Ping, Pong]):
    __auth__ = admin_only()
    identity: Identity

    async def run(self, cmd: Ping) -> Pong:
        return Pong()


class PublicPingHandler(CommandHandler[Ping, Pong]):
    __auth__ = public()

    async def run(self, cmd: Ping) -> Pong:
        return Pong()


class TestGate:
    async def test_admin_handler_rejects_anonymous(self):
        with pytest.raises(AuthorizationError) as exc_info:
            await AdminPingHandler(identity=Anonymous()).run(Ping())
        assert exc_info.value.code == "missing_session"

    async def test_admin_handler_allows_administrator(self):
        assert await AdminPingHandler(identity=Administrator()).run(Ping()) == Pong()

    async def test_public_handler_needs_no_identity(self):
        assert await PublicPingHandler().run(Ping()) == Pong()


class TestStartupValidation:
    def test_handler_without_gate_is_rejected(self):
        bare = type("BareHandler", (), {})
        with pytest.raises(ConfigurationError, match="BareHandler"):
            check_handler_class(bare)

    def test_all_application_handlers_declare_a_gate(self):
        # Importing the app registers every handler subclass.
        import sampurnan.application.api.rest.app  # noqa: F401

        validate_all_handlers()
