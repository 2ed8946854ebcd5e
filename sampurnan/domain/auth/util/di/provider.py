"""DI provider resolving the request identity from the admin bearer token."""

import hmac
import logging

from dishka import from_context, provide
from starlette.requests import Request

from sampurnan.config import Config
from sampurnan.domain.auth.model.identity import Administrator, Anonymous, Identity
from sampurnan.util.di.base import Provider
from sampurnan.util.di.scope import Scope

logger = logging.getLogger(__name__)

_BEARER = "Bearer "


def resolve_identity(authorization: str | None, admin_token: str) -> Identity:
    """Administrator when the bearer token equals the configured one, else Anonymous."""
    if not admin_token or not authorization or not authorization.startswith(_BEARER):
        return Anonymous()
    presented = authorization[len(_BEARER) :].strip()
    if hmac.compare_digest(presented.encode(), admin_token.encode()):
        return Administrator()
    logger.debug("Bearer token presented but does not match the admin token")
    return Anonymous()


class AuthProvider(Provider):
    request = from_context(provides=Request, scope=Scope.UOW)

    @provide(scope=Scope.UOW)
    def get_identity(self, request: Request, config: Config) -> Identity:
        return resolve_identity(request.headers.get("Authorization"), config.admin.token)
