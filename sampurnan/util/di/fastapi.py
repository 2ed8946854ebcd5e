"""Dishka integration for FastAPI using Scope.UOW per request."""

from dishka import AsyncContainer
from starlette.requests import Request
from starlette.types import ASGIApp, Receive, Scope, Send

from sampurnan.util.di.scope import Scope as SampurnanScope


class ContainerMiddleware:
    """ASGI middleware opening a Scope.UOW container for each HTTP request.

    Stands in for dishka.integrations.starlette.ContainerMiddleware, which
    only knows dishka's own REQUEST scope.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            return await self.app(scope, receive, send)

        request = Request(scope, receive=receive, send=send)
        async with request.app.state.dishka_container(
            {Request: request},
            scope=SampurnanScope.UOW,
        ) as request_container:
            request.state.dishka_container = request_container
            return await self.app(scope, receive, send)


def setup_dishka(container: AsyncContainer, app) -> None:
    app.add_middleware(ContainerMiddleware)
    app.state.dishka_container = container
