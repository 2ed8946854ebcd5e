"""Shared machinery for command/query handlers: auto-dataclass plus __auth__ gate."""

import logging
from abc import ABCMeta
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from functools import wraps
from typing import Any, dataclass_transform

logger = logging.getLogger("sampurnan.authz")

# Unbound async handler method: (self, cmd) -> Coroutine -> Result
_HandlerMethod = Callable[..., Coroutine[Any, Any, Any]]


def wrap_run_with_gate(original_run: _HandlerMethod) -> _HandlerMethod:
    """Wrap a handler's run() with evaluation of its class-level __auth__ gate."""

    @wraps(original_run)
    async def gated_run(self: Any, cmd: Any) -> Any:
        from sampurnan.domain.shared.authorization.gate import Gate, Public
        from sampurnan.domain.shared.error import AuthorizationError, ConfigurationError

        gate = getattr(type(self), "__auth__", None)
        if not isinstance(gate, Gate):
            raise ConfigurationError(f"Handler {type(self).__name__} has no __auth__ declaration")

        if isinstance(gate, Public):
            return await original_run(self, cmd)

        identity = getattr(self, "identity", None)
        logger.debug("Auth check: handler=%s, identity=%s", type(self).__name__, identity)
        if not gate.allows(identity):
            raise AuthorizationError(
                f"Admin session required for {type(self).__name__}",
                code="missing_session",
            )
        return await original_run(self, cmd)

    return gated_run


@dataclass_transform()
class HandlerMeta(ABCMeta):
    """Metaclass that combines ABC with auto-dataclass and __auth__ gate for subclasses."""

    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: dict[str, Any]):
        cls = super().__new__(mcs, name, bases, namespace)
        if any(isinstance(b, mcs) for b in bases):
            cls = dataclass(cls)
            original_run = cls.__dict__.get("run")
            if original_run is not None:
                cls.run = wrap_run_with_gate(original_run)
        return cls
