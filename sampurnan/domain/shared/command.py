"""Command and CommandHandler base classes with authorization gate."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from sampurnan.domain.shared.authorization.guard import HandlerMeta

if TYPE_CHECKING:
    from sampurnan.domain.shared.authorization.gate import Gate


class Command(BaseModel): ...


class Result(BaseModel): ...


C = TypeVar("C", bound=Command)
R = TypeVar("R", bound=Result)


class CommandHandler(Generic[C, R], metaclass=HandlerMeta):
    """Base class for command handlers. Subclasses are automatically dataclasses.

    Declare __auth__ to gate access:
        class DeleteThingHandler(CommandHandler[DeleteThing, ThingDeleted]):
            __auth__ = admin_only()
            identity: Identity
    """

    __auth__: ClassVar[Gate]

    @abstractmethod
    async def run(self, cmd: C) -> R: ...
