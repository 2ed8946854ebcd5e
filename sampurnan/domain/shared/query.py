"""Query and QueryHandler base classes with authorization gate."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from sampurnan.domain.shared.authorization.guard import HandlerMeta

if TYPE_CHECKING:
    from sampurnan.domain.shared.authorization.gate import Gate


class Query(BaseModel): ...


class Result(BaseModel): ...


Q = TypeVar("Q", bound=Query)
R = TypeVar("R", bound=Result)


class QueryHandler(Generic[Q, R], metaclass=HandlerMeta):
    """Base class for query handlers. Subclasses are automatically dataclasses."""

    __auth__: ClassVar[Gate]

    @abstractmethod
    async def run(self, cmd: Q) -> R: ...
