from abc import abstractmethod
from collections.abc import AsyncIterator
from typing import Protocol

from sampurnan.domain.shared.port import Port


class Storyteller(Port, Protocol):
    """Streams a short imaginative narrative about a manuscript."""

    @property
    @abstractmethod
    def enabled(self) -> bool:
        """False when the generative service has no credentials configured."""
        ...

    @abstractmethod
    def stream_story(self, title: str, description: str) -> AsyncIterator[str]: ...
