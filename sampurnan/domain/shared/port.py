from typing import Protocol


class Port(Protocol):
    """Marker for boundaries implemented by infrastructure adapters."""
