"""Transport — abstract base for whatever actually performs the upload."""
from abc import ABC, abstractmethod


class TransportError(OSError):
    """The transport ran but its output could not be obtained or decoded."""


class Transport(ABC):
    @abstractmethod
    async def invoke(self, args: list[str]) -> bytes:
        """Run one upload with the ordered session args and return the full
        combined output. Raises on failure to start or complete."""
        ...

    async def close(self) -> None:
        return None
