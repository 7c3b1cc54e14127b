"""Web adapter port."""

from abc import ABC, abstractmethod


class WebAdapter(ABC):
    """Port for the HTTP surface serving client info."""

    @abstractmethod
    async def start(self) -> None:
        """Start serving requests."""
        ...

    @abstractmethod
    async def stop(self) -> None:
        """Stop serving requests."""
        ...
