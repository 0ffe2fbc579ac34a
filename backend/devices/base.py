"""Device abstract base class."""

from abc import ABC, abstractmethod


class Device(ABC):
    """Anything that can be referenced from a room and report its own status."""

    name: str

    @abstractmethod
    def report(self) -> str: ...
