"""Room - a named set of device-name references."""

import logging
from collections.abc import Iterable

logger = logging.getLogger(__name__)


class Room:
    """A named collection of device names.

    Rooms never hold devices themselves, only the names info providers know
    them by. Two rooms are equal when their names are equal.
    """

    def __init__(self, name: str, devices: Iterable[str] = ()) -> None:
        self._name = name
        self._devices: set[str] = set(devices)

    @property
    def name(self) -> str:
        return self._name

    @property
    def devices(self) -> frozenset[str]:
        return frozenset(self._devices)

    def has_device(self, device_name: str) -> bool:
        return device_name in self._devices

    def add_device(self, device_name: str) -> bool:
        """Add a device name; returns False if the room already had it."""
        if device_name in self._devices:
            logger.debug("Room %r already has device %r", self.name, device_name)
            return False
        self._devices.add(device_name)
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Room):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Room(name={self.name!r}, devices={sorted(self._devices)!r})"
