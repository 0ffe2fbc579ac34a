"""SmartHome - owns the rooms and assembles provider reports."""

import logging
from collections.abc import Sequence

from house.config import DEFAULT, ReportConfig
from house.errors import NoInfoProvided, NotFoundDevice, UnknownRoom
from house.room import Room
from providers.base import DeviceInfoProvider

logger = logging.getLogger(__name__)


class SmartHome:
    """A house made of uniquely-named rooms.

    The house never sees devices directly: rooms name them, and a
    ``DeviceInfoProvider`` supplies their status when a report is requested.
    """

    def __init__(self, description: str, config: ReportConfig = DEFAULT) -> None:
        self.description = description
        self.config = config
        self._rooms: dict[str, Room] = {}

    @property
    def rooms(self) -> Sequence[Room]:
        return tuple(self._rooms.values())

    def add_room(self, room: Room) -> bool:
        """Add a room unless one with the same name exists; returns whether it was added."""
        if room.name in self._rooms:
            logger.debug("House %r already has room %r, ignoring", self.description, room.name)
            return False
        self._rooms[room.name] = room
        return True

    def get_room(self, room_name: str) -> Room:
        try:
            return self._rooms[room_name]
        except KeyError:
            raise UnknownRoom(room_name) from None

    def get_devices(self, room_name: str) -> frozenset[str]:
        return self.get_room(room_name).devices

    def create_report(self, provider: DeviceInfoProvider) -> str:
        """Build a text report of every device the provider requires.

        Each required device gets one line per room that references it.
        Devices in rooms that the provider does not require are skipped.

        Raises:
            NoInfoProvided: a room references a required device but the
                provider returned no info for it.
            NotFoundDevice: a required device is not referenced by any room.
        """
        # Duplicate required names share a single slot.
        lines_by_device: dict[str, list[str]] = {device.name: [] for device in provider.required_devices()}
        logger.debug("Creating report of %r for devices %s", self.description, list(lines_by_device))

        for room in self._rooms.values():
            for device_name in room.devices:
                lines = lines_by_device.get(device_name)
                if lines is None:
                    continue
                info = provider.get_info(room.name, device_name)
                if info is None:
                    logger.info("Report of %r failed: no info for %r in %r", self.description, device_name, room.name)
                    raise NoInfoProvided(device_name)
                lines.append(info)

        for device_name, lines in lines_by_device.items():
            if not lines:
                logger.info("Report of %r failed: %r is not in any room", self.description, device_name)
                raise NotFoundDevice(device_name)

        report = [self.config.header(self.description)]
        for lines in lines_by_device.values():
            report.extend(lines)
        return self.config.line_separator.join(report)
