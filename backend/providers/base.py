"""DeviceInfoProvider abstract base class and the shared lookup helper."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping

from devices.base import Device

INFO_TEMPLATE = "Room: {room}, Device {report}"


def extract_info(room: str, device: str, devices: Mapping[str, Device]) -> str | None:
    """Format the status line of ``device`` if it is one of ``devices``."""
    found = devices.get(device)
    if found is None:
        return None
    return INFO_TEMPLATE.format(room=room, report=found.report())


def index_by_name(devices: Iterable[Device]) -> dict[str, Device]:
    return {device.name: device for device in devices}


class DeviceInfoProvider(ABC):
    """Source of status lines for a fixed set of devices.

    ``get_info`` looks devices up by name only; the room name is carried
    through into the formatted line and never used for matching.
    """

    @abstractmethod
    def required_devices(self) -> list[Device]: ...

    @abstractmethod
    def get_info(self, room: str, device: str) -> str | None: ...
