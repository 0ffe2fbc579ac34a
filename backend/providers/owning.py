"""OwningDeviceInfoProvider - holds its own socket."""

from typing import override

from devices.base import Device
from devices.socket import SmartSocket
from providers.base import DeviceInfoProvider, extract_info, index_by_name


class OwningDeviceInfoProvider(DeviceInfoProvider):
    """Provider that owns a single socket value."""

    def __init__(self, socket: SmartSocket) -> None:
        self.socket = socket

    @override
    def required_devices(self) -> list[Device]:
        return [self.socket]

    @override
    def get_info(self, room: str, device: str) -> str | None:
        return extract_info(room, device, index_by_name([self.socket]))
