"""BorrowingDeviceInfoProvider - reports on devices owned elsewhere."""

from typing import override

from devices.base import Device
from devices.socket import SmartSocket
from devices.thermometer import SmartThermometer
from providers.base import DeviceInfoProvider, extract_info, index_by_name


class BorrowingDeviceInfoProvider(DeviceInfoProvider):
    """Provider holding references to a socket and a thermometer it does not own.

    Reports always reflect the current state of the referenced objects.
    """

    def __init__(self, socket: SmartSocket, thermo: SmartThermometer) -> None:
        self.socket = socket
        self.thermo = thermo

    @override
    def required_devices(self) -> list[Device]:
        return [self.socket, self.thermo]

    @override
    def get_info(self, room: str, device: str) -> str | None:
        return extract_info(room, device, index_by_name([self.socket, self.thermo]))
