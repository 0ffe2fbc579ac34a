"""Sample house, devices and providers for the API and tests."""

from devices import SmartSocket, SmartThermometer, SocketState
from house import Room, SmartHome
from providers import BorrowingDeviceInfoProvider, DeviceInfoProvider, OwningDeviceInfoProvider


def create_sample_home() -> SmartHome:
    """Create a fresh two-room house; rooms share ``socket_2``."""
    home = SmartHome("House :)")
    home.add_room(Room("Room 1", ["socket_1", "socket_2"]))
    home.add_room(Room("Room 2", ["thermo", "socket_2"]))
    return home


def create_sample_providers() -> dict[str, DeviceInfoProvider]:
    """One provider of each kind over fresh devices, keyed by the id the API exposes them under."""
    socket_1 = SmartSocket("socket_1", SocketState.ON)
    socket_2 = SmartSocket("socket_2", SocketState.OFF)
    thermo = SmartThermometer("thermo", "27.0")
    return {
        "owning": OwningDeviceInfoProvider(socket_1),
        "borrowing": BorrowingDeviceInfoProvider(socket_2, thermo),
    }
