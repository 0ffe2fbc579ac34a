"""Devices that can be placed in rooms and queried by info providers."""

from devices.base import Device
from devices.socket import SmartSocket, SocketState
from devices.thermometer import SmartThermometer

__all__ = [
    "Device",
    "SmartSocket",
    "SmartThermometer",
    "SocketState",
]
