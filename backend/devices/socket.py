"""SmartSocket - on/off power socket."""

import dataclasses
from dataclasses import dataclass
from enum import StrEnum
from typing import Self, override

from devices.base import Device


class SocketState(StrEnum):
    ON = "On"
    OFF = "Off"


@dataclass(frozen=True)
class SmartSocket(Device):
    """A socket that is either on or off.

    Switching returns a new socket; the original value is never mutated.
    """

    name: str
    state: SocketState = SocketState.OFF

    @override
    def report(self) -> str:
        return f"Socket: {self.name} and state is {self.state}"

    def turn_on(self) -> Self:
        return dataclasses.replace(self, state=SocketState.ON)

    def turn_off(self) -> Self:
        return dataclasses.replace(self, state=SocketState.OFF)

    @property
    def is_on(self) -> bool:
        return self.state == SocketState.ON
