"""SmartThermometer - reports a temperature reading."""

from dataclasses import dataclass
from typing import override

from devices.base import Device


@dataclass
class SmartThermometer(Device):
    name: str
    temperature: str  # raw reading as reported by the device, never parsed

    @override
    def report(self) -> str:
        return f"Thermometer: {self.name} and temperature is {self.temperature}"
