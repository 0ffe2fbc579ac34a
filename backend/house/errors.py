"""Exceptions raised by the house model."""


class HomeError(Exception):
    """Base class for all smart-home errors."""


class ReportError(HomeError):
    """A report could not be assembled for the given provider.

    No partial report is ever produced; ``device_name`` names the device that
    stopped the report.
    """

    def __init__(self, device_name: str) -> None:
        super().__init__(device_name)
        self.device_name = device_name

    @property
    def kind(self) -> str:
        return type(self).__name__


class NoInfoProvided(ReportError):
    """A room references a required device but the provider returned nothing for it."""

    def __str__(self) -> str:
        return f"No info provided for device '{self.device_name}'"


class NotFoundDevice(ReportError):
    """A required device is not referenced by any room of the house."""

    def __str__(self) -> str:
        return f"Device '{self.device_name}' not found in any room"


class UnknownRoom(HomeError):
    def __init__(self, room_name: str) -> None:
        super().__init__(room_name)
        self.room_name = room_name

    def __str__(self) -> str:
        return f"Room '{self.room_name}' does not exist"
