"""House model: rooms, the smart home and its report errors."""

from house.config import DEFAULT as DEFAULT_REPORT_CONFIG
from house.config import ReportConfig
from house.errors import HomeError, NoInfoProvided, NotFoundDevice, ReportError, UnknownRoom
from house.home import SmartHome
from house.room import Room

__all__ = [
    "DEFAULT_REPORT_CONFIG",
    "HomeError",
    "NoInfoProvided",
    "NotFoundDevice",
    "ReportConfig",
    "ReportError",
    "Room",
    "SmartHome",
    "UnknownRoom",
]
