"""Device info providers consumed by SmartHome reports."""

from providers.base import INFO_TEMPLATE, DeviceInfoProvider, extract_info
from providers.borrowing import BorrowingDeviceInfoProvider
from providers.owning import OwningDeviceInfoProvider

__all__ = [
    "INFO_TEMPLATE",
    "BorrowingDeviceInfoProvider",
    "DeviceInfoProvider",
    "OwningDeviceInfoProvider",
    "extract_info",
]
