"""Tests for the sample data factories."""

from data import create_sample_home, create_sample_providers
from providers import BorrowingDeviceInfoProvider


def test_sample_home_is_fresh_per_call() -> None:
    first = create_sample_home()
    first.get_room("Room 1").add_device("kettle")

    assert "kettle" not in create_sample_home().get_devices("Room 1")


def test_sample_providers_do_not_share_devices() -> None:
    first = create_sample_providers()["borrowing"]
    second = create_sample_providers()["borrowing"]
    assert isinstance(first, BorrowingDeviceInfoProvider)
    assert isinstance(second, BorrowingDeviceInfoProvider)

    first.thermo.temperature = "30.5"

    assert second.get_info("Room 2", "thermo") == "Room: Room 2, Device Thermometer: thermo and temperature is 27.0"
