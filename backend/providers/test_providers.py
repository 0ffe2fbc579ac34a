"""Tests for device info providers."""

from devices import SmartSocket, SmartThermometer, SocketState
from providers import BorrowingDeviceInfoProvider, OwningDeviceInfoProvider, extract_info


def test_owning_provider_reports_its_socket() -> None:
    provider = OwningDeviceInfoProvider(SmartSocket("socket_1", SocketState.ON))

    info = provider.get_info("room", "socket_1")

    assert info == "Room: room, Device Socket: socket_1 and state is On"
    assert [d.name for d in provider.required_devices()] == ["socket_1"]


def test_borrowing_provider_reports_both_devices() -> None:
    socket = SmartSocket("socket_1", SocketState.ON)
    thermo = SmartThermometer("thermo", "27.6")
    provider = BorrowingDeviceInfoProvider(socket, thermo)

    assert provider.get_info("room", "socket_1") == "Room: room, Device Socket: socket_1 and state is On"
    assert provider.get_info("room", "thermo") == "Room: room, Device Thermometer: thermo and temperature is 27.6"
    assert [d.name for d in provider.required_devices()] == ["socket_1", "thermo"]


def test_unknown_device_gives_no_info() -> None:
    owning = OwningDeviceInfoProvider(SmartSocket("socket_1", SocketState.ON))
    borrowing = BorrowingDeviceInfoProvider(SmartSocket("socket_2"), SmartThermometer("thermo", "20"))

    assert owning.get_info("room", "not_found") is None
    assert borrowing.get_info("room", "not_found") is None


def test_room_name_is_not_used_for_lookup() -> None:
    provider = OwningDeviceInfoProvider(SmartSocket("socket_1", SocketState.ON))

    assert provider.get_info("anywhere", "socket_1") == "Room: anywhere, Device Socket: socket_1 and state is On"


def test_owning_and_borrowing_agree_on_same_state() -> None:
    socket = SmartSocket("socket_1", SocketState.OFF)
    owning = OwningDeviceInfoProvider(socket)
    borrowing = BorrowingDeviceInfoProvider(socket, SmartThermometer("thermo", "21"))

    assert owning.get_info("Hall", "socket_1") == borrowing.get_info("Hall", "socket_1")


def test_borrowing_provider_sees_caller_changes() -> None:
    thermo = SmartThermometer("thermo", "20.0")
    provider = BorrowingDeviceInfoProvider(SmartSocket("socket_1"), thermo)

    thermo.temperature = "22.5"

    assert provider.get_info("room", "thermo") == "Room: room, Device Thermometer: thermo and temperature is 22.5"


def test_extract_info_without_devices() -> None:
    assert extract_info("room", "socket_1", {}) is None
