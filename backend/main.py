"""FastAPI entry point - thin layer over the domain."""

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from data import create_sample_home, create_sample_providers
from house import ReportError, Room, SmartHome, UnknownRoom
from providers import DeviceInfoProvider

logging.basicConfig(level=logging.WARNING, format="%(name)s | %(message)s")
logging.getLogger("house").setLevel(logging.INFO)

app = FastAPI(title="Smart Home Report API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- module-level state, initialised at import time ---
home: SmartHome = create_sample_home()
providers: dict[str, DeviceInfoProvider] = create_sample_providers()


class RoomModel(BaseModel):
    name: str
    devices: list[str] = []


class HomeModel(BaseModel):
    description: str
    rooms: list[RoomModel]


class AddDeviceRequest(BaseModel):
    device: str


class AddedResponse(BaseModel):
    added: bool


class ProviderModel(BaseModel):
    id: str
    required_devices: list[str]


class ReportResponse(BaseModel):
    report: str


def _room_model(room: Room) -> RoomModel:
    return RoomModel(name=room.name, devices=sorted(room.devices))


def _get_provider(provider_id: str) -> DeviceInfoProvider:
    provider = providers.get(provider_id)
    if provider is None:
        raise HTTPException(status_code=404, detail=f"Provider '{provider_id}' not found")
    return provider


@app.get("/home")
def get_home() -> HomeModel:
    return HomeModel(description=home.description, rooms=[_room_model(r) for r in home.rooms])


@app.post("/rooms")
def add_room(room: RoomModel) -> AddedResponse:
    return AddedResponse(added=home.add_room(Room(room.name, room.devices)))


@app.post("/rooms/{room_name}/devices")
def add_device(room_name: str, request: AddDeviceRequest) -> AddedResponse:
    try:
        room = home.get_room(room_name)
    except UnknownRoom as e:
        raise HTTPException(status_code=404, detail=str(e))
    return AddedResponse(added=room.add_device(request.device))


@app.get("/providers")
def list_providers() -> list[ProviderModel]:
    return [
        ProviderModel(id=pid, required_devices=[d.name for d in p.required_devices()]) for pid, p in providers.items()
    ]


@app.get("/reports/{provider_id}")
def get_report(provider_id: str) -> ReportResponse:
    """Create the house report for one of the registered providers."""
    provider = _get_provider(provider_id)
    try:
        return ReportResponse(report=home.create_report(provider))
    except ReportError as e:
        raise HTTPException(status_code=422, detail={"error": e.kind, "device": e.device_name})
