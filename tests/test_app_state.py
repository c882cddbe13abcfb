import httpx
import pytest

from partshop.schemas.inventory import BikeSection, VehicleType
from partshop.services.app_state import AppState
from partshop.services.auth import AuthSession
from partshop.services.coordinator import InventoryCoordinator
from partshop.services.store import HttpItemStore
from partshop.testing.testing_mocks import InMemoryItemStore

from conftest import make_item


@pytest.fixture
def store():
    return InMemoryItemStore([
        make_item("1", name="Tire", section=BikeSection.WHEELS),
        make_item("2", name="Brake", section=BikeSection.COCKPIT, quantity=0),
        make_item("3", name="Spark Plug", vehicle_type=VehicleType.MOTORBIKE, section=BikeSection.DRIVETRAIN),
    ])


@pytest.fixture
def state(tmp_path, store):
    auth = AuthSession(tmp_path / "auth.json", username="aa", password="1234")
    return AppState(auth, InventoryCoordinator(store))


@pytest.mark.asyncio
async def test_login_loads_collection_once(state, store):
    assert await state.login("aa", "1234") is True
    assert store.operations() == ["list"]
    assert len(state.coordinator.items) == 3


@pytest.mark.asyncio
async def test_failed_login_does_not_load(state, store):
    assert await state.login("aa", "wrong") is False
    assert store.calls == []
    assert state.auth.last_error


@pytest.mark.asyncio
async def test_startup_loads_only_when_authenticated(state, store):
    await state.startup()
    assert store.calls == []

    state.auth.login("aa", "1234")
    await state.startup()
    assert store.operations() == ["list"]


@pytest.mark.asyncio
async def test_view_follows_filters(state):
    await state.login("aa", "1234")

    assert [i.id for i in state.view.filtered_items] == ["1", "2"]
    assert state.view.out_of_stock_count == 1

    state.select_section(BikeSection.WHEELS)
    assert [i.id for i in state.view.filtered_items] == ["1"]

    state.search("brake")
    assert state.view.filtered_items == []


@pytest.mark.asyncio
async def test_switching_vehicle_clears_section(state):
    await state.login("aa", "1234")
    state.select_section(BikeSection.WHEELS)

    state.set_vehicle_type(VehicleType.MOTORBIKE)

    assert state.selected_section is None
    assert [i.id for i in state.view.filtered_items] == ["3"]


def test_logout(state):
    state.auth.login("aa", "1234")
    state.logout()
    assert state.auth.is_authenticated is False


def test_from_config_builds_state(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    state = AppState.from_config(store=InMemoryItemStore())
    assert state.vehicle_type == VehicleType.BICYCLE
    assert state.coordinator.items == []


@pytest.mark.asyncio
async def test_shutdown_closes_http_client(state):
    client = httpx.AsyncClient()
    state.coordinator.store = HttpItemStore("http://shop.local/api", client=client)

    await state.shutdown()

    assert client.is_closed


@pytest.mark.asyncio
async def test_shutdown_without_pool_is_noop(state, store):
    await state.shutdown()
    assert store.calls == []
