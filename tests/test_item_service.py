import httpx
import pytest
from pydantic import ValidationError

from partshop.main import app
from partshop.models.inventory import InventoryItem as InventoryRow
from partshop.schemas.inventory import BikeSection, ItemCreateRequest, ItemDraft, ItemPatch, VehicleType
from partshop.services import item_service
from partshop.services.coordinator import InventoryCoordinator
from partshop.services.store import HttpItemStore

from conftest import make_item


def _request(item_id=None, name="Tire", quantity=5):
    return ItemCreateRequest(
        id=item_id,
        name=name,
        vehicle_type=VehicleType.BICYCLE,
        section=BikeSection.WHEELS,
        price=15000,
        quantity=quantity,
    )


class TestItemService:
    @pytest.mark.asyncio
    async def test_create_keeps_client_id(self, db):
        row = await item_service.create_item(_request("1700000000000"))
        assert row.id == "1700000000000"
        assert (await item_service.get_item("1700000000000")).name == "Tire"

    @pytest.mark.asyncio
    async def test_create_assigns_id_when_missing(self, db):
        row = await item_service.create_item(_request())
        assert len(row.id) == 32

    @pytest.mark.asyncio
    async def test_create_duplicate_id_rejected(self, db):
        await item_service.create_item(_request("1"))
        with pytest.raises(item_service.DuplicateItemId):
            await item_service.create_item(_request("1"))

    @pytest.mark.asyncio
    async def test_replace_overwrites_all_fields(self, db):
        await item_service.create_item(_request("1"))
        draft = ItemDraft(
            name="Tire 27.5", vehicle_type=VehicleType.BICYCLE, section=BikeSection.WHEELS,
            price=18000, quantity=2, min_stock_threshold=1,
        )
        row = await item_service.replace_item("1", draft)

        assert row.to_schema() == draft.with_id("1")

    @pytest.mark.asyncio
    async def test_patch_only_touches_given_fields(self, db):
        await item_service.create_item(_request("1", quantity=5))
        row = await item_service.patch_item("1", ItemPatch(quantity=4))

        assert row.quantity == 4
        assert row.name == "Tire"

    @pytest.mark.asyncio
    async def test_null_fields_never_reach_the_row(self, db):
        await item_service.create_item(_request("1", quantity=5))

        with pytest.raises(ValidationError):
            ItemPatch.model_validate({"name": None})
        with pytest.raises(ValidationError):
            ItemPatch.model_validate({"quantity": None})

        row = await item_service.get_item("1")
        assert (row.name, row.quantity) == ("Tire", 5)

    @pytest.mark.asyncio
    async def test_patch_can_clear_image(self, db):
        await item_service.create_item(_request("1"))
        await item_service.patch_item("1", ItemPatch(image="http://img/tire.png"))

        row = await item_service.patch_item("1", ItemPatch.model_validate({"image": None}))
        assert row.image is None

    @pytest.mark.asyncio
    async def test_unknown_ids_raise_not_found(self, db):
        with pytest.raises(item_service.ItemNotFound):
            await item_service.patch_item("nope", ItemPatch(quantity=1))
        with pytest.raises(item_service.ItemNotFound):
            await item_service.delete_item("nope")

    @pytest.mark.asyncio
    async def test_list_newest_first(self, db):
        await item_service.create_item(_request("a"))
        await item_service.create_item(_request("b"))

        assert [row.id for row in await item_service.list_items()] == ["b", "a"]


class TestCoordinatorAgainstApi:
    """The client core talking to the real router over an in-process transport."""

    @pytest.mark.asyncio
    async def test_optimistic_flow_round_trips(self, db):
        async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as client:
            coordinator = InventoryCoordinator(HttpItemStore("http://test/api", client=client))

            added = await coordinator.add_item(ItemDraft(
                name="Chain", vehicle_type=VehicleType.BICYCLE, section=BikeSection.DRIVETRAIN,
                price=6500, quantity=2, min_stock_threshold=1,
            ))
            await coordinator.buy_item(added.id)
            await coordinator.update_item(coordinator.get(added.id).model_copy(update={"description": "8-speed"}))

            local = list(coordinator.items)
            await coordinator.reload()

            assert coordinator.unreachable is False
            assert coordinator.items == local
            assert (await InventoryRow.get(id=added.id)).quantity == 1

            coordinator.request_delete(added.id)
            await coordinator.confirm_delete()
            assert await InventoryRow.filter(id=added.id).count() == 0

    @pytest.mark.asyncio
    async def test_update_of_missing_item_flags_unreachable(self, db):
        async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as client:
            coordinator = InventoryCoordinator(HttpItemStore("http://test/api", client=client))
            coordinator.items = [make_item("ghost")]

            await coordinator.update_item(make_item("ghost", quantity=1))

            assert coordinator.unreachable is True
            assert coordinator.get("ghost").quantity == 1
