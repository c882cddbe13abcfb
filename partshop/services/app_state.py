from typing import Optional

from partshop.schemas.inventory import BikeSection, VehicleType
from partshop.services.auth import AuthSession
from partshop.services.coordinator import InventoryCoordinator
from partshop.services.store import ItemStore, build_store
from partshop.services.view_model import InventoryView, derive_view


class AppState:
    """
    Everything the catalog screens read and act on, built once at startup and
    handed to the presentation layer. The coordinator is the only writer of the
    item collection.
    """

    def __init__(self, auth: AuthSession, coordinator: InventoryCoordinator):
        self.auth = auth
        self.coordinator = coordinator
        self.vehicle_type = VehicleType.BICYCLE
        self.selected_section: Optional[BikeSection] = None
        self.search_query = ""

    @classmethod
    def from_config(cls, store: Optional[ItemStore] = None) -> "AppState":
        return cls(AuthSession(), InventoryCoordinator(store or build_store()))

    async def shutdown(self) -> None:
        """Releases the store connection pool, when the store has one."""
        aclose = getattr(self.coordinator.store, "aclose", None)
        if aclose is not None:
            await aclose()

    async def startup(self) -> None:
        """Loads the collection when a persisted session is already logged in."""
        if self.auth.is_authenticated:
            await self.coordinator.reload()

    async def login(self, username: str, password: str) -> bool:
        if not self.auth.login(username, password):
            return False
        await self.coordinator.reload()
        return True

    def logout(self) -> None:
        self.auth.logout()

    def set_vehicle_type(self, vehicle_type: VehicleType) -> None:
        self.vehicle_type = vehicle_type
        # Sections are drawn per vehicle diagram, so a switch clears the selection
        self.selected_section = None

    def select_section(self, section: Optional[BikeSection]) -> None:
        self.selected_section = section

    def search(self, query: str) -> None:
        self.search_query = query

    @property
    def view(self) -> InventoryView:
        return derive_view(
            self.coordinator.items,
            self.vehicle_type,
            self.selected_section,
            self.search_query,
        )
