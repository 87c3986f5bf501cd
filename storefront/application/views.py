"""
View state for the admin console screens.

Each holder keeps the last successfully loaded data for one screen and
derives filtered lists and tallies from it on every access. The inventory
dashboard listens for order confirmations only while mounted.
"""
from typing import Dict, List, Optional

from storefront.application.inventory_stats import (
    InventoryStats,
    compute_inventory_stats,
    filter_products,
)
from storefront.application.order_queries import count_by_status, filter_orders
from storefront.application.services import (
    InventoryService,
    OrderQueryService,
    OrderStatusService,
    StockReconciliationService,
)
from storefront.domain.entities import Order, Product
from storefront.domain.enums import ALL_STATUSES, StockFilter
from storefront.domain.errors import DataAccessError
from storefront.domain.event_bus import EventBus, Unsubscribe
from storefront.domain.events import DomainEvent, OrderConfirmedEvent
from storefront.infrastructure.logging import get_logger

logger = get_logger(__name__)


class OrdersBoard:
    """Orders list screen: list, filters, status tallies and row actions."""

    def __init__(
        self,
        queries: OrderQueryService,
        reconciliation: StockReconciliationService,
        status_service: OrderStatusService,
    ) -> None:
        self._queries = queries
        self._reconciliation = reconciliation
        self._status_service = status_service
        self.orders: List[Order] = []
        self.status_filter: str = ALL_STATUSES
        self.search_query: str = ""

    async def refresh(self) -> List[Order]:
        """Reload orders; on failure the previously loaded list stays in place."""
        try:
            orders = await self._queries.list_orders()
        except DataAccessError:
            logger.error("Failed to load orders, keeping previous list", exc_info=True)
            raise
        self.orders = orders
        return orders

    @property
    def visible_orders(self) -> List[Order]:
        return filter_orders(self.orders, self.status_filter, self.search_query)

    @property
    def counts(self) -> Dict[str, int]:
        return count_by_status(self.orders)

    async def confirm(self, order_id: str) -> Order:
        order = await self._reconciliation.confirm_order(order_id)
        await self._reload_after_write(order)
        return order

    async def set_status(self, order_id: str, new_status: str) -> Order:
        order = await self._status_service.update_order_status(order_id, new_status)
        await self._reload_after_write(order)
        return order

    async def _reload_after_write(self, order: Order) -> None:
        """The write is committed; a failed reload leaves the previous list for the next refresh."""
        try:
            await self.refresh()
        except DataAccessError:
            logger.warning(f"Order {order.short_reference} saved but the list could not be reloaded")


class InventoryDashboard:
    """Inventory screen: catalog, stock filters, stock editor and sales figures."""

    def __init__(
        self,
        inventory: InventoryService,
        queries: OrderQueryService,
        event_bus: EventBus,
    ) -> None:
        self._inventory = inventory
        self._queries = queries
        self._event_bus = event_bus
        self._unsubscribe: Optional[Unsubscribe] = None

        self.products: List[Product] = []
        self.revenue_orders: List[Order] = []
        self.category: str = "all"
        self.search_query: str = ""
        self.stock_filter: StockFilter = StockFilter.ALL

    @property
    def is_mounted(self) -> bool:
        return self._unsubscribe is not None

    async def mount(self) -> None:
        """Start listening for confirmations and load initial data."""
        if self._unsubscribe is None:
            self._unsubscribe = self._event_bus.subscribe(OrderConfirmedEvent, self._on_order_confirmed)
        await self.refresh()

    def unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    async def refresh(self) -> None:
        await self.refresh_products()
        await self.reload_orders()

    async def refresh_products(self) -> None:
        self.products = await self._inventory.list_products()

    async def reload_orders(self) -> None:
        """Reload revenue orders; sales figures drop to zero when the store is unreachable."""
        try:
            self.revenue_orders = await self._queries.list_revenue_orders()
        except DataAccessError:
            logger.error("Error loading orders for sales", exc_info=True)
            self.revenue_orders = []

    async def _on_order_confirmed(self, event: DomainEvent) -> None:
        logger.info(f"Order {event.aggregate_id} confirmed, refreshing inventory")
        await self.refresh()

    @property
    def stats(self) -> InventoryStats:
        return compute_inventory_stats(
            self.products,
            self.revenue_orders,
            low_stock_threshold=self._inventory.low_stock_threshold,
            currency=self._inventory.currency,
        )

    @property
    def visible_products(self) -> List[Product]:
        return filter_products(
            self.products,
            self.category,
            self.search_query,
            self.stock_filter,
            low_stock_threshold=self._inventory.low_stock_threshold,
        )

    async def update_stock(self, product_id: str, variation_id: Optional[str], new_stock: int) -> None:
        """Write a stock value, then reload the catalog. Failures leave the catalog as shown."""
        await self._inventory.update_stock(product_id, variation_id, new_stock)
        await self.refresh_products()
