"""
Inventory aggregation.

Derived figures for the inventory screen, recomputed from the catalog and the
recognised-revenue orders on every call. Nothing here is cached or stored.
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence

from storefront.domain.entities import LOW_STOCK_THRESHOLD, Order, Product
from storefront.domain.enums import StockFilter
from storefront.domain.value_objects import DEFAULT_CURRENCY, Money


@dataclass(frozen=True)
class InventoryStats:
    """Dashboard tallies for the inventory screen."""
    total_sales: Money
    total_vials_sold: int
    total_inventory_value: Money
    low_stock_count: int
    total_items: int


@dataclass(frozen=True)
class InventoryLine:
    """One editable stock row: a variation, or a product without variations."""
    product_id: str
    variation_id: Optional[str]
    name: str
    category: str
    stock_quantity: int
    unit_price: Money
    stock_value: Money

    @property
    def in_stock(self) -> bool:
        return self.stock_quantity > 0


def compute_inventory_stats(
    products: Sequence[Product],
    orders: Sequence[Order],
    low_stock_threshold: int = LOW_STOCK_THRESHOLD,
    currency: str = DEFAULT_CURRENCY,
) -> InventoryStats:
    """
    Aggregate sales and stock figures.

    Only recognised-revenue orders (paid, and confirmed or later) count
    towards sales, so the full order list may be passed in.

    Args:
        products: Current catalog
        orders: Orders to consider for sales
        low_stock_threshold: Stock strictly below this (and above 0) is low
        currency: Currency of the zero totals

    Returns:
        InventoryStats with exact decimal totals
    """
    revenue_orders = [order for order in orders if order.is_revenue]

    total_sales = Money.zero(currency)
    total_vials_sold = 0
    for order in revenue_orders:
        total_sales = total_sales + order.final_total
        total_vials_sold += order.total_quantity

    total_inventory_value = Money.zero(currency)
    for product in products:
        total_inventory_value = total_inventory_value + product.stock_value()

    return InventoryStats(
        total_sales=total_sales,
        total_vials_sold=total_vials_sold,
        total_inventory_value=total_inventory_value,
        low_stock_count=sum(1 for p in products if p.is_low_stock(low_stock_threshold)),
        total_items=len(products),
    )


def _matches_stock_filter(product: Product, stock_filter: StockFilter, low_stock_threshold: int) -> bool:
    if stock_filter == StockFilter.IN_STOCK:
        return product.is_in_stock()
    if stock_filter == StockFilter.LOW_STOCK:
        return product.is_low_stock(low_stock_threshold)
    if stock_filter == StockFilter.OUT_OF_STOCK:
        return product.is_out_of_stock()
    return True


def filter_products(
    products: Sequence[Product],
    category: str = "all",
    search_query: str = "",
    stock_filter: StockFilter = StockFilter.ALL,
    low_stock_threshold: int = LOW_STOCK_THRESHOLD,
) -> List[Product]:
    """Products matching category, search text and stock level filters."""
    stock_filter = StockFilter(stock_filter)
    filtered = list(products)

    if category != "all":
        filtered = [p for p in filtered if p.category == category]

    if search_query.strip():
        query = search_query.lower()
        filtered = [
            p for p in filtered
            if query in p.name.lower() or query in p.description.lower()
        ]

    return [p for p in filtered if _matches_stock_filter(p, stock_filter, low_stock_threshold)]


def inventory_lines(product: Product) -> List[InventoryLine]:
    """Stock rows shown for a product: one per variation, or the product itself."""
    if product.has_variations:
        return [
            InventoryLine(
                product_id=product.id,
                variation_id=variation.id,
                name=f"{product.name} {variation.name}",
                category=product.category,
                stock_quantity=variation.stock_quantity,
                unit_price=variation.price,
                stock_value=variation.stock_value,
            )
            for variation in product.variations
        ]

    price = product.effective_price
    return [
        InventoryLine(
            product_id=product.id,
            variation_id=None,
            name=product.name,
            category=product.category,
            stock_quantity=product.stock_quantity,
            unit_price=price,
            stock_value=price * product.stock_quantity,
        )
    ]
