"""Pure order list queries: filtering and per-status tallies."""

from typing import Dict, List, Sequence

from storefront.domain.entities import Order
from storefront.domain.enums import ALL_STATUSES, OrderStatus


def _matches_search(order: Order, query: str) -> bool:
    # The phone is compared as stored and as typed: no case folding, no separator stripping
    needle = query.lower()
    return (
        needle in order.customer_name.lower()
        or needle in order.customer_email.lower()
        or query in order.customer_phone
        or needle in order.id.lower()
    )


def filter_orders(
    orders: Sequence[Order],
    status_filter: str = ALL_STATUSES,
    search_query: str = "",
) -> List[Order]:
    """Orders matching both the status filter and the search query.

    Args:
        orders: Orders in display order
        status_filter: "all" or one of the order status values
        search_query: Free text; blank matches everything

    Returns:
        Matching orders, original order preserved
    """
    filtered = list(orders)

    if status_filter != ALL_STATUSES:
        filtered = [o for o in filtered if o.order_status.value == status_filter]

    if search_query.strip():
        filtered = [o for o in filtered if _matches_search(o, search_query)]

    return filtered


def count_by_status(orders: Sequence[Order]) -> Dict[str, int]:
    """Order count per status plus the "all" total."""
    counts = {ALL_STATUSES: len(orders)}
    for status in OrderStatus:
        counts[status.value] = 0
    for order in orders:
        counts[order.order_status.value] += 1
    return counts
