"""
Order status workflow.

    new --confirm (stock OK)--> confirmed
    new / confirmed / processing --cancel--> cancelled
    confirmed --advance--> processing --advance--> shipped --advance--> delivered

delivered and cancelled are terminal. Confirmation deducts stock, so
new -> confirmed is only reachable through the reconciliation engine and is
not part of the manual edges below.
"""
from typing import Dict, FrozenSet, List, Union

from .enums import OrderStatus
from .errors import InvalidOrderStatusError, InvalidStatusTransitionError


MANUAL_TRANSITIONS: Dict[OrderStatus, FrozenSet[OrderStatus]] = {
    OrderStatus.NEW: frozenset({OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.PROCESSING, OrderStatus.CANCELLED}),
    OrderStatus.PROCESSING: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}

ADVANCE_TARGETS: Dict[OrderStatus, OrderStatus] = {
    OrderStatus.CONFIRMED: OrderStatus.PROCESSING,
    OrderStatus.PROCESSING: OrderStatus.SHIPPED,
    OrderStatus.SHIPPED: OrderStatus.DELIVERED,
}


def parse_status(value: Union[str, OrderStatus]) -> OrderStatus:
    """Coerce a raw value into an OrderStatus or raise InvalidOrderStatusError."""
    if isinstance(value, OrderStatus):
        return value
    try:
        return OrderStatus(value)
    except ValueError:
        raise InvalidOrderStatusError(str(value)) from None


def validate_transition(current: OrderStatus, target: OrderStatus) -> None:
    """
    Reject status edges the workflow does not allow.

    Writing the current status again is accepted so repeated clicks stay
    harmless.
    """
    if current == target:
        return
    if target not in MANUAL_TRANSITIONS[current]:
        raise InvalidStatusTransitionError(current.value, target.value)


def available_actions(current: OrderStatus) -> List[Dict[str, str]]:
    """Actions the console offers for an order in the given status."""
    actions: List[Dict[str, str]] = []
    if current == OrderStatus.NEW:
        actions.append({"action": "confirm", "target": OrderStatus.CONFIRMED.value})
    if current in ADVANCE_TARGETS:
        actions.append({"action": "advance", "target": ADVANCE_TARGETS[current].value})
    if OrderStatus.CANCELLED in MANUAL_TRANSITIONS[current]:
        actions.append({"action": "cancel", "target": OrderStatus.CANCELLED.value})
    return actions
