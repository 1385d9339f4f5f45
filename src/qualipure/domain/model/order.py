"""Order aggregate — the core of the domain.

An Order is a frozen snapshot of what the customer checked out. The only
things that ever change are its status and the two visibility flags, and
each change produces a *replacement* Order rather than mutating the
existing one, so a ledger snapshot handed to a view never shifts under it.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from qualipure.domain.exceptions import InvalidTransitionError, ValidationError
from qualipure.domain.model.cart import CartLine
from qualipure.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "PENDING"
    PREPARING = "PREPARING"
    ON_DELIVERY = "ON_DELIVERY"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)

    def next_status(self) -> OrderStatus | None:
        """The single fulfillment step an admin is offered, if any."""
        if self.is_terminal:
            return None
        return _FULFILLMENT_PATH[_FULFILLMENT_PATH.index(self) + 1]

    def can_transition_to(self, target: OrderStatus) -> bool:
        """Whether an order in this status may move to *target*.

        Fulfillment only moves forward along
        PENDING -> PREPARING -> ON_DELIVERY -> DELIVERED, and CANCELLED
        is reachable from PENDING alone. Terminal states go nowhere.
        """
        if self.is_terminal:
            return False
        if target == OrderStatus.CANCELLED:
            return self == OrderStatus.PENDING
        return _FULFILLMENT_PATH.index(target) > _FULFILLMENT_PATH.index(self)


_FULFILLMENT_PATH = (
    OrderStatus.PENDING,
    OrderStatus.PREPARING,
    OrderStatus.ON_DELIVERY,
    OrderStatus.DELIVERED,
)


@dataclass(frozen=True)
class OrderLineItem:
    """Captures a cart line at checkout time.

    Holds its own copy of the product fields so later catalog or cart
    changes can never reach into a placed order.
    """

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at checkout time

    @property
    def total_price(self) -> Money:
        return self.unit_price * self.quantity.value

    @staticmethod
    def from_cart_line(line: CartLine) -> OrderLineItem:
        return OrderLineItem(
            product_id=line.product.id,
            product_name=line.product.name,
            quantity=Quantity(line.quantity),
            unit_price=line.product.price,
        )


@dataclass(frozen=True)
class Order:
    """Aggregate root for delivery orders.

    Use the ``Order.create()`` factory for new orders — it enforces the
    checkout rules and fixes ``total_amount``. The stored total is
    authoritative and is never recomputed from ``items`` afterwards.
    """

    id: str
    customer_name: str
    delivery_address: str
    items: tuple[OrderLineItem, ...]
    total_amount: Money
    order_date: datetime
    status: OrderStatus = OrderStatus.PENDING
    admin_archived: bool = False
    customer_deleted: bool = False

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        order_id: str,
        customer_name: str,
        delivery_address: str | None,
        items: list[OrderLineItem],
        order_date: datetime,
    ) -> Order:
        """Create a new pending order, enforcing the checkout rules."""
        if not items:
            raise ValidationError("Your cart is empty. Cannot place order.")

        if delivery_address is None or not delivery_address.strip():
            raise ValidationError("Please select a delivery address.")

        total = items[0].total_price
        for item in items[1:]:
            total = total + item.total_price

        return Order(
            id=order_id,
            customer_name=customer_name,
            delivery_address=delivery_address.strip(),
            items=tuple(items),
            total_amount=total,
            order_date=order_date,
        )

    # --- State transitions (each returns a replacement) -----------------------

    def with_status(self, new_status: OrderStatus) -> Order:
        if not self.status.can_transition_to(new_status):
            raise InvalidTransitionError(
                f"Cannot move order {self.short_id} from {self.status.value} "
                f"to {new_status.value}"
            )
        return dataclasses.replace(self, status=new_status)

    def archived_for_admin(self) -> Order:
        """Hide from the admin's live list; only finished orders qualify."""
        if not self.status.is_terminal:
            raise ValidationError(
                f"Cannot archive order {self.short_id}: status is "
                f"{self.status.value}, expected DELIVERED or CANCELLED"
            )
        return dataclasses.replace(self, admin_archived=True)

    def deleted_by_customer(self) -> Order:
        """Hide from the customer's history; the admin still sees it."""
        return dataclasses.replace(self, customer_deleted=True)

    # --- Computed properties --------------------------------------------------

    @property
    def short_id(self) -> str:
        return self.id[-6:]
