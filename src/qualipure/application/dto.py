"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from qualipure.domain.model.cart import Cart
from qualipure.domain.model.order import Order
from qualipure.domain.model.rating import RatingEntry

DATE_FORMAT = "%Y-%m-%d %H:%M UTC"


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line; inactive lines are shown greyed out."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "₱200.00"
    line_total: str
    active: bool


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    item_count: int
    total: str


@dataclass(frozen=True)
class OrderLineItemDTO:
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    short_id: str
    customer_name: str
    delivery_address: str
    status: str
    next_status: str | None
    items: list[OrderLineItemDTO]
    total: str
    order_date: str
    admin_archived: bool
    customer_deleted: bool


@dataclass(frozen=True)
class RatingDTO:
    id: str
    short_id: str
    rating: int
    comment: str | None
    submission_date: str


# --- Mapping ------------------------------------------------------------------


def cart_to_dto(cart: Cart) -> CartDTO:
    return CartDTO(
        lines=[
            CartLineDTO(
                product_id=line.product.id,
                product_name=line.product.name,
                quantity=line.quantity,
                unit_price=str(line.product.price),
                line_total=str(line.total_price),
                active=line.is_active,
            )
            for line in cart.lines
        ],
        item_count=cart.active_item_count,
        total=str(cart.total_amount),
    )


def order_to_dto(order: Order) -> OrderDTO:
    next_status = order.status.next_status()
    return OrderDTO(
        id=order.id,
        short_id=order.short_id,
        customer_name=order.customer_name,
        delivery_address=order.delivery_address,
        status=order.status.value,
        next_status=next_status.value if next_status else None,
        items=[
            OrderLineItemDTO(
                product_name=item.product_name,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.total_price),
            )
            for item in order.items
        ],
        total=str(order.total_amount),
        order_date=order.order_date.strftime(DATE_FORMAT),
        admin_archived=order.admin_archived,
        customer_deleted=order.customer_deleted,
    )


def rating_to_dto(entry: RatingEntry) -> RatingDTO:
    return RatingDTO(
        id=entry.id,
        short_id=entry.short_id,
        rating=entry.rating,
        comment=entry.comment,
        submission_date=entry.submission_date.strftime(DATE_FORMAT),
    )
