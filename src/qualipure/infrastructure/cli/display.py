"""Shared formatting for the storefront shell.

Status labels and colours are presentation only; they are keyed off the
status value carried by the DTOs.
"""

from __future__ import annotations

import click

from qualipure.application.dto import CartDTO, OrderDTO, RatingDTO
from qualipure.domain.model.product import Product

STATUS_STYLES = {
    "PENDING": ("Pending", "yellow"),
    "PREPARING": ("Preparing", "blue"),
    "ON_DELIVERY": ("On Delivery", "magenta"),
    "DELIVERED": ("Delivered", "green"),
    "CANCELLED": ("Cancelled", "red"),
}

NEXT_ACTION_LABELS = {
    "PREPARING": "Mark Preparing",
    "ON_DELIVERY": "Mark On Delivery",
    "DELIVERED": "Mark Delivered",
}


def styled_status(status: str) -> str:
    label, colour = STATUS_STYLES.get(status, (status, None))
    return click.style(label.upper(), fg=colour, bold=True)


def display_catalog(products: list[Product]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<26} {'Price':>10}")
    click.echo("-" * 44)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<26} {str(p.price):>10}")


def display_cart(dto: CartDTO) -> None:
    if not dto.lines:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'ID':<5} {'Product':<26} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*60}")
    for line in dto.lines:
        row = (
            f"  {line.product_id:<5} {line.product_name:<26} {line.quantity:>5} "
            f"{line.unit_price:>10} {line.line_total:>10}"
        )
        # Zeroed lines stay listed but are left out of the totals.
        click.echo(row if line.active else click.style(row, dim=True))
    click.echo(f"  {'-'*60}")
    click.echo(f"  {'Items':<33} {dto.item_count:>5}")
    click.echo(f"  {'Cart Total':<33} {dto.total:>22}")


def display_order(dto: OrderDTO, admin: bool = False) -> None:
    click.echo(f"Order {dto.short_id}  ({styled_status(dto.status)})")
    if admin:
        click.echo(f"ID:       {dto.id}")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Address:  {dto.delivery_address}")
    click.echo(f"Placed:   {dto.order_date}")

    click.echo(f"  {'Product':<26} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*54}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<26} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*54}")
    click.echo(f"  {'Order Total':<33} {dto.total:>20}")

    if admin:
        if dto.next_status is not None:
            click.echo(f"Next:     {NEXT_ACTION_LABELS[dto.next_status]}")
        elif not dto.admin_archived:
            click.echo("Next:     Archive Order")


def display_orders(dtos: list[OrderDTO], empty_message: str, admin: bool = False) -> None:
    if not dtos:
        click.echo(empty_message)
        return
    for dto in dtos:
        display_order(dto, admin=admin)
        click.echo()


def display_ratings(dtos: list[RatingDTO], average: float | None) -> None:
    if not dtos:
        click.echo("No ratings submitted yet.")
        return
    for dto in dtos:
        stars = "*" * dto.rating + "." * (5 - dto.rating)
        click.echo(f"Rating {dto.short_id}  {stars}  ({dto.submission_date})")
        if dto.comment:
            click.echo(f'  Comment: "{dto.comment}"')
    if average is not None:
        click.echo(f"Average: {average:.1f} / 5")
