"""Shell commands available to the admin session."""

from __future__ import annotations

import click

from qualipure.application.advance_order import AdvanceOrderHandler
from qualipure.application.archive_order import ArchiveOrderHandler
from qualipure.application.list_orders import ListOrdersHandler
from qualipure.application.list_ratings import ListRatingsHandler
from qualipure.application.purge_order import PurgeOrderHandler
from qualipure.domain.exceptions import DomainException
from qualipure.domain.model.order import OrderStatus
from qualipure.infrastructure.cli.display import (
    display_order,
    display_orders,
    display_ratings,
    styled_status,
)
from qualipure.infrastructure.cli.state import ShellState

_STATUS_CHOICES = [
    s.value for s in OrderStatus if s not in (OrderStatus.PENDING, OrderStatus.CANCELLED)
]


@click.group()
def admin() -> None:
    """Admin commands."""


@admin.command("orders")
@click.pass_obj
def orders(state: ShellState) -> None:
    """Show live (non-archived) orders."""
    handler = ListOrdersHandler(state.storefront.orders)

    try:
        dtos = handler.admin_live_orders(state.current_session)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_orders(dtos, "No active orders for administration.", admin=True)


@admin.command("archived")
@click.pass_obj
def archived(state: ShellState) -> None:
    """Show archived orders."""
    handler = ListOrdersHandler(state.storefront.orders)

    try:
        dtos = handler.admin_archived_orders(state.current_session)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_orders(dtos, "No archived orders.", admin=True)


@admin.command("show")
@click.argument("order_id")
@click.pass_obj
def order_show(state: ShellState, order_id: str) -> None:
    """Show a single order."""
    handler = ListOrdersHandler(state.storefront.orders)

    try:
        dto = handler.show(state.current_session, state.resolve_order_id(order_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto, admin=True)


@admin.command("advance")
@click.argument("order_id")
@click.option(
    "--to",
    "target",
    type=click.Choice(_STATUS_CHOICES, case_sensitive=False),
    default=None,
    help="Status to move to (default: the next step).",
)
@click.pass_obj
def order_advance(state: ShellState, order_id: str, target: str | None) -> None:
    """Move an order to its next fulfillment step."""
    handler = AdvanceOrderHandler(state.storefront.orders)
    new_status = OrderStatus(target.upper()) if target else None

    try:
        dto = handler.handle(state.current_session, state.resolve_order_id(order_id), new_status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if dto is not None:
        click.echo(f"Order {dto.short_id} is now {styled_status(dto.status)}.")


@admin.command("archive")
@click.argument("order_id")
@click.pass_obj
def order_archive(state: ShellState, order_id: str) -> None:
    """Archive a delivered or cancelled order."""
    handler = ArchiveOrderHandler(state.storefront.orders)

    try:
        dto = handler.handle(state.current_session, state.resolve_order_id(order_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if dto is not None:
        click.echo(f"Order {dto.short_id} archived.")


@admin.command("purge")
@click.argument("order_id")
@click.option("--yes", "-y", is_flag=True, default=False, help="Do not ask for confirmation.")
@click.pass_obj
def order_purge(state: ShellState, order_id: str, yes: bool) -> None:
    """Permanently remove an order for everyone."""
    if not yes and not click.confirm(f"Permanently remove order {order_id}?", default=False):
        return

    handler = PurgeOrderHandler(state.storefront.orders)

    try:
        dto = handler.handle(state.current_session, state.resolve_order_id(order_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if dto is not None:
        click.echo(f"Order {dto.short_id} removed.")


@admin.command("ratings")
@click.pass_obj
def ratings(state: ShellState) -> None:
    """Show submitted ratings."""
    handler = ListRatingsHandler(state.storefront.ratings)

    try:
        dtos = handler.handle(state.current_session)
        average = handler.average(state.current_session)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_ratings(dtos, average)


@admin.command("logout")
@click.pass_obj
def logout(state: ShellState) -> None:
    """Log out."""
    state.logout()
    click.echo("Logged out.")


@admin.command("quit")
@click.pass_obj
def quit_shell(state: ShellState) -> None:
    """Leave the shell."""
    state.quit()
