"""Shell commands available to a customer session."""

from __future__ import annotations

import click

from qualipure.application.cancel_order import CancelOrderHandler
from qualipure.application.delete_order import DeleteOrderHandler
from qualipure.application.list_orders import ListOrdersHandler
from qualipure.application.manage_cart import ManageCartHandler
from qualipure.application.place_order import PlaceOrderHandler
from qualipure.application.submit_rating import SubmitRatingHandler
from qualipure.domain.exceptions import DomainException
from qualipure.infrastructure.cli.display import (
    display_cart,
    display_catalog,
    display_order,
    display_orders,
)
from qualipure.infrastructure.cli.state import ShellState


@click.group()
def customer() -> None:
    """Customer commands."""


def _cart_handler(state: ShellState) -> ManageCartHandler:
    return ManageCartHandler(state.storefront.products, state.current_cart)


@customer.command("catalog")
@click.pass_obj
def catalog(state: ShellState) -> None:
    """List the products you can order."""
    display_catalog(state.storefront.products.list_all())


@customer.command("add")
@click.argument("product_id")
@click.pass_obj
def cart_add(state: ShellState, product_id: str) -> None:
    """Add one unit of a product to the cart."""
    try:
        dto = _cart_handler(state).add(state.current_session, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added {product_id}. Cart: {dto.item_count} item(s), {dto.total}")


@customer.command("inc")
@click.argument("product_id")
@click.pass_obj
def cart_increment(state: ShellState, product_id: str) -> None:
    """Increase a cart line by one."""
    try:
        dto = _cart_handler(state).increment(state.current_session, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_cart(dto)


@customer.command("dec")
@click.argument("product_id")
@click.pass_obj
def cart_decrement(state: ShellState, product_id: str) -> None:
    """Decrease a cart line by one (stops at zero)."""
    try:
        dto = _cart_handler(state).decrement(state.current_session, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_cart(dto)


@customer.command("remove")
@click.argument("product_id")
@click.pass_obj
def cart_remove(state: ShellState, product_id: str) -> None:
    """Remove a line from the cart."""
    try:
        dto = _cart_handler(state).remove(state.current_session, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Item removed from cart.")
    display_cart(dto)


@customer.command("cart")
@click.pass_obj
def cart_show(state: ShellState) -> None:
    """Show the cart."""
    try:
        dto = _cart_handler(state).show(state.current_session)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_cart(dto)


@customer.command("addresses")
@click.pass_obj
def addresses(state: ShellState) -> None:
    """List your saved delivery addresses."""
    for number, address in enumerate(state.storefront.settings.delivery_addresses, start=1):
        click.echo(f"  {number}. {address}")


@customer.command("checkout")
@click.option("--address", "address_no", default=1, type=int, help="Saved address number.")
@click.option("--yes", "-y", is_flag=True, default=False, help="Do not ask for confirmation.")
@click.pass_obj
def checkout(state: ShellState, address_no: int, yes: bool) -> None:
    """Place an order for everything in the cart."""
    saved = state.storefront.settings.delivery_addresses
    address = saved[address_no - 1] if 1 <= address_no <= len(saved) else None

    if address is not None and not yes:
        if not click.confirm(f"Place this order to {address}?", default=True):
            click.echo("Order not placed.")
            return

    handler = PlaceOrderHandler(state.storefront.orders, state.storefront.id_generator)

    try:
        dto = handler.handle(state.current_session, state.current_cart, address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order for {dto.total} placed successfully!")
    display_order(dto)


@customer.command("orders")
@click.pass_obj
def orders(state: ShellState) -> None:
    """Show your orders."""
    handler = ListOrdersHandler(state.storefront.orders)

    try:
        dtos = handler.customer_orders(state.current_session)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_orders(dtos, "You have no active orders.")


@customer.command("cancel")
@click.argument("order_id")
@click.pass_obj
def order_cancel(state: ShellState, order_id: str) -> None:
    """Cancel a pending order."""
    handler = CancelOrderHandler(state.storefront.orders)

    try:
        dto = handler.handle(state.current_session, state.resolve_order_id(order_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if dto is not None:
        click.echo(f"Order {dto.short_id} has been cancelled.")


@customer.command("delete")
@click.argument("order_id")
@click.pass_obj
def order_delete(state: ShellState, order_id: str) -> None:
    """Delete an order from your history (the admin still sees it)."""
    handler = DeleteOrderHandler(state.storefront.orders)

    try:
        dto = handler.handle(state.current_session, state.resolve_order_id(order_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if dto is not None:
        click.echo(f"Order {dto.short_id} deleted from your history.")


@customer.command("rate")
@click.argument("stars", type=int)
@click.argument("comment", nargs=-1)
@click.pass_obj
def rate(state: ShellState, stars: int, comment: tuple[str, ...]) -> None:
    """Rate the service from 1 to 5 stars, with an optional comment."""
    handler = SubmitRatingHandler(state.storefront.ratings, state.storefront.id_generator)

    try:
        handler.handle(state.current_session, stars, " ".join(comment) or None)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Thank you for your rating!")


@customer.command("notifications")
@click.pass_obj
def notifications(state: ShellState) -> None:
    """Show delivery updates for your orders."""
    messages = state.feed.messages if state.feed is not None else []
    if not messages:
        click.echo("No notifications.")
        return
    for message in messages:
        click.echo(f"  {message}")


@customer.command("logout")
@click.pass_obj
def logout(state: ShellState) -> None:
    """Log out."""
    state.logout()
    click.echo("Logged out.")


@customer.command("quit")
@click.pass_obj
def quit_shell(state: ShellState) -> None:
    """Leave the shell."""
    state.quit()
