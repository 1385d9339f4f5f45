"""Per-shell state: who is logged in, their cart and notification feed."""

from __future__ import annotations

from dataclasses import dataclass

import click

from qualipure.application.notifications import OrderNotificationFeed
from qualipure.domain.model.cart import Cart
from qualipure.domain.model.session import Session
from qualipure.infrastructure.bootstrap import Storefront


@dataclass
class ShellState:
    storefront: Storefront
    session: Session | None = None
    cart: Cart | None = None
    feed: OrderNotificationFeed | None = None
    running: bool = True

    def login(self, session: Session) -> None:
        self.session = session
        if not session.is_admin:
            self.cart = self.storefront.new_cart()
            self.feed = OrderNotificationFeed(self.storefront.orders, session.username)

    def logout(self) -> None:
        if self.feed is not None:
            self.feed.close()
        self.session = None
        self.cart = None
        self.feed = None

    def quit(self) -> None:
        self.logout()
        self.running = False

    @property
    def current_session(self) -> Session:
        if self.session is None:
            raise click.ClickException("Not logged in")
        return self.session

    @property
    def current_cart(self) -> Cart:
        if self.cart is None:
            raise click.ClickException("No cart in this session")
        return self.cart

    def resolve_order_id(self, raw: str) -> str:
        """Accept a full order id or the short id shown on screen."""
        orders = self.storefront.orders
        if orders.get_by_id(raw) is not None:
            return raw
        matches = [order.id for order in orders if order.id.endswith(raw)]
        if len(matches) > 1:
            raise click.ClickException(f"Order id '{raw}' is ambiguous; use the full id")
        return matches[0] if matches else raw
