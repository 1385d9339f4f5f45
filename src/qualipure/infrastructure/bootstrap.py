"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from qualipure.application.authenticate import AuthenticateHandler, Credential
from qualipure.domain.ledger.order_ledger import OrderLedger
from qualipure.domain.ledger.rating_ledger import RatingLedger
from qualipure.domain.model.cart import Cart
from qualipure.domain.model.session import Role
from qualipure.domain.repository.product_repository import ProductRepository
from qualipure.domain.service.id_generator import Clock, TimeIdGenerator, utc_now
from qualipure.infrastructure.config import Settings
from qualipure.infrastructure.persistence.static_product_repository import (
    StaticProductRepository,
    default_catalog,
)


@dataclass
class Storefront:
    """Process-wide state: one catalog and one ledger of each kind."""

    settings: Settings
    products: ProductRepository
    orders: OrderLedger
    ratings: RatingLedger
    id_generator: TimeIdGenerator

    def new_cart(self) -> Cart:
        return Cart(currency=self.settings.currency)

    def authenticator(self) -> AuthenticateHandler:
        return AuthenticateHandler(
            [
                Credential(
                    self.settings.customer_username,
                    self.settings.customer_password,
                    Role.CUSTOMER,
                ),
                Credential(
                    self.settings.admin_username,
                    self.settings.admin_password,
                    Role.ADMIN,
                ),
            ]
        )


def build_storefront(settings: Settings | None = None, clock: Clock = utc_now) -> Storefront:
    settings = settings or Settings()
    return Storefront(
        settings=settings,
        products=StaticProductRepository(default_catalog(settings.currency)),
        orders=OrderLedger(),
        ratings=RatingLedger(),
        id_generator=TimeIdGenerator(clock),
    )
