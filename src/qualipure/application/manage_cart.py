"""Application service: Manage Cart use cases.

Cart edits are customer-only. Adding resolves the product through the
catalog; the other edits address an existing line by product id and are
silently ignored when no such line exists.
"""

from __future__ import annotations

from qualipure.application.dto import CartDTO, cart_to_dto
from qualipure.domain.exceptions import EntityNotFoundError
from qualipure.domain.model.cart import Cart
from qualipure.domain.model.session import Role, Session
from qualipure.domain.repository.product_repository import ProductRepository


class ManageCartHandler:

    def __init__(self, product_repo: ProductRepository, cart: Cart) -> None:
        self._product_repo = product_repo
        self._cart = cart

    def add(self, session: Session, product_id: str) -> CartDTO:
        session.require(Role.CUSTOMER)
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        self._cart.add_product(product)
        return cart_to_dto(self._cart)

    def increment(self, session: Session, product_id: str) -> CartDTO:
        session.require(Role.CUSTOMER)
        self._cart.increment(product_id)
        return cart_to_dto(self._cart)

    def decrement(self, session: Session, product_id: str) -> CartDTO:
        session.require(Role.CUSTOMER)
        self._cart.decrement(product_id)
        return cart_to_dto(self._cart)

    def remove(self, session: Session, product_id: str) -> CartDTO:
        session.require(Role.CUSTOMER)
        self._cart.remove_line(product_id)
        return cart_to_dto(self._cart)

    def show(self, session: Session) -> CartDTO:
        session.require(Role.CUSTOMER)
        return cart_to_dto(self._cart)
