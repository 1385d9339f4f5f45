"""Cart aggregate — one quantity-bearing line per product.

A line whose quantity drops to zero is *not* removed: it stays in the
cart (rendered greyed out) so the customer can bump it back up without
going back to the catalog. Only ``remove_line`` deletes a line.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from qualipure.domain.model.product import Product
from qualipure.domain.model.value_objects import DEFAULT_CURRENCY, Money


@dataclass
class CartLine:
    """A product in the cart together with how many units are wanted."""

    product: Product
    quantity: int = 1

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def total_price(self) -> Money:
        return self.product.price * self.quantity

    @property
    def is_active(self) -> bool:
        """True if the line would be included in an order."""
        return self.quantity > 0


@dataclass
class Cart:
    """Aggregate root for a customer's shopping cart.

    Invariants:
    - at most one line per product id
    - a line's quantity is never negative
    """

    currency: str = DEFAULT_CURRENCY
    _lines: dict[str, CartLine] = field(default_factory=dict, init=False, repr=False)

    # --- Mutations ------------------------------------------------------------

    def add_product(self, product: Product) -> CartLine:
        """Add one unit of *product*, creating the line if needed.

        An existing line is incremented whatever its quantity, including
        a zeroed line.
        """
        line = self._lines.get(product.id)
        if line is None:
            line = CartLine(product=product, quantity=1)
            self._lines[product.id] = line
        else:
            line.quantity += 1
        return line

    def increment(self, product_id: str) -> None:
        line = self._lines.get(product_id)
        if line is None:
            return
        line.quantity += 1

    def decrement(self, product_id: str) -> None:
        """Take one unit off the line, flooring at zero."""
        line = self._lines.get(product_id)
        if line is None or line.quantity == 0:
            return
        line.quantity -= 1

    def remove_line(self, product_id: str) -> None:
        self._lines.pop(product_id, None)

    def clear_ordered_lines(self) -> None:
        """Drop every active line; zeroed lines stay for quick re-add."""
        self._lines = {
            product_id: line
            for product_id, line in self._lines.items()
            if not line.is_active
        }

    # --- Queries --------------------------------------------------------------

    def get_line(self, product_id: str) -> CartLine | None:
        return self._lines.get(product_id)

    @property
    def lines(self) -> list[CartLine]:
        """Every line in insertion order, zeroed ones included."""
        return list(self._lines.values())

    @property
    def orderable_lines(self) -> list[CartLine]:
        return [line for line in self._lines.values() if line.is_active]

    @property
    def active_item_count(self) -> int:
        return len(self.orderable_lines)

    @property
    def total_amount(self) -> Money:
        result = Money.zero(self.currency)
        for line in self.orderable_lines:
            result = result + line.total_price
        return result

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._lines

    def __len__(self) -> int:
        return len(self._lines)
