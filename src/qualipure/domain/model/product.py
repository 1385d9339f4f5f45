"""Product — an entry in the static storefront catalog.

Products are created once at startup and never change, so unlike
carts and orders they are frozen.
"""

from __future__ import annotations

from dataclasses import dataclass

from qualipure.domain.exceptions import ValidationError
from qualipure.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A purchasable water product."""

    id: str
    name: str
    price: Money
    image_reference: str = ""

    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            raise ValidationError("Product ID is required")
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
