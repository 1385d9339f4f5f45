"""In-memory implementation of ProductRepository holding the fixed catalog."""

from __future__ import annotations

from qualipure.domain.model.product import Product
from qualipure.domain.model.value_objects import Money
from qualipure.domain.repository.product_repository import ProductRepository


def default_catalog(currency: str = "PHP") -> list[Product]:
    return [
        Product(
            id="p1",
            name="Water with Slim Gallon",
            price=Money.of("200.00", currency),
            image_reference="images/slim_gallon_water.png",
        ),
        Product(
            id="p2",
            name="Refill only/Slim Gallon",
            price=Money.of("30.00", currency),
            image_reference="images/slim_gallon_water.png",
        ),
        Product(
            id="p3",
            name="Water with Round Gallon",
            price=Money.of("200.00", currency),
            image_reference="images/round_gallon_water.png",
        ),
        Product(
            id="p4",
            name="Refill only/Round Gallon",
            price=Money.of("30.00", currency),
            image_reference="images/round_gallon_water.png",
        ),
    ]


class StaticProductRepository(ProductRepository):

    def __init__(self, products: list[Product]) -> None:
        self._products: dict[str, Product] = {}
        for product in products:
            self._products[product.id] = product

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._products.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._products.values())
