"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. The storefront ships a fixed catalog, so the interface
is read-only.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from qualipure.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in display order."""
