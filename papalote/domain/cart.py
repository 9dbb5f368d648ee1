"""
Cart Domain Model
"""
from pydantic import Field

from papalote.domain.product import Product


class CartItem(Product):
    """Cart line: the product snapshot plus the quantity"""
    quantity: int = Field(1, ge=1)

    @property
    def line_total(self) -> float:
        return self.price * self.quantity
