"""
Cart Service - shopping cart for a visitor session

The session stores lines as {"productId", "quantity"}; products are
resolved from the catalog on every read so price and stock stay current.
"""
import logging
from typing import List, Optional

from papalote.core.errors import NotFoundError, ValidationError
from papalote.domain.cart import CartItem
from papalote.domain.product import Product
from papalote.repositories.product_repository import ProductRepository
from papalote.repositories.session_repository import SessionRepository


logger = logging.getLogger(__name__)


class CartService:
    """
    Session-scoped shopping cart

    Usage:
        cart = CartService(session_id)
        cart.add("3", quantity=2)
        cart.total()
    """

    def __init__(
        self,
        session_id: str,
        session_repo: Optional[SessionRepository] = None,
        product_repo: Optional[ProductRepository] = None,
    ):
        self.session = session_repo or SessionRepository(session_id)
        self.products = product_repo or ProductRepository()

    def _lines(self) -> List[dict]:
        return self.session.get_list("cart")

    def _require_product(self, product_id: str) -> Product:
        product = self.products.find_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Producto no encontrado: {product_id}")
        return product

    def items(self) -> List[CartItem]:
        """Cart lines in insertion order; lines whose product vanished are skipped"""
        items = []
        for line in self._lines():
            product = self.products.find_by_id(line["productId"])
            if product is None:
                continue
            items.append(CartItem(**product.model_dump(), quantity=line["quantity"]))
        return items

    def add(self, product_id: str, quantity: int = 1) -> List[CartItem]:
        """
        Add a product, merging with an existing line

        Raises:
            NotFoundError: if the product does not exist
            ValidationError: if quantity is below 1
        """
        if quantity < 1:
            raise ValidationError("La cantidad debe ser al menos 1")

        product = self._require_product(product_id)
        for line in self._lines():
            if line["productId"] == product.id:
                line["quantity"] += quantity
                break
        else:
            self._lines().append({"productId": product.id, "quantity": quantity})

        logger.debug(f"Cart add: product={product.id} quantity={quantity}")
        return self.items()

    def remove(self, product_id: str) -> List[CartItem]:
        remaining = [line for line in self._lines() if line["productId"] != product_id]
        self.session.set_list("cart", remaining)
        return self.items()

    def update_quantity(self, product_id: str, quantity: int) -> List[CartItem]:
        """Set a line's quantity; zero or less removes the line"""
        if quantity <= 0:
            return self.remove(product_id)

        self._require_product(product_id)
        for line in self._lines():
            if line["productId"] == product_id:
                line["quantity"] = quantity
                break
        return self.items()

    def clear(self) -> None:
        self.session.set_list("cart", [])

    def count(self) -> int:
        """Total units in the cart"""
        return sum(item.quantity for item in self.items())

    def total(self) -> float:
        return sum(item.price * item.quantity for item in self.items())

    def is_in_cart(self, product_id: str) -> bool:
        return any(line["productId"] == product_id for line in self._lines())

    def summary(self) -> dict:
        return {
            "items": [item.to_dict() for item in self.items()],
            "count": self.count(),
            "total": self.total(),
        }
