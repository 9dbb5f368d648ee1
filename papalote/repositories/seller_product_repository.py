"""
Seller Product Repository - draft and published listings managed by sellers
"""
from typing import List, Optional

from papalote.core.storage import DataStore, get_store
from papalote.domain.seller import SellerProduct


class SellerProductRepository:
    """
    Repository for seller-managed listings

    Listings are stored newest first.
    """

    def __init__(self, store: Optional[DataStore] = None):
        self.store = store or get_store()

    @staticmethod
    def _map_row_to_product(row: dict) -> SellerProduct:
        return SellerProduct.model_validate(row)

    def find_by_seller(self, seller_id: str, status: Optional[str] = None) -> List[SellerProduct]:
        """
        Find a seller's listings

        Args:
            seller_id: Seller ID
            status: "draft", "published", or None for both

        Returns:
            Listings sorted by last update, newest first
        """
        products = [
            self._map_row_to_product(row)
            for row in self.store.seller_products
            if str(row['sellerId']) == str(seller_id)
            and (status is None or row.get('status') == status)
        ]
        return sorted(products, key=lambda p: p.updated_at, reverse=True)

    def find_by_id(self, product_id: str) -> Optional[SellerProduct]:
        for row in self.store.seller_products:
            if row['id'] == product_id:
                return self._map_row_to_product(row)
        return None

    def save(self, product: SellerProduct) -> SellerProduct:
        """Insert a new listing or replace the one with the same ID"""
        data = product.to_dict()
        for index, row in enumerate(self.store.seller_products):
            if row['id'] == product.id:
                self.store.seller_products[index] = data
                return product

        self.store.seller_products.insert(0, data)
        return product

    def delete(self, product_id: str, seller_id: str) -> bool:
        before = len(self.store.seller_products)
        self.store.seller_products = [
            row for row in self.store.seller_products
            if not (row['id'] == product_id and str(row['sellerId']) == str(seller_id))
        ]
        return len(self.store.seller_products) != before
