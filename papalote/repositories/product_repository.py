"""
Product Repository - Data Access Layer for Products

Reads the catalog from the fixture store and returns Product domain models.
"""
from typing import List, Optional

from papalote.core.storage import DataStore, get_store
from papalote.domain.product import Product


class ProductRepository:
    """
    Repository for Product data access

    All catalog lookups are centralized here.
    Returns Product domain models, not raw dictionaries.
    """

    def __init__(self, store: Optional[DataStore] = None):
        self.store = store or get_store()

    @staticmethod
    def _map_row_to_product(row: dict) -> Product:
        """
        Helper method to map a fixture record to the Product domain model.

        Older fixtures have no stock count; those default to 0 while keeping
        their inStock flag.
        """
        return Product(
            id=str(row['id']),
            name=row['name'],
            description=row.get('description', ''),
            price=row['price'],
            currency=row.get('currency', 'MXN'),
            category=row['category'],
            subcategory=row.get('subcategory'),
            sub_subcategory=row.get('subSubcategory'),
            state=row['state'],
            maker=row['maker'],
            shop_id=row.get('shopId'),
            images=row.get('images', []),
            videos=row.get('videos', []),
            materials=row.get('materials', []),
            tags=row.get('tags', []),
            in_stock=row.get('inStock', True),
            stock=row.get('stock', 0),
            featured=row.get('featured', False),
            verified=row.get('verified', False),
            rating=row.get('rating'),
            review_count=row.get('reviewCount', 0),
            created_at=row.get('createdAt')
        )

    def find_all(self) -> List[Product]:
        """All catalog products in fixture order"""
        return [self._map_row_to_product(row) for row in self.store.products]

    def find_by_id(self, product_id: str) -> Optional[Product]:
        """
        Find product by ID

        Args:
            product_id: Product ID

        Returns:
            Product or None if not found
        """
        for row in self.store.products:
            if str(row['id']) == str(product_id):
                return self._map_row_to_product(row)
        return None

    def find_by_ids(self, product_ids: List[str]) -> List[Product]:
        """
        Find several products, keeping the order of product_ids

        Unknown IDs are skipped.
        """
        by_id = {str(row['id']): row for row in self.store.products}
        return [
            self._map_row_to_product(by_id[str(pid)])
            for pid in product_ids
            if str(pid) in by_id
        ]

    def find_by_maker(self, maker: str) -> List[Product]:
        """Products sold under a maker/shop name (case-insensitive)"""
        maker_lower = maker.lower()
        return [
            self._map_row_to_product(row)
            for row in self.store.products
            if row['maker'].lower() == maker_lower
        ]

    def find_by_shop(self, shop_id: str) -> List[Product]:
        return [
            self._map_row_to_product(row)
            for row in self.store.products
            if row.get('shopId') == shop_id
        ]
