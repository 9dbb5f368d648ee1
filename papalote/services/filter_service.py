"""
Filter Service - catalog filtering, sorting and pagination

Handles the catalog filter panel and the Spanish URL query parameters:
    ?categoria=Joyería&estado=Oaxaca&q=plata&ordenar=price-asc&pagina=2
"""
import math
from typing import Dict, List, Optional, Tuple

from papalote.domain.product import PriceRange, Product, ProductFilters, SORT_OPTIONS


PRODUCTS_PER_PAGE = 12
MAX_PRICE_PARAM = 1_000_000
DEFAULT_PRICE_RANGE = PriceRange(min=0, max=10000)


def validate_price_param(price: Optional[str]) -> Optional[int]:
    """Parse the "precio" parameter; anything outside 0..1,000,000 is ignored"""
    if not price:
        return None
    try:
        parsed = int(price)
    except ValueError:
        return None
    if parsed < 0 or parsed > MAX_PRICE_PARAM:
        return None
    return parsed


def validate_sort_param(sort: Optional[str]) -> str:
    """Unknown sort values fall back to relevance"""
    return sort if sort in SORT_OPTIONS else "relevance"


def parse_yes_no(value: Optional[str]) -> Optional[bool]:
    """"si" -> True, "no" -> False, anything else -> no filter"""
    if value == "si":
        return True
    if value == "no":
        return False
    return None


def filters_from_query(
    categoria: Optional[str] = None,
    subcategoria: Optional[str] = None,
    estado: Optional[str] = None,
    q: Optional[str] = None,
    ordenar: Optional[str] = None,
    precio: Optional[str] = None,
    destacado: Optional[str] = None,
    verificado: Optional[str] = None,
) -> ProductFilters:
    """Build ProductFilters from URL query parameters"""
    max_price = validate_price_param(precio)
    return ProductFilters(
        categories=[categoria] if categoria else [],
        subcategories=[subcategoria] if subcategoria else [],
        states=[estado] if estado else [],
        price_range=PriceRange(min=0, max=max_price if max_price is not None else MAX_PRICE_PARAM),
        search_query=q or "",
        sort_by=validate_sort_param(ordenar),
        featured=parse_yes_no(destacado),
        verified=parse_yes_no(verificado),
    )


def _newest_key(product: Product) -> int:
    # Catalog IDs are sequential numbers
    return int(product.id) if product.id.isdigit() else 0


class FilterService:
    """
    Service for filtering the product catalog

    Usage:
        service = FilterService()
        products = service.apply(all_products, filters)
    """

    @staticmethod
    def apply(products: List[Product], filters: ProductFilters) -> List[Product]:
        """
        Filter and sort products

        Filters combine with AND. Price range bounds are inclusive.
        "relevance" keeps the incoming order.
        """
        filtered = list(products)

        query = filters.search_query.strip().lower()
        if query:
            filtered = [
                p for p in filtered
                if query in p.name.lower()
                or query in p.description.lower()
                or query in p.maker.lower()
                or query in p.category.lower()
            ]

        if filters.categories:
            filtered = [p for p in filtered if p.category in filters.categories]

        if filters.subcategories:
            filtered = [p for p in filtered if p.subcategory and p.subcategory in filters.subcategories]

        if filters.states:
            filtered = [p for p in filtered if p.state in filters.states]

        filtered = [
            p for p in filtered
            if filters.price_range.min <= p.price <= filters.price_range.max
        ]

        if filters.min_rating > 0:
            filtered = [p for p in filtered if p.rating and p.rating >= filters.min_rating]

        if filters.in_stock is not None:
            filtered = [p for p in filtered if p.in_stock == filters.in_stock]

        if filters.verified is not None:
            filtered = [p for p in filtered if p.verified == filters.verified]

        if filters.featured is not None:
            filtered = [p for p in filtered if p.featured == filters.featured]

        sort_by = filters.sort_by
        if sort_by == "price-asc":
            filtered.sort(key=lambda p: p.price)
        elif sort_by == "price-desc":
            filtered.sort(key=lambda p: p.price, reverse=True)
        elif sort_by == "rating-desc":
            filtered.sort(key=lambda p: p.rating or 0, reverse=True)
        elif sort_by == "newest":
            filtered.sort(key=_newest_key, reverse=True)
        elif sort_by == "popular":
            filtered.sort(key=lambda p: p.review_count or 0, reverse=True)

        return filtered

    @staticmethod
    def price_range(products: List[Product]) -> PriceRange:
        """Catalog price bounds, rounded out to the nearest 100"""
        if not products:
            return DEFAULT_PRICE_RANGE.model_copy()
        prices = [p.price for p in products]
        return PriceRange(
            min=math.floor(min(prices) / 100) * 100,
            max=math.ceil(max(prices) / 100) * 100,
        )

    @staticmethod
    def filter_options(products: List[Product]) -> Dict[str, List[str]]:
        """Sorted unique categories, subcategories and states"""
        return {
            "categories": sorted({p.category for p in products if p.category}),
            "subcategories": sorted({p.subcategory for p in products if p.subcategory}),
            "states": sorted({p.state for p in products if p.state}),
        }

    @staticmethod
    def active_filter_count(filters: ProductFilters, catalog_range: PriceRange) -> int:
        """Number of filter groups that differ from the defaults"""
        count = 0
        if filters.categories:
            count += 1
        if filters.subcategories:
            count += 1
        if filters.states:
            count += 1
        if filters.price_range.min > catalog_range.min or filters.price_range.max < catalog_range.max:
            count += 1
        if filters.min_rating > 0:
            count += 1
        if filters.in_stock is not None:
            count += 1
        if filters.verified is not None:
            count += 1
        if filters.featured is not None:
            count += 1
        if filters.search_query.strip():
            count += 1
        return count

    @staticmethod
    def paginate(products: List[Product], page: int = 1, per_page: int = PRODUCTS_PER_PAGE) -> Tuple[List[Product], int]:
        """
        Slice one page of results

        Returns:
            Tuple of (page_items, total_pages). Pages start at 1; out-of-range
            pages return an empty list.
        """
        total_pages = max(1, math.ceil(len(products) / per_page))
        page = max(1, page)
        start = (page - 1) * per_page
        return products[start:start + per_page], total_pages
