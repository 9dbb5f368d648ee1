"""
Products API Endpoints
Catalog browsing: listing with filters, fuzzy search, seasonal picks,
product detail, recommendations and the visitor's browsing lists
(comparison, recently viewed, search history)
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from papalote.api.deps import get_session_id
from papalote.core.errors import NotFoundError, PapaloteError, ok
from papalote.repositories.product_repository import ProductRepository
from papalote.repositories.review_repository import ReviewRepository
from papalote.services.browsing_service import BrowsingService
from papalote.services.filter_service import FilterService, PRODUCTS_PER_PAGE, filters_from_query
from papalote.services.recommendation_service import RecommendationService
from papalote.services.search_service import SearchService
from papalote.services.season_service import SeasonService


logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Catalog
# =============================================================================

@router.get("")
async def list_products(
    categoria: Optional[str] = Query(None, description="Category"),
    subcategoria: Optional[str] = Query(None, description="Subcategory"),
    estado: Optional[str] = Query(None, description="Mexican state of origin"),
    q: Optional[str] = Query(None, description="Search text"),
    ordenar: Optional[str] = Query(None, description="relevance|price-asc|price-desc|rating-desc|newest|popular"),
    pagina: int = Query(1, ge=1, description="Page number"),
    precio: Optional[str] = Query(None, description="Maximum price"),
    destacado: Optional[str] = Query(None, description="si|no"),
    verificado: Optional[str] = Query(None, description="si|no"),
    por_pagina: int = Query(PRODUCTS_PER_PAGE, ge=1, le=100, alias="porPagina"),
):
    """
    List catalog products

    Query parameters use the storefront's Spanish names. Invalid sort or
    price values are ignored rather than rejected.
    """
    try:
        all_products = ProductRepository().find_all()
        filters = filters_from_query(categoria, subcategoria, estado, q, ordenar, precio, destacado, verificado)

        filtered = FilterService.apply(all_products, filters)
        page_items, total_pages = FilterService.paginate(filtered, pagina, por_pagina)
        catalog_range = FilterService.price_range(all_products)

        return ok(
            [p.to_dict() for p in page_items],
            total=len(filtered),
            page=pagina,
            perPage=por_pagina,
            totalPages=total_pages,
            filters=filters.to_dict(),
            activeFilterCount=FilterService.active_filter_count(filters, catalog_range),
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error listing products: {e}")
        raise HTTPException(status_code=500, detail="Error al obtener productos")


@router.get("/filters")
async def get_filter_options():
    """Filter panel options: categories, subcategories, states and price range"""
    products = ProductRepository().find_all()
    options = FilterService.filter_options(products)
    options["priceRange"] = FilterService.price_range(products).to_dict()
    return ok(options)


@router.get("/search")
async def search_products(
    q: str = Query("", description="Search text"),
    limit: int = Query(10, ge=1, le=50),
    session_id: str = Depends(get_session_id),
):
    """Fuzzy search; non-blank queries are added to the visitor's search history"""
    try:
        results = SearchService.search(ProductRepository().find_all(), q, limit=limit)
        if q.strip():
            BrowsingService(session_id).add_search(q)

        return ok(
            [
                {
                    "product": r.product.to_dict(),
                    "score": round(r.score, 4),
                    "matchedFields": r.matched_fields,
                }
                for r in results
            ],
            total=len(results),
            query=q,
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error searching products for '{q}': {e}")
        raise HTTPException(status_code=500, detail="Error al buscar productos")


@router.get("/suggestions")
async def get_suggestions(q: str = Query("", description="Partial search text")):
    """Autocomplete terms"""
    return ok(SearchService.suggestions(ProductRepository().find_all(), q))


@router.get("/seasonal")
async def get_seasonal():
    """Current and upcoming seasonal themes with matching products"""
    current = SeasonService.current_theme()
    upcoming = SeasonService.upcoming_theme()
    products = ProductRepository().find_all()
    featured_theme = current or upcoming

    return ok({
        "current": current.to_dict() if current else None,
        "upcoming": upcoming.to_dict(),
        "products": [p.to_dict() for p in SeasonService.products_for_theme(featured_theme, products)],
    })


# =============================================================================
# Comparison
# =============================================================================

@router.get("/compare")
async def get_comparison(session_id: str = Depends(get_session_id)):
    return ok(BrowsingService(session_id).comparison_state())


@router.post("/compare/{product_id}")
async def add_to_comparison(product_id: str, session_id: str = Depends(get_session_id)):
    """Add a product; "added" is false when it was already there or the list is full"""
    service = BrowsingService(session_id)
    added = service.add_to_comparison(product_id)
    return ok(service.comparison_state(), added=added)


@router.post("/compare/{product_id}/toggle")
async def toggle_comparison(product_id: str, session_id: str = Depends(get_session_id)):
    service = BrowsingService(session_id)
    in_list = service.toggle_comparison(product_id)
    return ok(service.comparison_state(), inComparison=in_list)


@router.delete("/compare/{product_id}")
async def remove_from_comparison(product_id: str, session_id: str = Depends(get_session_id)):
    service = BrowsingService(session_id)
    service.remove_from_comparison(product_id)
    return ok(service.comparison_state())


@router.delete("/compare")
async def clear_comparison(session_id: str = Depends(get_session_id)):
    service = BrowsingService(session_id)
    service.clear_comparison()
    return ok(service.comparison_state())


# =============================================================================
# Recently viewed & search history
# =============================================================================

@router.get("/recently-viewed")
async def get_recently_viewed(session_id: str = Depends(get_session_id)):
    products = BrowsingService(session_id).recently_viewed()
    return ok([p.to_dict() for p in products], total=len(products))


@router.delete("/recently-viewed")
async def clear_recently_viewed(session_id: str = Depends(get_session_id)):
    BrowsingService(session_id).clear_recently_viewed()
    return ok([])


@router.get("/search-history")
async def get_search_history(session_id: str = Depends(get_session_id)):
    return ok(BrowsingService(session_id).search_history())


@router.delete("/search-history")
async def delete_search_history(
    query: Optional[str] = Query(None, description="Entry to remove; omit to clear all"),
    session_id: str = Depends(get_session_id),
):
    service = BrowsingService(session_id)
    if query:
        return ok(service.remove_search(query))
    service.clear_search_history()
    return ok([])


# =============================================================================
# Product detail
# =============================================================================

@router.get("/{product_id}")
async def get_product(product_id: str, session_id: str = Depends(get_session_id)):
    """
    Product detail with its reviews

    Viewing a product moves it to the front of the visitor's recently viewed list.
    """
    try:
        product = ProductRepository().find_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Producto no encontrado: {product_id}")

        BrowsingService(session_id).record_view(product.id)
        reviews = ReviewRepository().find_by_product(product.id)

        data = product.to_dict()
        data["reviews"] = [r.to_dict() for r in reviews]
        return ok(data)

    except (HTTPException, PapaloteError):
        raise
    except Exception as e:
        logger.error(f"Error fetching product {product_id}: {e}")
        raise HTTPException(status_code=500, detail="Error al obtener el producto")


@router.get("/{product_id}/recommendations")
async def get_recommendations(
    product_id: str,
    limit: int = Query(4, ge=1, le=12),
    session_id: str = Depends(get_session_id),
):
    """Similar, cross-category and recently viewed products"""
    repo = ProductRepository()
    product = repo.find_by_id(product_id)
    if product is None:
        raise NotFoundError(f"Producto no encontrado: {product_id}")

    recent_ids = BrowsingService(session_id).recently_viewed_ids(exclude=product.id)
    groups = RecommendationService.combined(product, repo.find_all(), recent_ids, limit, limit, limit)
    return ok({key: [p.to_dict() for p in products] for key, products in groups.items()})
