"""
Product Domain Model

Represents a product entity in the Papalote catalog.
This is the single source of truth for product data structure.
"""
from typing import List, Literal, Optional

from pydantic import Field

from papalote.domain.base import CamelModel


SortOption = Literal["relevance", "price-asc", "price-desc", "rating-desc", "newest", "popular"]

SORT_OPTIONS = ("relevance", "price-asc", "price-desc", "rating-desc", "newest", "popular")


class Product(CamelModel):
    """
    Product domain model - represents an artisan product in our catalog

    Fields:
        id: Product ID (numeric string in fixtures)
        name: Product name
        description: Product description
        price: Price in MXN
        currency: Currency code (always MXN)
        category: Main category (e.g., "Cerámica y Alfarería")
        subcategory: Optional subcategory (e.g., "Talavera")
        state: Mexican state of origin
        maker: Shop/maker name (used to match seller orders)
        shop_id: Owning shop ID

        # Merchandising
        featured: Shown in featured sections
        verified: Maker is verified
        rating: Average rating (0-5)
        review_count: Number of reviews

        # Inventory
        in_stock: Whether the product can be bought
        stock: Units available
    """

    id: str = Field(..., description="Product ID")
    name: str = Field(..., description="Product name")
    description: str = Field("", description="Product description")
    price: float = Field(..., description="Price in MXN", gt=0)
    currency: str = Field("MXN", description="Currency code")

    category: str = Field(..., description="Main category")
    subcategory: Optional[str] = Field(None, description="Subcategory")
    sub_subcategory: Optional[str] = Field(None, description="Third-level category")
    state: str = Field(..., description="Mexican state of origin")
    maker: str = Field(..., description="Maker/shop name")
    shop_id: Optional[str] = Field(None, description="Owning shop ID")

    images: List[str] = Field(default_factory=list)
    videos: List[str] = Field(default_factory=list)
    materials: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)

    in_stock: bool = Field(True, description="Whether product is available")
    stock: int = Field(0, description="Units available", ge=0)
    featured: bool = False
    verified: bool = False
    rating: Optional[float] = Field(None, ge=0, le=5)
    review_count: int = Field(0, ge=0)

    created_at: Optional[str] = None

    @property
    def image(self) -> Optional[str]:
        """First image, used by list views"""
        return self.images[0] if self.images else None


class PriceRange(CamelModel):
    min: float = 0
    max: float = 10000


class ProductFilters(CamelModel):
    """
    Catalog filter state

    Tri-state booleans: None means "do not filter".
    """
    categories: List[str] = Field(default_factory=list)
    subcategories: List[str] = Field(default_factory=list)
    states: List[str] = Field(default_factory=list)
    price_range: PriceRange = Field(default_factory=PriceRange)
    min_rating: float = 0
    in_stock: Optional[bool] = None
    verified: Optional[bool] = None
    featured: Optional[bool] = None
    search_query: str = ""
    sort_by: SortOption = "relevance"


class SearchResult(CamelModel):
    product: Product
    score: float
    matched_fields: List[str]


class SeasonalTheme(CamelModel):
    id: str
    name: str
    description: str
    start_date: str  # MM-DD
    end_date: str  # MM-DD
    categories: List[str]
    keywords: List[str]
    icon: str
