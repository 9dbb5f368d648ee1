"""
Seller Domain Models

Seller-side entities: catalog drafts, shop profiles, reviews, messages and
the task centre.
"""
from typing import Dict, List, Literal, Optional

from pydantic import Field

from papalote.domain.base import CamelModel


SellerProductStatus = Literal["draft", "published"]
SellerType = Literal["hobby_maker", "artisan_individual", "workshop", "company"]
TaskPriority = Literal["critical", "high", "medium", "low"]
TaskType = Literal["order", "stock", "message", "review"]

# Sort order for the task centre (lower first)
PRIORITY_ORDER: Dict[str, int] = {
    "critical": 0,
    "high": 1,
    "medium": 2,
    "low": 3,
}


class SellerProduct(CamelModel):
    """
    Product as managed by its seller (draft or published listing)

    Mirrors the product form: only name, price and category are required,
    the rest is optional until the listing is published.
    """
    id: str
    seller_id: str
    seller_name: str = "Vendedor"
    status: SellerProductStatus = "published"

    name: str
    description: str = ""
    price: float = Field(..., ge=0)
    category: str
    subcategory: Optional[str] = None
    state: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    materials: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    stock: int = Field(0, ge=0)

    created_at: str
    updated_at: str


class Shop(CamelModel):
    id: str
    name: str
    owner_id: Optional[str] = None
    seller_type: SellerType = "artisan_individual"
    state: str
    city: Optional[str] = None
    description: str = ""
    verified: bool = False
    rating: Optional[float] = Field(None, ge=0, le=5)
    review_count: int = 0
    products_count: int = 0
    member_since: Optional[str] = None
    image: Optional[str] = None


class ReviewResponse(CamelModel):
    text: str
    date: str


class Review(CamelModel):
    id: str
    product_id: str
    product_name: str
    shop_id: str
    buyer_name: str
    rating: int = Field(..., ge=1, le=5)
    comment: str = ""
    date: str
    helpful: int = 0
    response: Optional[ReviewResponse] = None


class MessageParty(CamelModel):
    id: str
    name: str


class MessageReply(CamelModel):
    # "from" is a Python keyword
    sender: str = Field(..., alias="from")
    message: str
    date: str


class SellerMessage(CamelModel):
    id: str
    seller_id: str
    sender: MessageParty = Field(..., alias="from")
    subject: str
    message: str
    date: str
    status: Literal["read", "unread"] = "unread"
    order_id: Optional[str] = None
    replies: List[MessageReply] = Field(default_factory=list)


class SellerTask(CamelModel):
    """Actionable item shown in the seller task centre"""
    id: str
    type: TaskType
    priority: TaskPriority
    title: str
    description: str
    reference_id: str
    created_at: Optional[str] = None
