"""
Seller verification request models
"""
from typing import List, Literal, Optional

from pydantic import Field

from papalote.domain.base import CamelModel


VerificationStatus = Literal[
    "draft",
    "submitted",
    "under_review",
    "info_requested",
    "approved",
    "rejected",
    "expired",
]


class VerificationDocuments(CamelModel):
    # Uploaded file metadata is passed through untouched
    government_id: Optional[dict] = None
    proof_of_address: Optional[dict] = None
    curp: Optional[dict] = None
    rfc: Optional[dict] = None
    craft_photos: List[dict] = Field(default_factory=list)
    craft_videos: List[dict] = Field(default_factory=list)
    workshop_photos: List[dict] = Field(default_factory=list)
    certifications: List[dict] = Field(default_factory=list)
    references: List[dict] = Field(default_factory=list)
    awards: List[dict] = Field(default_factory=list)


class WorkshopLocation(CamelModel):
    state: str = ""
    city: str = ""
    address: Optional[str] = None
    has_physical_workshop: bool = False


class Questionnaire(CamelModel):
    craft_type: List[str] = Field(default_factory=list)
    techniques: List[str] = Field(default_factory=list)
    years_of_experience: int = 0
    production_capacity: Literal["small", "medium", "large"] = "small"
    location: WorkshopLocation = Field(default_factory=WorkshopLocation)
    heritage_info: Optional[str] = None
    cultural_significance: Optional[str] = None
    indigenous_community: Optional[str] = None
    traditional_techniques: Optional[bool] = None


class VerificationRequest(CamelModel):
    id: str
    seller_id: str
    seller_name: str
    seller_email: str
    seller_type: str
    requested_level: str
    status: VerificationStatus

    documents: VerificationDocuments = Field(default_factory=VerificationDocuments)
    questionnaire: Questionnaire = Field(default_factory=Questionnaire)

    reviewed_by: Optional[str] = None
    reviewed_by_name: Optional[str] = None
    reviewed_at: Optional[str] = None
    review_notes: Optional[str] = None
    approved_level: Optional[str] = None
    rejection_reason: Optional[str] = None
    requested_info: Optional[str] = None

    created_at: str
    submitted_at: Optional[str] = None
    updated_at: str
    expires_at: Optional[str] = None
