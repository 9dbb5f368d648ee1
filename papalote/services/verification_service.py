"""
Verification Service - seller verification requests
"""
import logging
from typing import Any, Dict, Optional, get_args

from pydantic import ValidationError as PydanticValidationError

from papalote.core.dates import utc_now, utc_now_iso
from papalote.core.errors import NotFoundError, ValidationError
from papalote.core.ids import random_base36
from papalote.domain.verification import (
    Questionnaire,
    VerificationDocuments,
    VerificationRequest,
    VerificationStatus,
)
from papalote.repositories.verification_repository import VerificationRepository


logger = logging.getLogger(__name__)

VERIFICATION_STATUSES = get_args(VerificationStatus)


class VerificationService:
    """
    Service for seller verification requests

    Usage:
        service = VerificationService()
        request = service.submit({"sellerEmail": "ana@ejemplo.com", ...})
    """

    def __init__(self, repo: Optional[VerificationRepository] = None):
        self.repo = repo or VerificationRepository()

    def get_by_email(self, email: Optional[str]) -> Optional[VerificationRequest]:
        """
        Current request for a seller email, or None

        Raises:
            ValidationError: if email is missing
        """
        if not email:
            raise ValidationError("Email required")
        return self.repo.find_by_email(email)

    def submit(self, data: Dict[str, Any]) -> VerificationRequest:
        """
        Submit a new request

        The request starts as "submitted" with no documents. A missing
        questionnaire gets the empty default. A previous request for the
        same email is replaced.

        Raises:
            ValidationError: if sellerEmail is missing or the payload is invalid
        """
        if not data.get("sellerEmail"):
            raise ValidationError("sellerEmail is required")

        now = utc_now_iso()
        try:
            request = VerificationRequest(
                id=f"ver_{int(utc_now().timestamp() * 1000)}_{random_base36(6)}",
                seller_id=str(data.get("sellerId") or ""),
                seller_name=data.get("sellerName") or "",
                seller_email=data["sellerEmail"],
                seller_type=data.get("sellerType") or "",
                requested_level=data.get("requestedLevel") or "",
                status="submitted",
                documents=VerificationDocuments(),
                questionnaire=Questionnaire.model_validate(data.get("questionnaire") or {}),
                created_at=now,
                submitted_at=now,
                updated_at=now,
            )
        except PydanticValidationError as e:
            raise ValidationError(f"Solicitud de verificación inválida: {e.errors()[0]['msg']}")

        self.repo.save(request)
        logger.info(f"Verification request {request.id} submitted by {request.seller_email}")
        return request

    def update(self, data: Dict[str, Any]) -> VerificationRequest:
        """
        Update a request by ID

        Any other fields in the payload overwrite the stored ones.

        Raises:
            ValidationError: if status is not a verification status
            NotFoundError: if no request has this ID
        """
        updates = dict(data)
        request_id = updates.pop("id", None)
        status = updates.pop("status", None)

        existing = self.repo.find_by_id(request_id) if request_id else None
        if existing is None:
            raise NotFoundError("Verification request not found")

        if status is not None and status not in VERIFICATION_STATUSES:
            raise ValidationError(f"Estado de verificación inválido: {status}")

        merged = existing.to_dict()
        merged.update(updates)
        merged["id"] = existing.id
        if status is not None:
            merged["status"] = status
        merged["updatedAt"] = utc_now_iso()

        try:
            updated = VerificationRequest.model_validate(merged)
        except PydanticValidationError as e:
            raise ValidationError(f"Solicitud de verificación inválida: {e.errors()[0]['msg']}")

        self.repo.save(updated)
        logger.info(f"Verification request {updated.id} updated: status={updated.status}")
        return updated
