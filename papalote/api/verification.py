"""
Seller Verification API Endpoints
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Query, status

from papalote.core.errors import ok
from papalote.services.verification_service import VerificationService


router = APIRouter()


@router.get("")
async def get_verification(email: Optional[str] = Query(None)):
    """Current verification request for a seller email (data is null when none exists)"""
    request = VerificationService().get_by_email(email)
    return ok(request.to_dict() if request else None)


@router.post("", status_code=status.HTTP_201_CREATED)
async def submit_verification(data: Dict[str, Any] = Body(...)):
    return ok(VerificationService().submit(data).to_dict())


@router.patch("")
async def update_verification(data: Dict[str, Any] = Body(...)):
    """Update a request by its id; status must be a known verification status"""
    return ok(VerificationService().update(data).to_dict())
