"""
Shared API dependencies
"""
import uuid
from typing import Optional

from fastapi import Cookie, HTTPException, Response, status

from papalote.core.auth import TokenUser


SESSION_COOKIE = "papalote_session"
SESSION_MAX_AGE = 60 * 60 * 24 * 30  # 30 days


async def get_session_id(
    response: Response,
    papalote_session: Optional[str] = Cookie(None),
) -> str:
    """
    Visitor session ID from the papalote_session cookie

    A new session is created (and the cookie set) on first use.
    """
    if papalote_session:
        return papalote_session

    session_id = uuid.uuid4().hex
    response.set_cookie(
        key=SESSION_COOKIE,
        value=session_id,
        max_age=SESSION_MAX_AGE,
        httponly=True,
        samesite="lax",
    )
    return session_id


def resolve_email(email: Optional[str], user: Optional[TokenUser]) -> str:
    """Explicit email wins; otherwise the signed-in user's email"""
    resolved = email or (user.email if user else None)
    if not resolved:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="email is required"
        )
    return resolved.lower()


def check_seller_access(seller_id: Optional[str], user: TokenUser) -> Optional[str]:
    """
    Reject a sellerId that is not the caller's own (admins may pass any)

    A missing sellerId is passed through for the service to reject.
    """
    if seller_id and seller_id != user.id and not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="No puedes acceder a los datos de otro vendedor"
        )
    return seller_id


def resolve_seller_id(seller_id: Optional[str], user: TokenUser) -> str:
    """
    Seller the request acts for

    Sellers act for themselves; admins may act for any seller.
    """
    return check_seller_access(seller_id, user) or user.id

