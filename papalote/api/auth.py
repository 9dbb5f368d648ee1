"""
Authentication API Endpoints
Login, registration and the current user
"""
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import EmailStr

from papalote.core.auth import TokenUser, get_current_user
from papalote.core.errors import ok
from papalote.core.rate_limit import login_rate_limit
from papalote.domain.base import CamelModel
from papalote.repositories.user_repository import UserRepository
from papalote.services.auth_service import AuthService


router = APIRouter()


# =============================================================================
# Pydantic Models
# =============================================================================

class LoginRequest(CamelModel):
    email: EmailStr
    password: str


class RegisterRequest(CamelModel):
    name: str
    email: EmailStr
    password: str
    confirm_password: str
    accept_terms: bool = False
    role: str = "buyer"


# =============================================================================
# Endpoints
# =============================================================================

@router.post("/login")
async def login(payload: LoginRequest, _: None = Depends(login_rate_limit)):
    """Exchange email and password for a bearer token"""
    user, token = AuthService().login(payload.email, payload.password)
    return ok({
        "accessToken": token,
        "tokenType": "bearer",
        "user": user.to_public_dict(),
    })


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterRequest, _: None = Depends(login_rate_limit)):
    user, token = AuthService().register(
        name=payload.name,
        email=payload.email,
        password=payload.password,
        confirm_password=payload.confirm_password,
        accept_terms=payload.accept_terms,
        role=payload.role,
    )
    return ok({
        "accessToken": token,
        "tokenType": "bearer",
        "user": user.to_public_dict(),
    }, message="Cuenta creada exitosamente")


@router.get("/me")
async def get_me(user: TokenUser = Depends(get_current_user)):
    """Profile of the signed-in user"""
    account = UserRepository().find_by_id(user.id)
    if account is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Usuario no encontrado"
        )
    return ok(account.to_public_dict())
