"""
Auth Service - login and registration for demo accounts
"""
import logging
import re
from typing import Optional, Tuple

from fastapi import status

from papalote.core.auth import create_access_token
from papalote.core.dates import utc_now_iso
from papalote.core.errors import PapaloteError, ValidationError
from papalote.domain.user import User
from papalote.repositories.user_repository import UserRepository


logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8
MIN_NAME_LENGTH = 3
SELF_SERVICE_ROLES = ("buyer", "seller")


class InvalidCredentialsError(PapaloteError):
    status_code = status.HTTP_401_UNAUTHORIZED


def validate_password_strength(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError("La contraseña debe tener al menos 8 caracteres")
    if not re.search(r"[A-Z]", password):
        raise ValidationError("Debe contener al menos una mayúscula")
    if not re.search(r"[a-z]", password):
        raise ValidationError("Debe contener al menos una minúscula")
    if not re.search(r"[0-9]", password):
        raise ValidationError("Debe contener al menos un número")


class AuthService:
    """
    Usage:
        user, token = AuthService().login("juan@ejemplo.com", "Password123")
    """

    def __init__(self, repo: Optional[UserRepository] = None):
        self.repo = repo or UserRepository()

    @staticmethod
    def issue_token(user: User) -> str:
        return create_access_token(user.id, user.email, user.name, user.role)

    def login(self, email: str, password: str) -> Tuple[User, str]:
        """
        Check credentials and issue an access token

        Raises:
            InvalidCredentialsError: unknown email or wrong password
        """
        user = self.repo.find_by_email(email)
        if user is None or not self.repo.verify_password(user, password):
            logger.warning(f"Failed login for {email}")
            raise InvalidCredentialsError("Correo o contraseña incorrectos")

        logger.info(f"User logged in: {user.email} ({user.role})")
        return user, self.issue_token(user)

    def register(
        self,
        name: str,
        email: str,
        password: str,
        confirm_password: str,
        accept_terms: bool,
        role: str = "buyer",
    ) -> Tuple[User, str]:
        """
        Create a buyer or seller account

        Raises:
            ValidationError: weak password, mismatch, terms not accepted,
                short name, unsupported role or email already registered
        """
        if len((name or "").strip()) < MIN_NAME_LENGTH:
            raise ValidationError("El nombre debe tener al menos 3 caracteres")
        validate_password_strength(password)
        if password != confirm_password:
            raise ValidationError("Las contraseñas no coinciden")
        if accept_terms is not True:
            raise ValidationError("Debes aceptar los términos y condiciones")
        if role not in SELF_SERVICE_ROLES:
            raise ValidationError(f"Rol no permitido: {role}")
        if self.repo.find_by_email(email) is not None:
            raise ValidationError("Este correo ya está registrado")

        user = self.repo.create(name.strip(), email, password, role, utc_now_iso())
        logger.info(f"User registered: {user.email} ({user.role})")
        return user, self.issue_token(user)
