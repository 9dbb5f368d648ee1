"""
User Repository - accounts for login and registration

Demo accounts in users.json carry a plaintext "password" that is hashed the
first time the account is read, so the store never hands out plaintext.
"""
from typing import List, Optional

from passlib.context import CryptContext

from papalote.core.storage import DataStore, get_store
from papalote.domain.user import User


# Password hashing context
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class UserRepository:
    """Repository for User data access"""

    def __init__(self, store: Optional[DataStore] = None):
        self.store = store or get_store()

    @staticmethod
    def _ensure_hashed(row: dict) -> dict:
        if 'password' in row:
            row['passwordHash'] = pwd_context.hash(row.pop('password'))
        return row

    @classmethod
    def _map_row_to_user(cls, row: dict) -> User:
        return User.model_validate(cls._ensure_hashed(row))

    def find_all(self) -> List[User]:
        return [self._map_row_to_user(row) for row in self.store.users]

    def find_by_email(self, email: str) -> Optional[User]:
        email_lower = email.lower()
        for row in self.store.users:
            if row['email'].lower() == email_lower:
                return self._map_row_to_user(row)
        return None

    def find_by_id(self, user_id: str) -> Optional[User]:
        for row in self.store.users:
            if str(row['id']) == str(user_id):
                return self._map_row_to_user(row)
        return None

    def create(self, name: str, email: str, password: str, role: str, created_at: str) -> User:
        """Create an account with a hashed password"""
        next_id = max((int(row['id']) for row in self.store.users if str(row['id']).isdigit()), default=0) + 1
        row = {
            'id': str(next_id),
            'name': name,
            'email': email.lower(),
            'role': role,
            'passwordHash': pwd_context.hash(password),
            'createdAt': created_at,
        }
        self.store.users.append(row)
        return self._map_row_to_user(row)

    @staticmethod
    def verify_password(user: User, password: str) -> bool:
        if not user.password_hash:
            return False
        return pwd_context.verify(password, user.password_hash)
