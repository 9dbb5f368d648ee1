"""
User account model
"""
from typing import Literal, Optional

from papalote.domain.base import CamelModel


UserRole = Literal["buyer", "seller", "admin"]


class User(CamelModel):
    id: str
    name: str
    email: str
    role: UserRole = "buyer"
    shop_name: Optional[str] = None
    state: Optional[str] = None
    created_at: Optional[str] = None

    # Never serialized to clients
    password_hash: Optional[str] = None

    def to_public_dict(self) -> dict:
        data = self.to_dict()
        data.pop("passwordHash", None)
        return data
