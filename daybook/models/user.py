"""
User model
"""

from typing import ClassVar, Optional
from pydantic import BaseModel
from .base import Record


class User(Record):
    """Stored account; credentials are a bcrypt hash, never the password"""

    kind: ClassVar[str] = "user"
    collection: ClassVar[str] = "users"

    email: str
    name: str
    password_hash: Optional[str] = None


class Session(BaseModel):
    """Signed-in identity passed explicitly into every service call"""

    user_id: str
    name: str
    email: str
    is_guest: bool = False
    token: str = ""
