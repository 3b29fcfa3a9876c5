"""
Authentication service
Registers and signs in users against the users collection and hands out signed, expiring session tokens
"""

import secrets
import time
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError

from daybook.client.store_client import StoreClient, store_client
from daybook.models.user import Session, User
from daybook.utils.config import settings
from daybook.utils.dates import iso_timestamp
from daybook.utils.errors import RecordValidationError
from daybook.utils.logger import logger

GUEST_USER_ID = "guest"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """False for a wrong password or a hash passlib does not recognise"""
    try:
        return pwd_context.verify(password, password_hash)
    except ValueError:
        logger.warning("Stored password hash has an unknown format")
        return False


class AuthService:
    """Authentication service

    Sessions are JWTs carrying the identity and an expiry; nothing is kept per
    session. Only tokens signed out before they expire are remembered, and
    each is forgotten once it would have expired anyway.
    """

    def __init__(self, client: Optional[StoreClient] = None, secret_key: Optional[str] = None):
        self.client = client or store_client
        self.secret_key = secret_key or settings.jwt_secret_key
        if not self.secret_key:
            logger.warning("JWT_SECRET_KEY is not set, sign-ins will not survive a restart")
            self.secret_key = secrets.token_urlsafe(32)
        # jti -> exp of signed-out tokens
        self._revoked: Dict[str, int] = {}

    async def _load_users(self) -> Dict[str, User]:
        data = await self.client.get(User.collection)
        if not data:
            return {}

        users = {}
        for user_id, body in data.items():
            if not isinstance(body, dict):
                continue
            try:
                users[user_id] = User.from_record(user_id, body)
            except ValidationError:
                logger.warning(f"Skipping malformed user {user_id}")
        return users

    def create_token(self, user_id: str, name: str, email: str, is_guest: bool = False,
                     expires_delta: Optional[timedelta] = None) -> str:
        """
        Sign a session token

        Args:
            user_id: store key of the user, or GUEST_USER_ID
            name: display name
            email: login email
            is_guest: shared guest identity
            expires_delta: lifetime, defaults to settings.access_token_expire_minutes

        Returns:
            the encoded JWT
        """
        expire = datetime.now(timezone.utc) + (
            expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
        )
        claims = {
            "sub": user_id,
            "name": name,
            "email": email,
            "guest": is_guest,
            "jti": secrets.token_hex(16),
            "exp": expire,
        }
        return jwt.encode(claims, self.secret_key, algorithm=settings.jwt_algorithm)

    def _decode(self, token: str) -> Optional[Dict[str, Any]]:
        if not token:
            return None
        try:
            claims = jwt.decode(token, self.secret_key, algorithms=[settings.jwt_algorithm])
        except JWTError:
            return None
        if claims.get("jti") in self._revoked:
            return None
        return claims

    def _open_session(self, user_id: str, name: str, email: str, is_guest: bool = False) -> Session:
        token = self.create_token(user_id, name, email, is_guest)
        return Session(user_id=user_id, name=name, email=email, is_guest=is_guest, token=token)

    async def register(self, email: str, password: str, name: str) -> Optional[Session]:
        """
        Create an account and sign it in

        Args:
            email: login email, must be unused
            password: clear-text password, only its bcrypt hash is stored
            name: display name

        Returns:
            the new session, None if the email is taken or the store failed

        Raises:
            RecordValidationError: empty email, password or name
        """
        email = email.strip().lower()
        name = name.strip()
        if not email or not password or not name:
            raise RecordValidationError(User.kind, "email, password and name are required")

        users = await self._load_users()
        if any(user.email.lower() == email for user in users.values()):
            logger.info(f"Registration refused, email already in use: {email}")
            return None

        user = User(
            email=email,
            name=name,
            password_hash=hash_password(password),
            created_at=iso_timestamp(),
        )
        body = user.to_record()
        body.pop("id", None)
        body.pop("userId", None)

        user_id = await self.client.post(User.collection, body)
        if not user_id:
            logger.error(f"Registration failed for {email}")
            return None

        logger.info(f"User registered: {user_id}")
        return self._open_session(user_id, name, email)

    async def login(self, email: str, password: str) -> Optional[Session]:
        """
        Sign in with email and password

        Returns:
            the session, None on unknown email or wrong password
        """
        email = email.strip().lower()
        users = await self._load_users()

        for user_id, user in users.items():
            if user.email.lower() != email or not user.password_hash:
                continue
            if verify_password(password, user.password_hash):
                logger.info(f"User signed in: {user_id}")
                return self._open_session(user_id, user.name, user.email)

        logger.info(f"Sign-in refused for {email}")
        return None

    def guest(self) -> Session:
        """Shared guest identity"""
        return self._open_session(GUEST_USER_ID, "Guest User", "guest@example.com", is_guest=True)

    def resolve(self, token: str) -> Optional[Session]:
        """Session of a valid, unexpired and not signed-out token"""
        claims = self._decode(token)
        if claims is None:
            return None
        return Session(
            user_id=claims["sub"],
            name=claims.get("name", ""),
            email=claims.get("email", ""),
            is_guest=bool(claims.get("guest")),
            token=token,
        )

    def _prune(self, now: Optional[float] = None) -> None:
        now = time.time() if now is None else now
        self._revoked = {jti: exp for jti, exp in self._revoked.items() if exp > now}

    def logout(self, token: str) -> bool:
        """
        Sign a token out until it expires

        Returns:
            False when the token was already invalid
        """
        claims = self._decode(token)
        if claims is None:
            return False
        self._prune()
        self._revoked[claims["jti"]] = int(claims["exp"])
        return True


auth_service = AuthService()
