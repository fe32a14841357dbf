"""Authentication service for password login and JWT bearer tokens."""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from passlib.context import CryptContext

from fittracker.config import Settings
from fittracker.errors import AuthInvalid, AuthRejected, Conflict
from fittracker.repositories import Record, Repository
from fittracker.schemas.auth import LoginRequest, RegisterRequest, TokenPayload

logger = logging.getLogger(__name__)


class AuthService:
    """Service for handling authentication."""

    def __init__(self, settings: Settings):
        """Initialize auth service."""
        self.secret_key = settings.jwt_secret_key
        self.algorithm = settings.jwt_algorithm
        # Salted password hashing
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=settings.bcrypt_rounds,
        )
        self.access_token_expire: Optional[timedelta] = None
        if settings.jwt_access_token_expire_minutes is not None:
            self.access_token_expire = timedelta(minutes=settings.jwt_access_token_expire_minutes)

    def hash_password(self, password: str) -> str:
        """Hash a password with a fresh salt."""
        return self.pwd_context.hash(password)

    def verify_password(self, password: str, password_hash: Optional[str]) -> bool:
        """Check a password against a stored hash."""
        if not password_hash:
            return False
        try:
            return self.pwd_context.verify(password, password_hash)
        except ValueError:
            logger.warning("Stored password hash is not recognised")
            return False

    def create_access_token(
        self,
        user_id: int,
        email: str,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """
        Create a JWT access token.

        Args:
            user_id: User's id
            email: User's email
            expires_delta: Optional custom lifetime; without one (and without a
                configured default) the token never expires

        Returns:
            Encoded JWT token
        """
        now = datetime.now(timezone.utc)
        payload = {
            "id": user_id,
            "email": email,
            "iat": now,
        }

        lifetime = expires_delta or self.access_token_expire
        if lifetime is not None:
            payload["exp"] = now + lifetime

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> TokenPayload:
        """
        Verify and decode a JWT token.

        Args:
            token: The JWT token to verify

        Returns:
            Decoded token payload

        Raises:
            AuthInvalid: If the token is malformed, badly signed, expired or
                lacks the identity claims.
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
            )
        except jwt.ExpiredSignatureError:
            logger.warning("Token expired")
            raise AuthInvalid()
        except jwt.InvalidTokenError as e:
            logger.warning(f"Invalid token: {e}")
            raise AuthInvalid()

        if "id" not in payload or "email" not in payload:
            logger.warning("Token is missing identity claims")
            raise AuthInvalid()

        return TokenPayload(
            id=payload["id"],
            email=payload["email"],
            iat=datetime.fromtimestamp(payload["iat"], tz=timezone.utc) if "iat" in payload else None,
            exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc) if "exp" in payload else None,
        )

    async def register(self, users: Repository, request: RegisterRequest) -> Record:
        """
        Create a user account.

        Args:
            users: User repository
            request: Registration fields

        Returns:
            The stored user record

        Raises:
            Conflict: If the email is already registered.
        """
        if await users.first(email=request.email):
            raise Conflict()

        data = request.model_dump(exclude={"password"})
        data["password_hash"] = self.hash_password(request.password)
        data["created_at"] = datetime.now(timezone.utc).isoformat()

        user = await users.create(data)
        logger.info(f"Registered user {user['id']}")
        return user

    async def authenticate(self, users: Repository, request: LoginRequest) -> Record:
        """
        Look up a user by email and check the password.

        Raises:
            AuthRejected: If no user has that email or the password is wrong.
        """
        user = await users.first(email=request.email)

        if not user or not self.verify_password(request.password, user.get("password_hash")):
            logger.info("Rejected login attempt")
            raise AuthRejected()

        return user
