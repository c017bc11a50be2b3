"""Authentication application service.

Provides:
- Password hashing and verification (passlib + bcrypt)
- JWT access token creation and validation (python-jose)
- Administrator registration and login
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import structlog
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.domain.exceptions import (
    InvalidCredentialsError,
    PermissionDeniedError,
    UserExistsError,
)
from plumbing.infrastructure.config import Settings, settings
from plumbing.infrastructure.models import User
from plumbing.repositories.user import UserRepository

logger = structlog.get_logger()


# ============================================================================
# Tokens & Passwords
# ============================================================================


@dataclass
class TokenPayload:
    """Decoded access token claims."""

    username: str
    user_id: int
    issued_at: datetime
    expires_at: datetime


_pwd_context: CryptContext | None = None


def get_password_context() -> CryptContext:
    """Get the shared bcrypt password context."""
    global _pwd_context
    if _pwd_context is None:
        _pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=settings.password_bcrypt_rounds,
        )
    return _pwd_context


def reset_password_context(context: CryptContext | None = None) -> None:
    """Replace or reset the password context (for testing)."""
    global _pwd_context
    _pwd_context = context


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    return get_password_context().hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its bcrypt hash.

    Malformed hashes never verify.
    """
    try:
        return get_password_context().verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        logger.warning("Stored password hash is not valid")
        return False


def create_access_token(
    user_id: int,
    username: str,
    config: Settings | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed JWT access token.

    Args:
        user_id: User ID, stored in the ``uid`` claim.
        username: Username, stored in the ``sub`` claim.
        config: Settings holding the signing key, defaults to the global settings.
        expires_delta: Custom lifetime.

    Returns:
        Encoded JWT.
    """
    config = config or settings
    if expires_delta is None:
        expires_delta = timedelta(minutes=config.jwt_access_token_expire_minutes)

    now = datetime.now(timezone.utc)
    payload = {
        "sub": username,
        "uid": user_id,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_delta).timestamp()),
    }
    return jwt.encode(payload, config.jwt_secret_key, algorithm=config.jwt_algorithm)


def decode_access_token(token: str, config: Settings | None = None) -> TokenPayload:
    """Decode and validate a JWT access token.

    Args:
        token: Encoded JWT.
        config: Settings holding the signing key, defaults to the global settings.

    Returns:
        Decoded claims.

    Raises:
        PermissionDeniedError: If the signature, expiry or claims are invalid.
    """
    config = config or settings
    try:
        payload = jwt.decode(token, config.jwt_secret_key, algorithms=[config.jwt_algorithm])
    except JWTError as e:
        raise PermissionDeniedError(str(e)) from e

    username = payload.get("sub")
    user_id = payload.get("uid")
    if not username or user_id is None:
        raise PermissionDeniedError("Token is missing claims")

    return TokenPayload(
        username=username,
        user_id=int(user_id),
        issued_at=datetime.fromtimestamp(payload.get("iat", 0), tz=timezone.utc),
        expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
    )


# ============================================================================
# Auth Service
# ============================================================================


class AuthService:
    """Application service for administrator accounts.

    Example usage:
        service = AuthService(session, request_id="req-1")
        await service.register("admin", "secret")
        token = await service.login("admin", "secret")
    """

    def __init__(self, session: AsyncSession, request_id: str | None = None) -> None:
        """Initialize service.

        Args:
            session: Database session.
            request_id: Request ID for correlation.
        """
        self.user_repo = UserRepository(session)
        self.request_id = request_id

    async def register(self, username: str, password: str) -> User:
        """Register an administrator.

        Args:
            username: Unique username.
            password: Plain text password, stored as a bcrypt hash.

        Returns:
            Created user.

        Raises:
            UserExistsError: If the username is taken.
        """
        if await self.user_repo.get_by_username(username) is not None:
            raise UserExistsError(username)

        user = await self.user_repo.save(User(username=username, password=hash_password(password)))

        logger.info("User registered", user_id=user.id, username=username, request_id=self.request_id)
        return user

    async def login(self, username: str, password: str) -> str:
        """Authenticate a user and issue an access token.

        Args:
            username: Username.
            password: Plain text password.

        Returns:
            Encoded JWT.

        Raises:
            InvalidCredentialsError: If the user is unknown or the password is wrong.
        """
        user = await self.user_repo.get_by_username(username)
        if user is None or not verify_password(password, user.password):
            logger.warning("Login failed", username=username, request_id=self.request_id)
            raise InvalidCredentialsError()

        logger.info("User logged in", user_id=user.id, request_id=self.request_id)
        return create_access_token(user.id, user.username)


def get_auth_service(session: AsyncSession, request_id: str | None = None) -> AuthService:
    """Get auth service instance.

    Args:
        session: Database session.
        request_id: Request ID for correlation.

    Returns:
        AuthService instance.
    """
    return AuthService(session, request_id=request_id)
