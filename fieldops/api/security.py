"""
Bearer token handling.

Tokens are HS256 JWTs issued by the identity service; the caller is carried in
the ``userId`` claim.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from jose import JWTError, jwt

from fieldops.config.logging import get_logger
from fieldops.config.settings import settings
from fieldops.domain.exceptions.authorization_error import AuthenticationError

logger = get_logger(__name__)

USER_ID_CLAIM = "userId"


def create_access_token(
    user_id: UUID, expires_delta: Optional[timedelta] = None, **claims: Any
) -> str:
    """Create a JWT access token for ``user_id``."""
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode: Dict[str, Any] = {
        **claims,
        USER_ID_CLAIM: str(user_id),
        "exp": expire,
        "iat": datetime.now(timezone.utc),
    }
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_user_id(token: str) -> UUID:
    """Verify a token and return the user it was issued to."""
    try:
        payload = jwt.decode(
            token, settings.JWT_SECRET_KEY, algorithms=[settings.ALGORITHM]
        )
    except JWTError as e:
        logger.info("Rejected bearer token", error=str(e))
        raise AuthenticationError("Invalid or expired token")

    user_id = payload.get(USER_ID_CLAIM)
    if not user_id:
        raise AuthenticationError("Token carries no user")

    try:
        return UUID(str(user_id))
    except ValueError:
        raise AuthenticationError("Token carries a malformed user id")
