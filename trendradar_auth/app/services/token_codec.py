"""
Signed, self-contained access tokens (JWT, HS256).
"""

import logging
import secrets
from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import JWTError, jwt
from pydantic import BaseModel, ValidationError

from trendradar_auth.domain.base import utcnow
from trendradar_auth.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class TokenClaims(BaseModel):
    """Identity claims carried by a verified token"""

    user_id: int
    email: str
    role: str
    issued_at: datetime
    expires_at: datetime


class IssuedToken(BaseModel):
    token: str
    expires_at: datetime


class TokenCodec:
    """
    Issues and verifies access tokens.

    Business Rules:
    - Signing secret is mandatory; no fallback value
    - Every token carries a random jti so two tokens are never equal
    - verify() collapses every failure (signature, structure, expiry) to None
    """

    def __init__(self, secret: Optional[str], ttl: timedelta = timedelta(days=7), algorithm: str = "HS256"):
        if not secret:
            raise ConfigurationError("Token signing secret is required")
        self._secret = secret
        self.ttl = ttl
        self.algorithm = algorithm

    def issue(self, user_id: int, email: str, role: str) -> IssuedToken:
        """
        Sign a token for the given identity.

        Returns:
            IssuedToken with the compact token and its naive-UTC expiry
        """
        issued_at = utcnow().replace(microsecond=0)
        expires_at = issued_at + self.ttl
        payload = {
            "user_id": user_id,
            "email": email,
            "role": role,
            "iat": issued_at.replace(tzinfo=UTC),
            "exp": expires_at.replace(tzinfo=UTC),
            "jti": secrets.token_urlsafe(16),
        }
        token = jwt.encode(payload, self._secret, algorithm=self.algorithm)
        return IssuedToken(token=token, expires_at=expires_at)

    def verify(self, token: str) -> Optional[TokenClaims]:
        """
        Verify signature and expiry and decode the claims.

        Returns:
            TokenClaims, or None if the token is invalid for any reason
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self.algorithm])
            return TokenClaims(
                user_id=payload["user_id"],
                email=payload["email"],
                role=payload["role"],
                issued_at=datetime.fromtimestamp(payload["iat"], UTC).replace(tzinfo=None),
                expires_at=datetime.fromtimestamp(payload["exp"], UTC).replace(tzinfo=None),
            )
        except (JWTError, KeyError, TypeError, ValueError, ValidationError, AttributeError):
            logger.debug("Token verification failed")
            return None
