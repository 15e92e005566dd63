"""Password hashing and JWT creation/verification for authentication."""

import hashlib
import hmac
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

import jwt

from app.core.config import Settings, get_settings
from app.models.user import Role, User

# Min/max lengths for username and password validation.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128


def hash_password(plain_password: str) -> str:
    """
    Hash a plain-text password for storage: hex(HMAC-SHA256) keyed with the password itself.

    The password is the MAC key and no message is fed in. The login scenario describes
    the hash as HMAC(key="secret", message="secret"), but stored hashes were produced
    with an empty message, so the empty message stays; changing it would lock every
    existing account out.
    """
    return hmac.new(plain_password.encode("utf-8"), digestmod=hashlib.sha256).hexdigest()


def password_matches(plain_password: str, stored_hash: str | None) -> bool:
    """Compare the candidate's hash to the stored one in constant time."""
    if not stored_hash:
        return False
    candidate = hash_password(plain_password).encode("ascii")
    return hmac.compare_digest(candidate, stored_hash.encode("utf-8"))


class TokenIssuer:
    """Signs and verifies access tokens with a key fixed at construction."""

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: int = 60) -> None:
        if not secret:
            raise ValueError("Token signing secret must be non-empty")
        self._secret = secret
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenIssuer":
        return cls(
            secret=settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
            expire_minutes=settings.JWT_EXPIRE_MINUTES,
        )

    def claims_for(self, user: User) -> dict[str, Any]:
        """Identity claims carried by the token: username, subject (user id) and role."""
        return {
            "username": user.username,
            "sub": str(user.id),
            "role": Role(user.role).value,
        }

    def issue(self, user: User) -> dict[str, str]:
        """Create a signed access token for the user; iat always, exp when expiry is configured."""
        now = datetime.now(UTC)
        payload = self.claims_for(user)
        payload["iat"] = now
        if self.expire_minutes > 0:
            payload["exp"] = now + timedelta(minutes=self.expire_minutes)
        token = jwt.encode(payload, self._secret, algorithm=self.algorithm)
        return {"access_token": token, "token_type": "bearer"}

    def decode(self, token: str) -> dict[str, Any]:
        """
        Decode and validate a token; return its payload.
        Raises jwt.PyJWTError on bad signature, expiry or a missing subject.
        """
        return jwt.decode(
            token,
            self._secret,
            algorithms=[self.algorithm],
            options={"require": ["sub"]},
        )


@lru_cache
def get_token_issuer() -> TokenIssuer:
    """Process-wide issuer built once from settings (safe to call from dependencies)."""
    return TokenIssuer.from_settings(get_settings())
