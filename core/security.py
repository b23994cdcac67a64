from datetime import datetime, timedelta, timezone
from typing import Any, Union

from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import SecretStr

from core.config import settings
from core.errors import InvalidToken, MissingToken


pwd_ctx = CryptContext(schemes=["argon2"], deprecated="auto")

def _to_plain(p: Union[str, SecretStr]) -> str:
    return p.get_secret_value() if isinstance(p, SecretStr) else p

def hash_password(password: Union[str, SecretStr]) -> str:
    return pwd_ctx.hash(_to_plain(password))

def verify_password(plain: Union[str, SecretStr], hashed: str) -> bool:
    return pwd_ctx.verify(_to_plain(plain), hashed)


def _create_token(subject: str, expires_delta: timedelta) -> str:
    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = {
        "sub": subject,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_delta).timestamp()),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALG)


def create_access_token(sub: str) -> str:
    return _create_token(sub, timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS))


def decode_token(token: str | None) -> dict:
    """Verify signature and expiry, returning the claims.

    Raises MissingToken for an absent credential and InvalidToken for a bad
    signature, an expired token or a token without a subject.
    """
    if not token:
        raise MissingToken()
    try:
        claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALG])
    except JWTError as exc:
        raise InvalidToken() from exc
    if not claims.get("sub"):
        raise InvalidToken()
    return claims
