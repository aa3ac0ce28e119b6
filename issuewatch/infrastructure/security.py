"""Bearer token helpers."""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from issuewatch.config import get_settings

ALGORITHM = "HS256"
DEFAULT_EXPIRATION = timedelta(hours=1)


def create_access_token(user_id: int, expires_delta: timedelta | None = None) -> str:
    """Sign a token whose subject is ``user_id``."""

    settings = get_settings()
    expire = datetime.now(tz=timezone.utc) + (expires_delta or DEFAULT_EXPIRATION)
    return jwt.encode(
        {"sub": str(user_id), "exp": expire}, settings.secret_key, algorithm=ALGORITHM
    )


def decode_access_token(token: str) -> dict:
    settings = get_settings()
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


__all__ = ["create_access_token", "decode_access_token"]
