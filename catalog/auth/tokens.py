from datetime import datetime, timedelta, timezone

import jwt

from catalog.core import config


def sign_session_token(session_id: str, expires_hours: int | None = None) -> str:
    ttl_hours = expires_hours or config.SESSION_TTL_HOURS
    now = datetime.now(timezone.utc)
    payload = {"sid": session_id, "iat": now, "exp": now + timedelta(hours=ttl_hours)}
    return jwt.encode(payload, config.SESSION_SECRET_KEY, algorithm=config.SESSION_ALGORITHM)


def read_session_token(cookie_value: str | None) -> str | None:
    if not cookie_value:
        return None
    try:
        payload = jwt.decode(
            cookie_value,
            config.SESSION_SECRET_KEY,
            algorithms=[config.SESSION_ALGORITHM],
        )
    except jwt.InvalidTokenError:
        return None

    session_id = payload.get("sid")
    return session_id if isinstance(session_id, str) and session_id else None
