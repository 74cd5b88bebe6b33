"""
Database-backed session store (the Session Principal).

The cookie carries only a signed reference to `user_sessions.token`; user id,
role and expiry stay server-side, so a process restart keeps everyone logged in.
Expired rows are treated as absent on lookup and are not purged eagerly.
"""

import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import sessionmaker

from catalog.core import config
from catalog.models.session import SessionRecord
from catalog.models.user import Role


def _now() -> datetime:
    # Naive UTC, matching the DateTime columns.
    return datetime.now(timezone.utc).replace(tzinfo=None)


@dataclass(frozen=True)
class Principal:
    token: str
    user_id: int
    role: Role


class SessionStore:
    def __init__(self, session_factory: sessionmaker, ttl: timedelta | None = None) -> None:
        self._session_factory = session_factory
        self._ttl = ttl or timedelta(hours=config.SESSION_TTL_HOURS)

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def establish(self, user_id: int, role: Role) -> Principal:
        token = secrets.token_urlsafe(32)
        created_at = _now()
        with self._session_factory() as db:
            db.add(
                SessionRecord(
                    token=token,
                    user_id=user_id,
                    role=Role(role),
                    created_at=created_at,
                    expires_at=created_at + self._ttl,
                )
            )
            db.commit()
        return Principal(token=token, user_id=user_id, role=Role(role))

    def lookup(self, token: str | None) -> Principal | None:
        if not token:
            return None
        with self._session_factory() as db:
            record = db.get(SessionRecord, token)
            if record is None or record.expires_at <= _now():
                return None
            return Principal(token=record.token, user_id=record.user_id, role=record.role)

    def destroy(self, token: str | None) -> None:
        if not token:
            return
        with self._session_factory() as db:
            db.query(SessionRecord).filter(SessionRecord.token == token).delete(synchronize_session=False)
            db.commit()
