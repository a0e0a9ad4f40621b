"""Common API dependencies."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from hotel_api.core.clock import Clock, system_clock
from hotel_api.core.config import get_settings
from hotel_api.core.security import decode_access_token
from hotel_api.db.session import get_sessionmaker
from hotel_api.services.record_store import RecordStore, SqlRecordStore

settings = get_settings()

# Tokens are issued by the identity service; a missing token is reported by
# the report endpoint itself as a validation failure.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=settings.auth_token_url, auto_error=False)


async def get_caller_id(
    token: Annotated[str | None, Depends(oauth2_scheme)],
) -> str | None:
    """Return the bearer token subject, or ``None`` when no token was sent."""
    if token is None:
        return None
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = decode_access_token(token)
    except JWTError as exc:
        raise credentials_exception from exc

    subject = payload.get("sub")
    if not subject:
        raise credentials_exception
    return str(subject)


def get_clock() -> Clock:
    return system_clock


def get_report_sessionmaker() -> async_sessionmaker[AsyncSession]:
    return get_sessionmaker()


def get_record_store(
    sessionmaker: Annotated[
        async_sessionmaker[AsyncSession], Depends(get_report_sessionmaker)
    ],
) -> RecordStore:
    """Provide the SQL-backed record store for the configured database."""
    return SqlRecordStore(sessionmaker)
