"""Shared query parameter dependencies."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import HTTPException, Query, Request, status

if TYPE_CHECKING:
    from macromate.containers import AppContainer


def resolve_timezone(request: Request, tz: str | None = Query(default=None)) -> str:
    """Return a valid IANA timezone name, defaulting to the configured one."""
    container: AppContainer = request.app.state.container
    name = tz or container.settings.default_timezone
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown timezone: {name}",
        ) from exc
    return name


def resolve_day(timezone_name: str, day: date | None) -> date:
    """Return the requested day or today in the given timezone."""
    if day is not None:
        return day
    return datetime.now(tz=ZoneInfo(timezone_name)).date()
