from typing import AsyncIterator, Optional
import httpx
from fastapi import Depends, Request

from ..config import Settings, get_settings


async def get_http_client(settings: Settings = Depends(get_settings)) -> AsyncIterator[httpx.AsyncClient]:
    """One outbound client per request, closed once the response is sent."""
    async with httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT, max_redirects=10) as client:
        yield client


def first_query_value(request: Request, name: str) -> Optional[str]:
    """First value of a query parameter, None when it is absent."""
    values = request.query_params.getlist(name)
    return values[0] if values else None
