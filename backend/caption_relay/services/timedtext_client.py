import logging
from urllib.parse import urlencode
import httpx

from .errors import TransportError, HTTPStatusError

logger = logging.getLogger("caption_relay.services.timedtext_client")


def build_transcript_url(base_url: str, lang: str, video_id: str, tlang: str = "") -> str:
    """Timedtext URL for one caption track, optionally machine translated."""
    params = [("lang", lang), ("v", video_id)]
    if tlang:
        params.append(("tlang", tlang))
    return f"{base_url}?{urlencode(params)}"


def build_list_url(base_url: str, video_id: str) -> str:
    """Timedtext URL listing the caption tracks of a video."""
    return f"{base_url}?{urlencode([('v', video_id), ('type', 'list')])}"


async def fetch_raw(url: str, client: httpx.AsyncClient) -> bytes:
    """
    GET the url and return the response body with every newline replaced by a space.
    Raises TransportError when the provider is unreachable and HTTPStatusError
    for any status other than 200.
    """
    logger.debug(f"Fetching {url}")
    try:
        response = await client.get(url, follow_redirects=True)
    except httpx.HTTPError as e:
        logger.warning(f"Request to {url} failed: {e}")
        raise TransportError(f"Request to caption provider failed: {e}") from e

    if response.status_code != 200:
        logger.warning(f"Caption provider answered {response.status_code} for {url}")
        raise HTTPStatusError(response.status_code, response.reason_phrase)

    return response.content.replace(b"\n", b" ")
