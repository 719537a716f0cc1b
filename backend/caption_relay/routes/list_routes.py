import logging
import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..config import Settings, get_settings
from ..services.errors import CaptionFetchError
from ..services.transcript_service import TranscriptList, get_transcript_list
from .dependencies import first_query_value, get_http_client

logger = logging.getLogger("caption_relay.routes.list_routes")

router = APIRouter()


@router.get("/list", response_model=TranscriptList)
async def show_list(
    request: Request,
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client)
):
    """
    List the language codes of the available transcripts.

    Query: id (video ID).
    """
    video_id = first_query_value(request, "id")
    video_id = settings.DEFAULT_VIDEO_ID if video_id is None else video_id
    try:
        return await get_transcript_list(video_id, client, settings.TIMEDTEXT_URL)
    except CaptionFetchError as e:
        logger.warning(f"Track list for video {video_id} failed: {e}")
        return JSONResponse(status_code=500, content={"error": str(e)})
