import logging
import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..config import Settings, get_settings
from ..services.errors import CaptionFetchError
from ..services.transcript_service import Transcript, get_transcript
from .dependencies import first_query_value, get_http_client

logger = logging.getLogger("caption_relay.routes.transcript_routes")

router = APIRouter()


@router.get("/new", response_model=Transcript)
async def new_transcript(
    request: Request,
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client)
):
    """
    Get the transcript of a video in the specified language,
    or optionally translated to tlang.

    Query: id (video ID), lang (caption language), tlang (translation language).
    """
    lang = first_query_value(request, "lang")
    video_id = first_query_value(request, "id")
    tlang = first_query_value(request, "tlang")
    lang = settings.DEFAULT_LANG if lang is None else lang
    video_id = settings.DEFAULT_VIDEO_ID if video_id is None else video_id
    tlang = "" if tlang is None else tlang

    try:
        return await get_transcript(lang, video_id, tlang, client, settings.TIMEDTEXT_URL)
    except CaptionFetchError as e:
        logger.warning(f"Transcript for video {video_id} failed: {e}")
        return JSONResponse(status_code=500, content={"error": str(e)})
