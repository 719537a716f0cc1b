import logging
import math
import re
import xml.etree.ElementTree as ET
from typing import List
import httpx
from pydantic import BaseModel

from .errors import DecodeError, MissingFieldError, NumericParseError
from .timedtext_client import build_transcript_url, build_list_url, fetch_raw

logger = logging.getLogger("caption_relay.services.transcript_service")

DECIMAL_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


class CaptionLine(BaseModel):
    text: str
    start: str
    dur: str
    end: str


class Transcript(BaseModel):
    lines: List[CaptionLine]


class LanguageEntry(BaseModel):
    langCode: str


class TranscriptList(BaseModel):
    track: List[LanguageEntry]


def _parse_xml(data: bytes) -> ET.Element:
    try:
        return ET.fromstring(data)
    except ET.ParseError as e:
        raise DecodeError(f"Unable to decode caption XML: {e}") from e


def _chardata(element: ET.Element) -> str:
    # Character data directly inside the element, skipping nested markup.
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return "".join(parts)


def _parse_seconds(value: str, field: str) -> float:
    if not DECIMAL_RE.fullmatch(value):
        raise NumericParseError(f"Unable to parse {field}: {value!r} is not a number")
    seconds = float(value)
    if not math.isfinite(seconds):
        raise NumericParseError(f"Unable to parse {field}: {value!r} is out of range")
    return seconds


def format_end(start: str, dur: str) -> str:
    """End time of a caption line, start + dur with two decimals."""
    return f"{_parse_seconds(start, 'start') + _parse_seconds(dur, 'dur'):.2f}"


def parse_transcript(data: bytes) -> Transcript:
    """
    Decode a timedtext transcript document.
    Every <text> child of the root becomes one line, in document order.
    Fails as a whole if any line has a missing or non-numeric timing attribute.
    """
    root = _parse_xml(data)
    lines = []
    for index, node in enumerate(root.findall("text")):
        start = node.get("start")
        if start is None:
            raise MissingFieldError("start", index)
        dur = node.get("dur")
        if dur is None:
            raise MissingFieldError("dur", index)
        lines.append(CaptionLine(
            text=_chardata(node),
            start=start,
            dur=dur,
            end=format_end(start, dur)
        ))
    return Transcript(lines=lines)


def parse_transcript_list(data: bytes) -> TranscriptList:
    """Decode a timedtext track listing, keeping the provider's order."""
    root = _parse_xml(data)
    return TranscriptList(track=[
        LanguageEntry(langCode=node.get("lang_code", ""))
        for node in root.findall("track")
    ])


async def get_transcript(
    lang: str,
    video_id: str,
    tlang: str,
    client: httpx.AsyncClient,
    base_url: str
) -> Transcript:
    """
    Fetches the transcript of a video in the given language, machine translated
    to tlang when tlang is not empty.
    """
    url = build_transcript_url(base_url, lang, video_id, tlang)
    data = await fetch_raw(url, client)
    transcript = parse_transcript(data)
    logger.info(f"Parsed {len(transcript.lines)} caption lines for video {video_id} ({lang}{'->' + tlang if tlang else ''})")
    return transcript


async def get_transcript_list(
    video_id: str,
    client: httpx.AsyncClient,
    base_url: str
) -> TranscriptList:
    """
    Fetches the language codes of the caption tracks available for a video.
    """
    data = await fetch_raw(build_list_url(base_url, video_id), client)
    transcript_list = parse_transcript_list(data)
    logger.info(f"Found {len(transcript_list.track)} caption tracks for video {video_id}")
    return transcript_list
