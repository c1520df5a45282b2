"""
Master playlist parsing.

Twitch master playlists tag every variant with a VIDEO group such as
"chunked" (the source rendition), "720p60" or "audio_only".
"""
import logging
import re
from typing import Dict, List, Optional

import m3u8

from twitchlink.errors import InvalidPlaylist
from twitchlink.streams import Stream

logger = logging.getLogger(__name__)

SOURCE_GROUP = "chunked"
_QUALITY_RE = re.compile(r"^(\d+)")


def _format_resolution(resolution) -> str:
    if not resolution:
        return ""
    width, height = resolution
    return f"{width}x{height}"


def _stream_from_variant(variant) -> Optional[Stream]:
    info = variant.stream_info
    group = (info.video or "").strip('"')
    if not group:
        return None

    resolution = _format_resolution(info.resolution)
    bandwidth = str(info.bandwidth) if info.bandwidth is not None else ""

    if group == SOURCE_GROUP:
        return Stream(link=variant.uri, resolution=resolution, bandwidth=bandwidth,
                      quality=None, type="best")

    match = _QUALITY_RE.match(group)
    if not match:
        logger.warning(f"unknown quality: {group}")
        return None

    height = int(match.group(1))
    return Stream(link=variant.uri, resolution=resolution, bandwidth=bandwidth,
                  quality=height, type=f"{height}p")


def _bandwidth(stream: Stream) -> int:
    return int(stream.bandwidth) if stream.bandwidth.isdigit() else 0


def parse_streams(text: str) -> List[Stream]:
    """
    Turns a master playlist into streams ordered source first, then by
    descending resolution. An empty body means the channel is offline.
    """
    if not text or not text.strip():
        return []
    if not text.lstrip().startswith("#EXTM3U"):
        raise InvalidPlaylist()

    playlist = m3u8.loads(text)
    if not playlist.is_variant:
        raise InvalidPlaylist()

    # One entry per quality; rates like 720p60/720p30 collapse onto 720p.
    by_quality: Dict[Optional[int], Stream] = {}
    for variant in playlist.playlists:
        stream = _stream_from_variant(variant)
        if stream is None:
            continue
        current = by_quality.get(stream.quality)
        if current is None or _bandwidth(stream) > _bandwidth(current):
            by_quality[stream.quality] = stream

    streams = list(by_quality.values())
    streams.sort(key=lambda s: (s.quality is not None, -(s.quality or 0)))
    logger.debug(f"Parsed {len(streams)} streams: {[s.type for s in streams]}")
    return streams
