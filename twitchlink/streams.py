import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from twitchlink.errors import QualityUnavailable, StreamOffline

logger = logging.getLogger(__name__)


@dataclass
class Stream:
    """One playable variant of a live broadcast."""
    link: str
    resolution: str = ""
    bandwidth: str = ""
    quality: Optional[int] = None
    type: str = "best"

    def to_dict(self) -> Dict[str, str]:
        return {
            "resolution": self.resolution,
            "bandwidth": self.bandwidth,
            "link": self.link,
            "type": self.type,
        }


@dataclass
class Item:
    """Listing view of a Stream."""
    quality: str
    resolution: str
    bitrate: str

    @classmethod
    def from_stream(cls, stream: Stream) -> "Item":
        return cls(quality=stream.type, resolution=stream.resolution, bitrate=stream.bandwidth)

    def to_dict(self) -> Dict[str, str]:
        return {"quality": self.quality, "resolution": self.resolution, "bitrate": self.bitrate}

    def __str__(self):
        try:
            kbps = float(self.bitrate) / 1024.0
        except ValueError:
            kbps = 0.0
        return f"[{self.quality}] {self.resolution:>10} @ {kbps:>8.2f} kbps"


class QualityKind(Enum):
    BEST = "best"
    WORST = "worst"
    CUSTOM = "custom"


@dataclass
class Quality:
    kind: QualityKind
    label: str = field(default="")

    ALIASES = {
        "best": QualityKind.BEST,
        "highest": QualityKind.BEST,
        "worst": QualityKind.WORST,
        "lowest": QualityKind.WORST,
        "source": QualityKind.BEST,
    }

    @classmethod
    def parse(cls, text: str) -> "Quality":
        label = text.strip().lower()
        kind = cls.ALIASES.get(label)
        if kind is not None:
            return cls(kind, label)
        # "720", "720p" and "720p60" all name the 720p variant
        match = re.match(r"\d+", label)
        if match:
            label = f"{match.group(0)}p"
        return cls(QualityKind.CUSTOM, label)

    @classmethod
    def best(cls) -> "Quality":
        return cls(QualityKind.BEST, "best")

    def __str__(self):
        return self.label


def select(streams: List[Stream], quality: Quality, channel: str) -> Stream:
    """
    Picks the stream matching the requested quality.

    Streams are expected in playlist order: source first, then by
    descending resolution.
    """
    if not streams:
        raise StreamOffline(channel)

    if quality.kind == QualityKind.BEST:
        return streams[0]
    if quality.kind == QualityKind.WORST:
        return streams[-1]

    for stream in streams:
        if stream.type == quality.label:
            logger.debug(f"Selected {stream.type} for {channel}")
            return stream

    raise QualityUnavailable(quality.label, channel, [s.type for s in streams])
