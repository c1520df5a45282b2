import argparse
import json
import logging
import sys
from enum import Enum
from urllib.parse import urlparse
from importlib.metadata import PackageNotFoundError, version
from typing import List, Optional

from twitchlink import client, player
from twitchlink.config import Config
from twitchlink.errors import TwitchlinkError
from twitchlink.streams import Item, Quality, Stream, select

logger = logging.getLogger("twitchlink")


class Output(Enum):
    PRINT_ALL = "print_all"
    PRINT_ALL_JSON = "print_all_json"
    PRINT_ONE = "print_one"
    PRINT_ONE_JSON = "print_one_json"
    PRINT_STREAMS_JSON = "print_streams_json"
    OPEN_PLAYER = "open_player"

    @classmethod
    def from_args(cls, as_json: bool, as_list: bool, singular: bool) -> "Output":
        if as_list:
            if as_json:
                return cls.PRINT_ONE_JSON if singular else cls.PRINT_ALL_JSON
            return cls.PRINT_ONE if singular else cls.PRINT_ALL
        if as_json:
            return cls.PRINT_STREAMS_JSON
        return cls.OPEN_PLAYER


def channel_name(value: str) -> str:
    """
    Accepts a bare channel name or a channel URL. Returns "" when no
    channel can be found, e.g. for a host-only URL.
    """
    value = value.strip()
    if "//" in value:
        value = urlparse(value).path
    segments = [p for p in value.split("?")[0].split("/") if p]
    if not segments:
        return ""
    # "twitch.tv/lcs" carries the host as its first segment
    if "/" in value and "." in segments[0]:
        segments = segments[1:]
    return segments[-1].lower() if segments else ""


def _version() -> str:
    try:
        return version("twitchlink")
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="twitchlink",
        description="Resolve a Twitch live stream and play it or print its qualities",
    )
    parser.add_argument("stream", help="the stream to fetch")
    parser.add_argument("-j", "--json", action="store_true", help="dumps the stream information as json")
    parser.add_argument("-p", "--player", help="a player to use. defaults to mpv")
    parser.add_argument("-q", "--quality", type=Quality.parse, help="desired quality of the stream")
    parser.add_argument("-l", "--list", action="store_true", help="list stream quality information")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    return parser


def render(mode: Output, streams: List[Stream], stream: Stream, singular: bool) -> str:
    if mode == Output.PRINT_ALL:
        return "\n".join(str(Item.from_stream(s)) for s in streams)
    if mode == Output.PRINT_ALL_JSON:
        return json.dumps([Item.from_stream(s).to_dict() for s in streams])
    if mode == Output.PRINT_ONE:
        return str(Item.from_stream(stream))
    if mode == Output.PRINT_ONE_JSON:
        return json.dumps(Item.from_stream(stream).to_dict())
    if mode == Output.PRINT_STREAMS_JSON:
        if singular:
            return json.dumps(stream.to_dict())
        return json.dumps([s.to_dict() for s in streams])
    raise ValueError(f"{mode} does not produce output")


def run(args: argparse.Namespace) -> int:
    config = Config.from_env(player_override=args.player)
    channel = channel_name(args.stream)
    singular = args.quality is not None
    quality = args.quality or Quality.best()

    streams = client.get_streams(config.client_id, channel)
    stream = select(streams, quality, channel)

    mode = Output.from_args(args.json, args.list, singular)
    logger.debug(f"Output mode: {mode.value}, quality: {quality}")
    if mode == Output.OPEN_PLAYER:
        player.launch(config.player, stream.link, channel)
    else:
        print(render(mode, streams, stream, singular))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not channel_name(args.stream):
        parser.error(f"no channel name in `{args.stream}`")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s | %(levelname)s | %(message)s',
    )
    try:
        return run(args)
    except TwitchlinkError as e:
        print(f"fatal error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
