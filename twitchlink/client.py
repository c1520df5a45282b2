import logging
from typing import List, Optional, Tuple

import requests

from twitchlink.errors import (
    AccessTokenError,
    DeserializeError,
    PlaylistError,
    SignatureNotFound,
    TokenNotFound,
)
from twitchlink.playlist import parse_streams
from twitchlink.streams import Stream

logger = logging.getLogger(__name__)


class TwitchClient:
    """
    Minimal client for the two endpoints needed to resolve a live channel:
    the channel access token and the usher master playlist.
    """
    API_URL = "https://api.twitch.tv/api/channels/{channel}/access_token"
    USHER_URL = "https://usher.ttvnw.net/api/channel/hls/{channel}.m3u8"
    TIMEOUT = 10

    def __init__(self, client_id: str, session: Optional[requests.Session] = None):
        self.client_id = client_id
        self.session = session or requests.Session()
        self.session.headers.update({"Client-ID": client_id})

    def fetch_access_token(self, channel: str) -> Tuple[str, str]:
        url = self.API_URL.format(channel=channel)
        logger.debug(f"Requesting access token: {url}")
        try:
            response = self.session.get(url, timeout=self.TIMEOUT)
            response.raise_for_status()
        except requests.RequestException as e:
            raise AccessTokenError(e) from e

        try:
            data = response.json()
        except ValueError as e:
            raise DeserializeError(e) from e

        if not isinstance(data, dict):
            raise TokenNotFound()
        token, sig = data.get("token"), data.get("sig")
        if not isinstance(token, str):
            raise TokenNotFound()
        if not isinstance(sig, str):
            raise SignatureNotFound()
        return token, sig

    def fetch_playlist(self, channel: str) -> str:
        """Returns the master playlist text, or "" when the channel is offline."""
        token, sig = self.fetch_access_token(channel)
        params = {
            "token": token,
            "sig": sig,
            "player_backend": "html5",
            "player": "twitchweb",
            "type": "any",
            "allow_source": "true",
        }
        url = self.USHER_URL.format(channel=channel)
        logger.debug(f"Requesting playlist: {url}")
        try:
            response = self.session.get(url, params=params, timeout=self.TIMEOUT)
            if response.status_code == 404:
                logger.info(f"No playlist for {channel}, channel is offline")
                return ""
            response.raise_for_status()
        except requests.RequestException as e:
            raise PlaylistError(e) from e
        return response.text

    def get_streams(self, channel: str) -> List[Stream]:
        return parse_streams(self.fetch_playlist(channel))

    def close(self):
        self.session.close()


def get_streams(client_id: str, channel: str) -> List[Stream]:
    client = TwitchClient(client_id)
    try:
        return client.get_streams(channel)
    finally:
        client.close()
