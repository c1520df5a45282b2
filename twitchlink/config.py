import os
import sys
import logging
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from twitchlink.errors import ConfigError

logger = logging.getLogger(__name__)

CLIENT_ID_VAR = "TWITCH_CLIENT_ID"
PLAYER_VAR = "TWITCHLINK_PLAYER"


def default_player() -> str:
    if sys.platform.startswith("win"):
        return "mpv"
    return "/usr/bin/mpv"


@dataclass
class Config:
    client_id: str
    player: str

    @classmethod
    def from_env(cls, player_override: Optional[str] = None) -> "Config":
        """
        Builds the runtime configuration from the environment.

        A `.env` file in the working directory is honoured, but variables
        already set in the process environment win.
        """
        load_dotenv(find_dotenv(usecwd=True))

        client_id = os.getenv(CLIENT_ID_VAR, "").strip()
        if not client_id:
            raise ConfigError(
                f"The environment variable '{CLIENT_ID_VAR}' must be set to your Twitch client ID"
            )

        player = player_override or os.getenv(PLAYER_VAR) or default_player()
        logger.debug(f"Using player: {player}")
        return cls(client_id=client_id, player=player)
