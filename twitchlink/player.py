import os
import shutil
import subprocess
import logging

from twitchlink.errors import PlayerLaunchError, PlayerNotFound

logger = logging.getLogger(__name__)


def resolve_player(player: str) -> str:
    """Returns an executable path for `player`, searching PATH for bare names."""
    if os.path.isfile(player):
        return player
    found = shutil.which(player)
    if not found:
        raise PlayerNotFound(player)
    return found


def launch(player: str, link: str, channel: str) -> subprocess.Popen:
    executable = resolve_player(player)
    cmd = [executable, link]
    logger.info(f"Starting player for {channel}: {executable}")
    try:
        # Fire and forget; the player owns the stream from here.
        return subprocess.Popen(cmd)
    except OSError as e:
        raise PlayerLaunchError(channel, player, e) from e
