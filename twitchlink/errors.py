class TwitchlinkError(Exception):
    """Base class for every failure reported to the user."""


class ConfigError(TwitchlinkError):
    pass


class AccessTokenError(TwitchlinkError):
    def __init__(self, reason):
        super().__init__(f"cannot get access token because: {reason}")


class DeserializeError(TwitchlinkError):
    def __init__(self, reason):
        super().__init__(f"cannot deserialize response because: {reason}")


class PlaylistError(TwitchlinkError):
    def __init__(self, reason):
        super().__init__(f"cannot get playlist because: {reason}")


class InvalidPlaylist(TwitchlinkError):
    def __init__(self):
        super().__init__("invalid playlist")


class TokenNotFound(TwitchlinkError):
    def __init__(self):
        super().__init__("cannot find token")


class SignatureNotFound(TwitchlinkError):
    def __init__(self):
        super().__init__("cannot find signature")


class StreamOffline(TwitchlinkError):
    def __init__(self, channel):
        self.channel = channel
        super().__init__(f"stream `{channel}` is offline")


class QualityUnavailable(TwitchlinkError):
    def __init__(self, quality, channel, available):
        self.quality = quality
        self.channel = channel
        self.available = list(available)
        super().__init__(
            f"quality `{quality}` is not available for stream `{channel}`. "
            f"available: {', '.join(self.available)}"
        )


class PlayerNotFound(TwitchlinkError):
    def __init__(self, player):
        self.player = player
        super().__init__(
            f"invalid path: {player}. set `TWITCHLINK_PLAYER` or provide a path to a valid executable"
        )


class PlayerLaunchError(TwitchlinkError):
    def __init__(self, channel, player, reason):
        super().__init__(
            f"cannot start stream `{channel}`. make sure `{player}` is a valid player\nerror: {reason}"
        )
