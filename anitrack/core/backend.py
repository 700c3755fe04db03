from dataclasses import dataclass

from ..config import Config
from .artifacts import ArtifactGenerator
from .collaborators import Player
from .player_bridge import MpvPlayer
from ..utils.media_analyzer import FFmpegThumbnailer, FFprobeProber


@dataclass
class Backend:
    """Everything an Episode needs from the outside world."""
    config: Config
    generator: ArtifactGenerator
    player: Player

    @classmethod
    def default(cls, config: Config) -> "Backend":
        """ffprobe, ffmpeg and mpv as configured."""
        return cls(
            config=config,
            generator=ArtifactGenerator(
                FFprobeProber(config.ffprobe_path),
                FFmpegThumbnailer(config.ffmpeg_path),
            ),
            player=MpvPlayer(config),
        )
