import os
from dataclasses import dataclass, field
from pathlib import Path
from dotenv import load_dotenv

# Base Paths
BASE_DIR = Path(__file__).parent
SCRIPTS_DIR = BASE_DIR / "scripts"
DEFAULT_CONFIG_DIR = Path.home() / ".config" / "anitrack"

# Supported Formats (mpv plays almost everything, these are for scanning)
VIDEO_EXTENSIONS = {
    ".mkv", ".mp4", ".avi", ".webm", ".flv", ".m4v", ".ts", ".mov", ".wmv", ".mpg", ".mpeg"
}


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass
class Config:
    """Paths and tool settings, built once at startup and handed to each component."""
    config_dir: Path = DEFAULT_CONFIG_DIR

    # Sidecar layout: <video dir>/.metadata/episode_<n>/<stem>.md
    metadata_dir_name: str = ".metadata"
    episode_dir_prefix: str = "episode_"
    metadata_extension: str = ".md"
    thumbnail_name: str = "thumbnail.jpg"

    # External tools
    ffprobe_path: str = "ffprobe"
    ffmpeg_path: str = "ffmpeg"
    mpv_path: str = "mpv"

    # Playback Settings
    complete_threshold: float = 0.9  # 90% watched marks as completed
    resume_threshold: float = 1.0  # positions at or below this are not shown as resumed

    log_level: str = "INFO"
    video_extensions: set = field(default_factory=lambda: set(VIDEO_EXTENSIONS))

    @property
    def logs_dir(self) -> Path:
        return self.config_dir / "logs"

    @property
    def scripts_dir(self) -> Path:
        return self.config_dir / "scripts"

    @classmethod
    def from_env(cls, env_file=None) -> "Config":
        # Load environment variables from .env file
        load_dotenv(env_file)

        threshold = _float_env("ANITRACK_COMPLETE_THRESHOLD", 0.9)
        if not 0.0 < threshold <= 1.0:
            raise ValueError(f"ANITRACK_COMPLETE_THRESHOLD must be in (0, 1], got {threshold}")

        return cls(
            config_dir=Path(os.getenv("ANITRACK_CONFIG_DIR", str(DEFAULT_CONFIG_DIR))).expanduser(),
            metadata_dir_name=os.getenv("ANITRACK_METADATA_DIR", ".metadata"),
            ffprobe_path=os.getenv("ANITRACK_FFPROBE", "ffprobe"),
            ffmpeg_path=os.getenv("ANITRACK_FFMPEG", "ffmpeg"),
            mpv_path=os.getenv("ANITRACK_MPV", "mpv"),
            complete_threshold=threshold,
            resume_threshold=_float_env("ANITRACK_RESUME_THRESHOLD", 1.0),
            log_level=os.getenv("ANITRACK_LOG_LEVEL", "INFO").upper(),
        )
