import json
import math
import subprocess
from pathlib import Path
from typing import Optional

from ..core.collaborators import find_executable
from .logger import get_logger

logger = get_logger(__name__)


class FFprobeProber:
    def __init__(self, executable: str = "ffprobe"):
        self.executable = executable

    def probe(self, video_path: Path) -> Optional[float]:
        """Use ffprobe to read the container duration of a media file."""
        logger.debug(f"Probing file: {video_path}")
        cmd = [
            find_executable(self.executable), "-v", "quiet", "-print_format", "json",
            "-show_format", str(video_path)
        ]

        try:
            # Force UTF-8 encoding for Windows/WSL compatibility
            result = subprocess.run(cmd, capture_output=True, text=True, encoding='utf-8')
        except OSError as e:
            logger.error(f"Could not launch ffprobe for {video_path}: {e}")
            return None

        if result.returncode != 0:
            logger.error(f"Error probing {video_path}: {result.stderr}")
            return None

        try:
            data = json.loads(result.stdout)
            duration = float(data.get("format", {}).get("duration", 0))
        except (ValueError, TypeError, AttributeError) as e:
            logger.error(f"Unreadable ffprobe output for {video_path}: {e}")
            return None

        if not math.isfinite(duration) or duration <= 0:
            logger.debug(f"No duration reported for {video_path}")
            return None

        logger.debug(f"Duration of {video_path}: {duration}")
        return duration


class FFmpegThumbnailer:
    def __init__(self, executable: str = "ffmpeg"):
        self.executable = executable

    def extract(self, video_path: Path, thumbnail_path: Path) -> bool:
        """Grab a representative frame with ffmpeg's thumbnail filter."""
        cmd = [
            find_executable(self.executable),
            "-hide_banner", "-nostdin", "-nostats",
            "-loglevel", "quiet",
            "-i", str(video_path),
            "-vf", "thumbnail",
            "-frames:v", "1",
            "-f", "mjpeg",
            "-y", str(thumbnail_path),
        ]
        logger.debug(f"Running FFmpeg: {' '.join(cmd)}")

        try:
            result = subprocess.run(cmd, capture_output=True)
        except OSError as e:
            logger.error(f"Could not launch ffmpeg for {video_path}: {e}")
            return False

        if result.returncode != 0:
            logger.error(f"ffmpeg exited with {result.returncode} for {video_path}")
            return False
        return Path(thumbnail_path).exists()
