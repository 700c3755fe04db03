"""Narrow interfaces to the external tools the lifecycle depends on."""
import os
import shutil
from pathlib import Path
from typing import Optional, Protocol


class Prober(Protocol):
    def probe(self, video_path: Path) -> Optional[float]:
        """Return the duration of ``video_path`` in seconds, or None if unknown."""
        ...


class ThumbnailExtractor(Protocol):
    def extract(self, video_path: Path, thumbnail_path: Path) -> bool:
        """Write one still frame of ``video_path`` to ``thumbnail_path``."""
        ...


class Player(Protocol):
    def play(self, video_path: Path, start: float) -> bool:
        """Play ``video_path`` from ``start`` seconds and block until the player exits.

        The player is expected to leave ``<video stem>.md`` next to the video
        recording where playback stopped.
        """
        ...


_WINDOWS_FALLBACKS = {
    "mpv": [r"C:\Program Files\mpv\mpv.exe", r"C:\mpv\mpv.exe"],
    "ffmpeg": [r"C:\Program Files\ffmpeg\bin\ffmpeg.exe", r"C:\ffmpeg\bin\ffmpeg.exe"],
    "ffprobe": [r"C:\Program Files\ffmpeg\bin\ffprobe.exe", r"C:\ffmpeg\bin\ffprobe.exe"],
}


def find_executable(name: str) -> str:
    """Find executable in PATH or common Windows locations."""
    # 1. Check PATH
    path = shutil.which(name)
    if path:
        return path

    # 2. Check current directory
    local_path = os.path.join(os.getcwd(), f"{name}.exe")
    if os.path.exists(local_path):
        return local_path

    # 3. Check common Windows paths
    for fb in _WINDOWS_FALLBACKS.get(Path(name).stem, []):
        if os.path.exists(fb):
            return fb

    return name  # Return original name and hope for the best
