from pathlib import Path
from typing import Dict, List, Optional

from .backend import Backend
from .episode import Episode
from .errors import AniTrackError
from ..utils.file_scanner import FileScanner
from ..utils.format_utils import format_duration
from ..utils.logger import get_logger

logger = get_logger(__name__)


class Series:
    """The videos of one directory, numbered from 1 in natural name order."""

    def __init__(self, name: str, path: Path, episodes: List[Episode], failures: Dict[Path, AniTrackError]):
        self.name = name
        self.path = path
        self.episodes = episodes
        self.failures = failures

    @classmethod
    def load(cls, directory, backend: Backend) -> "Series":
        """Build an Episode for every video in ``directory``.

        A video that fails to initialize is logged and kept in ``failures``;
        the remaining videos are still loaded.
        """
        path = Path(directory).expanduser().absolute()
        logger.info(f"Scanning series: {path.name}")

        episodes = []
        failures = {}
        video_files = FileScanner.get_video_files(path, backend.config.video_extensions)
        for number, video in enumerate(video_files, start=1):
            try:
                episodes.append(Episode(video, number, backend))
            except AniTrackError as e:
                logger.error(f"Skipping {video.name}: {e}")
                failures[video] = e

        logger.info(f"  Loaded {len(episodes)} of {len(video_files)} media files in {path.name}")
        return cls(path.name, path, episodes, failures)

    def get(self, number: int) -> Optional[Episode]:
        return next((e for e in self.episodes if e.number == number), None)

    def next_episode(self) -> Optional[Episode]:
        return next((e for e in self.episodes if not e.metadata.watched), None)

    def thumbnail(self) -> Optional[Path]:
        return self.episodes[0].thumbnail() if self.episodes else None

    def summary(self) -> str:
        watched = sum(1 for e in self.episodes if e.metadata.watched)
        total = sum(e.metadata.duration for e in self.episodes)
        return (
            f"Name: {self.name}\n\n"
            f"Episodes: {len(self.episodes)}\n"
            f"Watched: {watched}/{len(self.episodes)}\n"
            f"Duration: {format_duration(total)}"
        )

    def description(self) -> str:
        return self.summary()
