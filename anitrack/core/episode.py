import os
from pathlib import Path
from typing import Optional

from .backend import Backend
from .errors import InvalidPath, MetadataIOError, MetadataNotFound
from .metadata import VideoMetadata
from ..utils.format_utils import format_duration
from ..utils.logger import get_logger

logger = get_logger(__name__)


class Episode:
    """One tracked video and the watch state kept in its sidecar directory.

    Construction creates ``<video dir>/.metadata/episode_<number>/``, generates
    the metadata record and thumbnail when they are missing, then loads the
    record. Raises InvalidPath, InvalidVideo, CorruptMetadata or
    MetadataIOError; nothing is retried automatically.
    """

    def __init__(self, path, number: int, backend: Backend):
        if isinstance(number, bool) or not isinstance(number, int) or number < 0:
            raise ValueError(f"Episode number must be a non-negative integer, got {number!r}")

        self.path = self._validate_path(path)
        self.name = self.path.name
        self.number = number
        self._backend = backend

        config = backend.config
        self.sidecar_dir = self.path.parent / config.metadata_dir_name / f"{config.episode_dir_prefix}{number}"
        self.md_path = self.sidecar_dir / f"{self.path.stem}{config.metadata_extension}"
        self.thumbnail_path = self.sidecar_dir / config.thumbnail_name

        try:
            self.sidecar_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise MetadataIOError(f"Could not create {self.sidecar_dir}: {e}") from e

        # Metadata and thumbnail are gated independently
        backend.generator.ensure_metadata(self.path, self.md_path, self.sidecar_dir)
        backend.generator.ensure_thumbnail(self.path, self.thumbnail_path)

        self.metadata = VideoMetadata.load(self.md_path)

    @staticmethod
    def _validate_path(path) -> Path:
        if path is None or str(path).strip() == "":
            raise InvalidPath("Empty video path")

        path = Path(path).expanduser().absolute()
        if path.name in ("", ".", ".."):
            raise InvalidPath(f"{path} has no file name")
        if path.parent == path:
            raise InvalidPath(f"{path} has no parent directory")
        if path.is_dir():
            raise InvalidPath(f"{path} is a directory, not a video")
        return path

    @property
    def player_output_path(self) -> Path:
        """Where the player leaves its resume record: next to the video, same stem."""
        return self.path.with_suffix(self._backend.config.metadata_extension)

    def refresh_from_player_output(self):
        """Move the player's resume record into the sidecar directory and reload it.

        The player's file is parsed before it replaces the stored record, so a
        malformed write raises CorruptMetadata and leaves both files as they were.
        """
        try:
            metadata = VideoMetadata.load(self.player_output_path)
        except MetadataNotFound as e:
            logger.error(f"No player output for {self.name}: {e}")
            raise MetadataIOError(str(e)) from e

        try:
            os.replace(self.player_output_path, self.md_path)
        except OSError as e:
            logger.error(f"Failed to collect player output for {self.name}: {e}")
            raise MetadataIOError(f"Could not move {self.player_output_path} to {self.md_path}: {e}") from e

        self.metadata = metadata

    def toggle_watched(self):
        logger.info(f"Mark {self.name} as {'unwatched' if self.metadata.watched else 'watched'}")

        watched = not self.metadata.watched
        toggled = VideoMetadata(
            duration=self.metadata.duration,
            current=self.metadata.duration if watched else 0.0,
            watched=watched,
        )
        toggled.persist(self.md_path)
        self.metadata = toggled

    @property
    def resume_offset(self) -> float:
        # A finished episode restarts from the beginning
        return 0.0 if self.metadata.watched else self.metadata.current

    def run(self):
        """Play the episode from its resume point, blocking until the player exits.

        Raises MetadataIOError if the player fails to launch or the metadata can
        not be updated afterwards.
        """
        logger.info(f"Running {self.name}")

        if not self._backend.player.play(self.path, self.resume_offset):
            raise MetadataIOError(f"Player failed for {self.name}")
        self.refresh_from_player_output()

    def summary(self) -> str:
        md = self.metadata
        current = ""
        if not md.watched and md.current > self._backend.config.resume_threshold:
            current = f"\nCurrent: {format_duration(md.current)}"

        return (
            f"Name: {self.name}\n\n"
            f"Duration: {format_duration(md.duration)}{current}\n"
            f"Watched: {'Yes' if md.watched else 'No'}"
        )

    def description(self) -> str:
        return self.summary()

    def thumbnail(self) -> Optional[Path]:
        return self.thumbnail_path

    def __repr__(self):
        return f"Episode(number={self.number}, name={self.name!r}, watched={self.metadata.watched})"
