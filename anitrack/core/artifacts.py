import math
from pathlib import Path

from .collaborators import Prober, ThumbnailExtractor
from .errors import InvalidVideo, MetadataIOError
from .metadata import VideoMetadata
from ..utils.logger import get_logger

logger = get_logger(__name__)


def _usable_duration(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 0


class ArtifactGenerator:
    """Creates the metadata sidecar and thumbnail for a video, each only when missing."""

    def __init__(self, prober: Prober, extractor: ThumbnailExtractor):
        self._prober = prober
        self._extractor = extractor

    def ensure_metadata(self, video_path: Path, metadata_path: Path, sidecar_dir: Path) -> bool:
        """Probe the video and write a default record if ``metadata_path`` is absent.

        If no finite, non-negative duration comes back, ``sidecar_dir`` is
        removed when empty and InvalidVideo is raised. Files already in the
        directory are never touched. Returns True when a record was generated.
        """
        if metadata_path.exists():
            return False

        logger.info(f"Probing Metadata: {video_path.name}")
        duration = self._prober.probe(video_path)
        if not _usable_duration(duration):
            logger.error(f"No usable duration for {video_path.name}: {duration!r}")
            self._rollback(sidecar_dir)
            raise InvalidVideo(f"{video_path.name!r} is an invalid video")

        VideoMetadata.create_default(duration, metadata_path)
        return True

    def ensure_thumbnail(self, video_path: Path, thumbnail_path: Path) -> bool:
        """Extract a thumbnail if ``thumbnail_path`` is absent. Returns True when one was made."""
        if thumbnail_path.exists():
            return False

        logger.info(f"Generating thumbnail: {video_path.name}")
        if not self._extractor.extract(video_path, thumbnail_path):
            # A partial image would pass the existence check on the next run
            try:
                thumbnail_path.unlink()
            except FileNotFoundError:
                pass
            except OSError as e:
                raise MetadataIOError(f"Could not remove partial thumbnail {thumbnail_path}: {e}") from e
            raise MetadataIOError(f"Thumbnail extraction failed for {video_path.name!r}")
        return True

    def _rollback(self, sidecar_dir: Path):
        if not sidecar_dir.is_dir():
            return
        if any(sidecar_dir.iterdir()):
            logger.warning(f"Keeping non-empty sidecar directory: {sidecar_dir}")
            return

        logger.info(f"Removing empty sidecar directory after failed probe: {sidecar_dir}")
        try:
            sidecar_dir.rmdir()
        except OSError as e:
            raise MetadataIOError(f"Could not remove {sidecar_dir}: {e}") from e
