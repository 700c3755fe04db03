import json
import math
import os
import tempfile
from dataclasses import dataclass, asdict
from pathlib import Path

from .errors import CorruptMetadata, MetadataIOError, MetadataNotFound
from ..utils.format_utils import format_duration
from ..utils.logger import get_logger

logger = get_logger(__name__)

FIELDS = ("duration", "current", "watched")


@dataclass
class VideoMetadata:
    """Watch state of a single video as stored in its sidecar file."""
    duration: float
    current: float = 0.0
    watched: bool = False

    @classmethod
    def load(cls, path: Path) -> "VideoMetadata":
        """Parse the sidecar at ``path``.

        Raises MetadataNotFound when the file is absent, CorruptMetadata when it
        cannot be parsed, and MetadataIOError for any other read failure.
        """
        try:
            raw = Path(path).read_text(encoding="utf-8")
        except FileNotFoundError:
            raise MetadataNotFound(f"No metadata file at {path}") from None
        except OSError as e:
            raise MetadataIOError(f"Could not read metadata file {path}: {e}") from e

        try:
            data = json.loads(raw)
        except ValueError as e:
            raise CorruptMetadata(f"{path} is not valid JSON: {e}") from e

        return cls.from_dict(data, source=path)

    @classmethod
    def from_dict(cls, data, source=None) -> "VideoMetadata":
        where = source if source is not None else "metadata"
        if not isinstance(data, dict):
            raise CorruptMetadata(f"{where}: expected an object, got {type(data).__name__}")

        missing = [key for key in FIELDS if key not in data]
        if missing:
            raise CorruptMetadata(f"{where}: missing fields {', '.join(missing)}")

        numbers = {}
        for key in ("duration", "current"):
            value = data[key]
            # bool is an int subclass, reject it explicitly
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise CorruptMetadata(f"{where}: '{key}' must be a number")
            value = float(value)
            if not math.isfinite(value) or value < 0:
                raise CorruptMetadata(f"{where}: '{key}' must be a non-negative number")
            numbers[key] = value

        if not isinstance(data["watched"], bool):
            raise CorruptMetadata(f"{where}: 'watched' must be true or false")

        return cls(duration=numbers["duration"], current=numbers["current"], watched=data["watched"])

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def create_default(cls, duration: float, path: Path) -> "VideoMetadata":
        """Write a fresh, unwatched record for a video of ``duration`` seconds."""
        metadata = cls(duration=float(duration))
        metadata.persist(path)
        return metadata

    def persist(self, path: Path):
        """Overwrite the sidecar at ``path`` with this record."""
        path = Path(path)
        payload = json.dumps(self.to_dict(), indent=2) + "\n"

        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.remove(tmp_name)
            logger.error(f"Failed to write metadata {path}: {e}")
            raise MetadataIOError(f"Could not write metadata file {path}: {e}") from e

    @staticmethod
    def to_time(seconds: float) -> str:
        return format_duration(seconds)
