"""Failure kinds raised by the metadata lifecycle."""


class AniTrackError(Exception):
    """Base class for every error raised by anitrack."""


class InvalidPath(AniTrackError):
    """A video path has no usable file name or parent directory."""


class InvalidVideo(AniTrackError):
    """The prober could not determine a duration for a video."""


class CorruptMetadata(AniTrackError):
    """A sidecar file exists but is not a well-formed watch-state record."""


class MetadataNotFound(AniTrackError):
    """A sidecar file does not exist."""


class MetadataIOError(AniTrackError):
    """A filesystem operation or external process launch failed."""
