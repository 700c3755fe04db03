import json
import pytest

from anitrack.core.errors import CorruptMetadata, MetadataIOError, MetadataNotFound
from anitrack.core.metadata import VideoMetadata
from anitrack.utils.format_utils import format_duration


@pytest.mark.parametrize("record", [
    VideoMetadata(duration=0.0, current=0.0, watched=False),
    VideoMetadata(duration=1420.064, current=613.3333333333334, watched=False),
    VideoMetadata(duration=86399.99, current=86399.99, watched=True),
])
def test_persist_then_load_returns_same_record(tmp_path, record):
    path = tmp_path / "ep.md"
    record.persist(path)
    assert VideoMetadata.load(path) == record


def test_create_default(tmp_path):
    path = tmp_path / "ep.md"
    VideoMetadata.create_default(1500, path)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == {"duration": 1500.0, "current": 0.0, "watched": False}
    assert VideoMetadata.load(path) == VideoMetadata(duration=1500.0)


def test_persist_overwrites_and_leaves_no_temp_files(tmp_path):
    path = tmp_path / "ep.md"
    VideoMetadata.create_default(100.0, path)
    VideoMetadata(duration=100.0, current=100.0, watched=True).persist(path)

    assert VideoMetadata.load(path).watched is True
    assert [p.name for p in tmp_path.iterdir()] == ["ep.md"]


def test_load_missing_file(tmp_path):
    with pytest.raises(MetadataNotFound):
        VideoMetadata.load(tmp_path / "missing.md")


@pytest.mark.parametrize("content", [
    "not json at all",
    "[1, 2, 3]",
    '{"duration": 10.0, "current": 0.0}',
    '{"duration": "10", "current": 0.0, "watched": false}',
    '{"duration": 10.0, "current": true, "watched": false}',
    '{"duration": 10.0, "current": 0.0, "watched": "no"}',
    '{"duration": -1.0, "current": 0.0, "watched": false}',
])
def test_load_corrupt_file(tmp_path, content):
    path = tmp_path / "ep.md"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(CorruptMetadata):
        VideoMetadata.load(path)


def test_load_accepts_integers(tmp_path):
    path = tmp_path / "ep.md"
    path.write_text('{"duration": 60, "current": 12, "watched": false}', encoding="utf-8")
    record = VideoMetadata.load(path)
    assert record == VideoMetadata(duration=60.0, current=12.0, watched=False)
    assert isinstance(record.duration, float)


def test_current_beyond_duration_is_not_rejected(tmp_path):
    path = tmp_path / "ep.md"
    path.write_text('{"duration": 60.0, "current": 75.0, "watched": false}', encoding="utf-8")
    assert VideoMetadata.load(path).current == 75.0


def test_persist_into_missing_directory_fails(tmp_path):
    with pytest.raises(MetadataIOError):
        VideoMetadata(duration=10.0).persist(tmp_path / "nope" / "ep.md")


@pytest.mark.parametrize("seconds, expected", [
    (0, "0:00"),
    (59.9, "0:59"),
    (61, "1:01"),
    (3599.99, "59:59"),
    (3600, "1:00:00"),
    (3661, "1:01:01"),
    (36000.5, "10:00:00"),
])
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected
    assert VideoMetadata.to_time(seconds) == expected
