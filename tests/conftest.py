import pytest
from pathlib import Path

from anitrack.config import Config
from anitrack.core.artifacts import ArtifactGenerator
from anitrack.core.backend import Backend


class FakeProber:
    def __init__(self, duration=1500.0):
        self.duration = duration
        self.calls = []

    def probe(self, video_path):
        self.calls.append(Path(video_path))
        return self.duration


class FakeExtractor:
    def __init__(self, succeed=True):
        self.succeed = succeed
        self.calls = []

    def extract(self, video_path, thumbnail_path):
        self.calls.append((Path(video_path), Path(thumbnail_path)))
        if self.succeed:
            Path(thumbnail_path).write_bytes(b"\xff\xd8fake-jpeg\xff\xd9")
        return self.succeed


class FakePlayer:
    """Records requested offsets and writes the resume sidecar like the mpv script."""

    def __init__(self, result=None, succeed=True):
        self.result = result
        self.succeed = succeed
        self.calls = []

    def play(self, video_path, start):
        self.calls.append((Path(video_path), start))
        if self.succeed and self.result is not None:
            Path(video_path).with_suffix(".md").write_text(self.result, encoding="utf-8")
        return self.succeed


@pytest.fixture
def config(tmp_path):
    return Config(config_dir=tmp_path / "config")


@pytest.fixture
def prober():
    return FakeProber()


@pytest.fixture
def extractor():
    return FakeExtractor()


@pytest.fixture
def player():
    return FakePlayer()


@pytest.fixture
def backend(config, prober, extractor, player):
    return Backend(config=config, generator=ArtifactGenerator(prober, extractor), player=player)


@pytest.fixture
def series_dir(tmp_path):
    series = tmp_path / "Test Anime"
    series.mkdir()
    return series


@pytest.fixture
def video(series_dir):
    path = series_dir / "Test - 01.mkv"
    path.write_text("dummy")
    return path
