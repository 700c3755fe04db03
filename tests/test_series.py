from anitrack.core.errors import InvalidVideo
from anitrack.core.series import Series


class SelectiveProber:
    def probe(self, video_path):
        return None if "broken" in video_path.name else 600.0


def make_videos(directory, *names):
    for name in names:
        (directory / name).write_text("dummy")


def test_load_numbers_in_natural_order(backend, series_dir):
    make_videos(series_dir, "Ep 10.mkv", "Ep 2.mp4", "Ep 1.mkv", "notes.txt", ".hidden.mkv")

    series = Series.load(series_dir, backend)

    assert [(e.number, e.name) for e in series.episodes] == [
        (1, "Ep 1.mkv"), (2, "Ep 2.mp4"), (3, "Ep 10.mkv"),
    ]
    assert series.failures == {}
    assert series.name == "Test Anime"


def test_one_failure_does_not_stop_others(backend, series_dir):
    backend.generator._prober = SelectiveProber()
    make_videos(series_dir, "01.mkv", "02 broken.mkv", "03.mkv")

    series = Series.load(series_dir, backend)

    assert [e.name for e in series.episodes] == ["01.mkv", "03.mkv"]
    assert list(series.failures) == [series_dir / "02 broken.mkv"]
    assert isinstance(series.failures[series_dir / "02 broken.mkv"], InvalidVideo)
    assert not (series_dir / ".metadata" / "episode_2").exists()


def test_next_episode_and_summary(backend, series_dir):
    make_videos(series_dir, "01.mkv", "02.mkv")
    series = Series.load(series_dir, backend)

    assert series.next_episode() is series.get(1)
    series.get(1).toggle_watched()
    assert series.next_episode() is series.get(2)
    series.get(2).toggle_watched()
    assert series.next_episode() is None

    assert series.summary() == "Name: Test Anime\n\nEpisodes: 2\nWatched: 2/2\nDuration: 50:00"
    assert series.thumbnail() == series.get(1).thumbnail_path
    assert series.get(99) is None


def test_empty_or_missing_directory(backend, tmp_path):
    series = Series.load(tmp_path / "missing", backend)
    assert series.episodes == []
    assert series.thumbnail() is None
    assert series.next_episode() is None
