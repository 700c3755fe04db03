import json

from anitrack.cli.episodes import build_parser, run


def test_list_prints_summaries(backend, video, series_dir, capsys):
    assert run(build_parser().parse_args([str(series_dir)]), backend) == 0
    out = capsys.readouterr().out
    assert "Episodes: 1" in out
    assert "Name: Test - 01.mkv" in out


def test_toggle_and_unknown_episode(backend, video, series_dir, capsys):
    assert run(build_parser().parse_args([str(series_dir), "toggle", "1"]), backend) == 0
    assert "Watched: Yes" in capsys.readouterr().out

    assert run(build_parser().parse_args([str(series_dir), "toggle", "7"]), backend) == 1
    assert "no episode 7" in capsys.readouterr().out


def test_play_next_unwatched(backend, player, video, series_dir, capsys):
    player.result = json.dumps({"duration": 1500.0, "current": 300.0, "watched": False})

    assert run(build_parser().parse_args([str(series_dir), "play"]), backend) == 0
    assert player.calls == [(video, 0.0)]
    assert "Current: 5:00" in capsys.readouterr().out


def test_play_failure_reports_error(backend, player, video, series_dir, capsys):
    player.succeed = False
    assert run(build_parser().parse_args([str(series_dir), "play", "1"]), backend) == 1
    assert "Error:" in capsys.readouterr().out
