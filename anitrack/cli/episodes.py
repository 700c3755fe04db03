import argparse
from typing import Optional

from ..core.backend import Backend
from ..core.errors import AniTrackError
from ..core.series import Series


def list_episodes(series: Series):
    print(f"\n{series.summary()}")
    print("-" * 60)
    for episode in series.episodes:
        print(f"[{episode.number}]")
        print(episode.summary())
        print()

    if series.failures:
        print(f"Failed to load {len(series.failures)} files:")
        for path, error in series.failures.items():
            print(f"  - {path.name}: {error}")


def _lookup(series: Series, number: int):
    episode = series.get(number)
    if episode is None:
        print(f"Error: no episode {number} in '{series.name}'.")
    return episode


def play_episode(series: Series, number: Optional[int]) -> int:
    episode = series.next_episode() if number is None else _lookup(series, number)
    if episode is None:
        if number is None:
            print("Everything has been watched.")
            return 0
        return 1

    episode.run()
    print(episode.summary())
    return 0


def toggle_episode(series: Series, number: int) -> int:
    episode = _lookup(series, number)
    if episode is None:
        return 1
    episode.toggle_watched()
    print(episode.summary())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="anitrack", description="Track watch progress of a video folder.")
    parser.add_argument("directory", help="Folder containing the episodes")
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("list", help="Show every episode (default)")
    play = sub.add_parser("play", help="Play an episode in mpv and record progress")
    play.add_argument("number", type=int, nargs="?", help="Episode number (default: next unwatched)")
    toggle = sub.add_parser("toggle", help="Flip the watched state of an episode")
    toggle.add_argument("number", type=int)
    return parser


def run(args: argparse.Namespace, backend: Backend) -> int:
    series = Series.load(args.directory, backend)

    try:
        if args.command == "play":
            return play_episode(series, args.number)
        if args.command == "toggle":
            return toggle_episode(series, args.number)
    except AniTrackError as e:
        print(f"Error: {e}")
        return 1

    list_episodes(series)
    return 0
