import re
from pathlib import Path
from typing import Iterable, List

from ..config import VIDEO_EXTENSIONS

_DIGITS = re.compile(r'(\d+)')


class FileScanner:
    @staticmethod
    def natural_key(name: str):
        """Sort key that orders "Ep 2" before "Ep 10"."""
        return [int(part) if part.isdigit() else part.lower() for part in _DIGITS.split(name)]

    @staticmethod
    def get_video_files(directory, extensions: Iterable[str] = VIDEO_EXTENSIONS) -> List[Path]:
        """Video files directly inside ``directory``, in natural order.

        Hidden entries (including the .metadata tree) are skipped.
        """
        path = Path(directory)
        if not path.is_dir():
            return []

        wanted = {ext.lower() for ext in extensions}
        video_files = [
            f for f in path.iterdir()
            if f.is_file() and not f.name.startswith(".") and f.suffix.lower() in wanted
        ]
        return sorted(video_files, key=lambda f: FileScanner.natural_key(f.name))
