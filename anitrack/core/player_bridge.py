import shutil
import subprocess
from pathlib import Path

from ..config import Config, SCRIPTS_DIR
from .collaborators import find_executable
from .errors import MetadataIOError
from ..utils.logger import get_logger

logger = get_logger(__name__)

SAVE_INFO_SCRIPT = "save_info.lua"


def install_player_scripts(config: Config) -> Path:
    """Copy the resume-position script into the config directory unless an identical copy is there."""
    source = SCRIPTS_DIR / SAVE_INFO_SCRIPT
    target = config.scripts_dir / SAVE_INFO_SCRIPT

    try:
        if target.is_file() and target.read_bytes() == source.read_bytes():
            return target
        config.scripts_dir.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, target)
    except OSError as e:
        raise MetadataIOError(f"Could not install {SAVE_INFO_SCRIPT} into {config.scripts_dir}: {e}") from e

    logger.info(f"Installed player script: {target}")
    return target


class MpvPlayer:
    """Runs mpv in the foreground with the save_info script loaded."""

    def __init__(self, config: Config):
        self.config = config

    def build_command(self, video_path: Path, start: float, script: Path) -> list:
        return [
            find_executable(self.config.mpv_path),
            f"--start={start}",
            f"--script={script}",
            f"--script-opts=save_info-threshold={self.config.complete_threshold}",
            "--force-window=yes",
            f"--title=anitrack - {Path(video_path).name}",
            "--",
            str(video_path),
        ]

    def play(self, video_path: Path, start: float) -> bool:
        script = install_player_scripts(self.config)
        cmd = self.build_command(video_path, start, script)
        logger.debug(f"Using mpv command: {cmd}")

        try:
            result = subprocess.run(cmd)
        except OSError as e:
            logger.error(f"Could not launch mpv: {e}")
            return False

        if result.returncode != 0:
            logger.error(f"mpv exited with {result.returncode} for {video_path}")
            return False
        return True
