import logging
import sys

from anitrack.cli.episodes import build_parser, run
from anitrack.config import Config
from anitrack.core.backend import Backend
from anitrack.core.player_bridge import install_player_scripts
from anitrack.utils.logger import setup_logging

logger = logging.getLogger("anitrack")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    config = Config.from_env()
    setup_logging(level=getattr(logging, config.log_level, logging.INFO),
                  log_file=config.logs_dir / "anitrack.log")
    logger.info("Starting up anitrack...")

    install_player_scripts(config)
    return run(args, Backend.default(config))


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass
