import sys
import argparse
import logging

from raycast.config import LOG_LEVEL, LOG_FORMAT


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="First-person raycaster over a tile map, with a minimap."
    )
    parser.add_argument(
        "--world",
        default=None,
        help="JSON world file to load (default: the bundled world)",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)
    # Imported late so --help works without initializing pygame
    from raycast.game import Game

    try:
        game = Game(world_path=args.world)
    except RuntimeError as e:
        logging.getLogger(__name__).error("%s", e)
        return 1
    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
