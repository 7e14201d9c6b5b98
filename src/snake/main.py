# main.py
import argparse
import logging

import pygame # type: ignore

from .canvas import load_icon, open_window
from .config import Config, TARGET_FPS, ICON_PATH
from .game import new_game, run, Phase

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Snake on a 50x50 wraparound grid.")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for food placement (default: random)")
    parser.add_argument("--fps", type=int, default=TARGET_FPS,
                        help="target frame rate; the snake moves every 5th frame")
    parser.add_argument("--icon", type=str, default=ICON_PATH,
                        help="window icon image, relative to the working directory")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = Config(seed=args.seed, fps=args.fps, icon_path=args.icon)

    # Fatal before any window exists
    icon = load_icon(cfg.icon_path)
    canvas = open_window(cfg, icon)

    try:
        logger.info("Starting game (fps=%d, seed=%s)", cfg.fps, cfg.seed)
        phase = run(new_game(cfg), canvas)
        if phase is not Phase.TERMINATED:
            logger.info("Window closed")
    finally:
        pygame.quit()

if __name__ == "__main__":
    main()
