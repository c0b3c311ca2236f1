"""
Treasure Maze
Navigate the maze, collect the treasure, avoid the goblins
"""

import argparse
import os
import random

os.environ.setdefault('SDL_VIDEO_ALLOW_SCREENSAVER', '1')

import pygame

import config
from config import GAME_TITLE, GAME_VERSION
from game.clock import FrameTimer
from game.game_loop import GameLoop
from game.input_source import KeyboardInput
from game.renderer import PygameRenderer
from game.session import GameSession
from utils.constants import SCREEN_WIDTH, SCREEN_HEIGHT


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=f"{GAME_TITLE} v{GAME_VERSION}")
    parser.add_argument("--seed", type=int, default=config.SEED,
                        help="random seed for enemy and treasure placement")
    parser.add_argument("--max-dt", type=float, default=config.MAX_FRAME_DT,
                        help="cap on a single frame step in seconds (default: no cap)")
    parser.add_argument("--fps", type=int, default=config.TARGET_FPS,
                        help="frame rate cap")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(f"{GAME_TITLE} v{GAME_VERSION}")

        rng = random.Random(args.seed) if args.seed is not None else random.Random()
        session = GameSession(rng=rng)
        print(f"{GAME_TITLE} v{GAME_VERSION}: seed={args.seed}, "
              f"{len(session.enemies)} goblins, {len(session.treasures)} treasures")

        clock = pygame.time.Clock()
        loop = GameLoop(
            session,
            KeyboardInput(),
            PygameRenderer(screen, seed=args.seed or 0),
            FrameTimer(max_dt=args.max_dt),
            display_flip=pygame.display.flip,
            pace=lambda: clock.tick(args.fps),
        )
        frames = loop.run()

        stats = session.stats()
        print(f"Game closed after {frames} frames. Score: {stats['score']}, "
              f"treasure {stats['treasures_collected']}/"
              f"{stats['treasures_collected'] + stats['treasures_remaining']}")
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
