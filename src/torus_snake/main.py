# main.py
import argparse
import dataclasses
import logging

import pygame # type: ignore
from .config import CFG
from .game import GameSession
from .grid import Grid
from .path import Path
from .render import draw_game, window_size
from .scheduler import Scheduler

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Snake on a wrap-around grid")
    p.add_argument("--seed", type=int, default=CFG.seed, help="RNG seed for food placement")
    p.add_argument("--width", type=int, default=CFG.width, help="grid width in cells")
    p.add_argument("--height", type=int, default=CFG.height, help="grid height in cells")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = dataclasses.replace(CFG, seed=args.seed, width=args.width, height=args.height)
    # the default food cell may not fit a custom grid
    grid = Grid(cfg.width, cfg.height)
    start = Path.initial(grid)
    cfg = dataclasses.replace(
        cfg,
        initial_food=tuple(c for c in cfg.initial_food if grid.in_bounds(c) and c not in start),
    )

    pygame.init()
    try:
        font = pygame.font.SysFont(None, 28)
        session = GameSession(cfg, now_ms=pygame.time.get_ticks())
        screen = pygame.display.set_mode(window_size(session))
        pygame.display.set_caption("Snake")
        clock = pygame.time.Clock()
        logger.info("Starting %dx%d game, seed=%d", cfg.width, cfg.height, cfg.seed)

        with Scheduler(session) as scheduler:
            running = True
            while running:
                # 1) timers + input, in arrival order
                for event in pygame.event.get():
                    if not scheduler.dispatch(event):
                        running = False
                        break

                # 2) render
                draw_game(screen, font, session)
                pygame.display.flip()
                clock.tick(60)  # movement is paced by the tick timer
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
