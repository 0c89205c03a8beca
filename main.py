import argparse
import logging
import sys

import pygame

from tetris_config import CONFIG, apply_overrides
from tetris_engine import Engine
from tetris_input import command_for, action_for
from tetris_layout import compute_dims
from tetris_render import RenderAssets

log = logging.getLogger("tetris")


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Falling-block puzzle (pygame)")
    p.add_argument("--seed", type=int, default=None, help="piece sequence seed")
    p.add_argument("--cell-size", type=int, default=None, help="pixels per board cell")
    p.add_argument("--fps", type=int, default=None, help="frame cap")
    p.add_argument("--log-level", default=None,
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def configure(argv=None):
    args = parse_args(argv)
    try:
        apply_overrides({
            "SEED": args.seed,
            "CELL_SIZE": args.cell_size,
            "FPS": args.fps,
            "LOG_LEVEL": args.log_level,
        })
    except ValueError as e:
        sys.exit(f"error: {e}")
    logging.basicConfig(
        level=CONFIG["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main(argv=None):
    configure(argv)
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()

    engine = Engine()
    engine.add_listener(lambda ev, e: log.debug("%s: %s %s", ev, e.state.value, e.stats))
    scheduled = False   # host-side equivalent of a pending frame callback

    while True:
        clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            action = action_for(e)
            if action == "quit":
                pygame.quit(); return
            if action == "start":
                scheduled = engine.start_game() or scheduled
            elif action == "pause":
                if engine.controls().pause_enabled and engine.pause_game():
                    scheduled = True
            elif action == "reset":
                if engine.controls().reset_enabled:
                    engine.reset_game()
            cmd = command_for(e)
            if cmd is not None:
                engine.handle_command(cmd)

        if scheduled:
            scheduled = engine.tick(pygame.time.get_ticks())

        render.draw(screen, engine.snapshot(), engine.final_score)
        pygame.display.flip()


if __name__ == '__main__':
    main()
