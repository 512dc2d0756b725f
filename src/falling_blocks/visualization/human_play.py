from __future__ import annotations

import argparse
import logging
from fractions import Fraction
from typing import Optional, Sequence

import pygame

from falling_blocks.game import FallingBlocksGame, GameConfig, TickInput
from .renderer import Renderer


ROTATE_CW_KEYS = (pygame.K_x, pygame.K_UP)
ROTATE_CCW_KEYS = (pygame.K_z,)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play the falling-block game")
    p.add_argument("--seed", type=int, default=None, help="Seed for the piece randomizer")
    p.add_argument("--cell-size", type=int, default=30)
    p.add_argument("--width", type=int, default=500)
    p.add_argument("--height", type=int, default=700)
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def collect_input(events: Sequence[pygame.event.Event], soft_drop: bool) -> TickInput:
    """Turn one frame of key events into engine input."""
    inputs = TickInput(soft_drop=soft_drop)
    for event in events:
        if event.type != pygame.KEYDOWN:
            continue
        inputs.any_key = True
        if event.key == pygame.K_LEFT:
            inputs.left = True
        elif event.key == pygame.K_RIGHT:
            inputs.right = True
        elif event.key in ROTATE_CW_KEYS:
            inputs.rotate_cw = True
        elif event.key in ROTATE_CCW_KEYS:
            inputs.rotate_ccw = True
    return inputs


def run(config: Optional[GameConfig] = None, cell_size: int = 30,
        size: tuple[int, int] = (500, 700), fps: int = 60) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = FallingBlocksGame(config)
        renderer = Renderer(cell_size=cell_size)
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption("Tetris")

        running = True
        while running:
            events = pygame.event.get()
            for event in events:
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            if not running:
                break

            elapsed = Fraction(clock.tick(fps), 1000)
            soft_drop = bool(pygame.key.get_pressed()[pygame.K_DOWN])
            game.tick(elapsed, collect_input(events, soft_drop))

            renderer.draw(screen, game)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    run(GameConfig(random_seed=args.seed), cell_size=args.cell_size,
        size=(args.width, args.height), fps=args.fps)


if __name__ == "__main__":  # pragma: no cover
    main()
