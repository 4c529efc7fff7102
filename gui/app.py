from __future__ import annotations

"""Pygame App for Pong.

Run with: `python -m gui.app`.

Controls:
  - W/S: move Player 1
  - Up/Down: move Player 2 (unless --cpu)
  - P: pause
  - R: restart
  - Q/Esc: quit
"""

import argparse
import logging
import sys

try:
    import pygame
except ImportError:  # pragma: no cover - runtime dependency hint
    print("Pygame is required for GUI. Install via: pip install pygame", file=sys.stderr)
    raise

from pong.cpu import CpuController
from pong.engine import GameConfig, Game
from pong.entities import PlayerId

from . import constants as C
from .court import Court
from .gamelib import GameLib
from .hud import HUD


logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command line flags for the GUI app."""
    p = argparse.ArgumentParser(description="Pong (Pygame)")
    p.add_argument("--width", type=int, default=C.DEFAULT_WINDOW[0])
    p.add_argument("--height", type=int, default=C.DEFAULT_WINDOW[1])
    p.add_argument("--fps", type=int, default=C.TARGET_FPS)
    p.add_argument("--ball-speed", dest="ball_speed", type=float, default=GameConfig.ball_speed, help="Pixels per millisecond")
    p.add_argument("--target", type=int, default=GameConfig.target_score, help="Points to win, 0 for endless")
    p.add_argument("--cpu", action="store_true", help="Let the computer play Player 2")
    p.add_argument("--no-reset", dest="no_reset", action="store_true", help="Keep the ball in play after a point")
    p.add_argument("--seed", type=int, default=None, help="Seed for the CPU aim error")
    return p.parse_args(argv)


def read_paddle_input(keys, up_key: int, down_key: int) -> float:
    """Return -1, 0 or +1 from two held keys."""
    return (1.0 if keys[down_key] else 0.0) - (1.0 if keys[up_key] else 0.0)


def run(argv=None) -> int:
    """Run the pygame Pong window until the player quits."""
    args = parse_args(argv)
    if args.width < 320 or args.height < 240 or args.fps <= 0 or args.ball_speed <= 0 or args.target < 0:
        print("Invalid input. Please try again.", file=sys.stderr)
        return 2

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    cfg = GameConfig(
        width=args.width,
        height=args.height,
        ball_speed=args.ball_speed,
        target_score=args.target,
        reset_on_point=not args.no_reset,
    )
    game = Game(cfg)

    pygame.init()
    pygame.display.set_caption(C.WINDOW_TITLE)
    screen = pygame.display.set_mode((cfg.width, cfg.height))
    clock = pygame.time.Clock()

    lib = GameLib(screen)
    court = Court(game)
    hud = HUD(cfg.height)
    if args.cpu:
        hud.update(hint="W/S: Player 1 | P: pause | R: restart | Esc: quit")

    def make_cpu():
        if not args.cpu:
            return None
        return CpuController(game.players[PlayerId.PLAYER_2], game.ball, seed=args.seed)

    cpu = make_cpu()
    paused = False
    running = True
    logger.info("Starting Pong %dx%d at %d fps", cfg.width, cfg.height, args.fps)

    while running:
        # Milliseconds since the previous frame, matching the ball speed unit
        delta = min(clock.tick(args.fps), C.MAX_FRAME_MS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    running = False
                elif event.key == pygame.K_p and not game.match_over:
                    paused = not paused
                    hud.update(paused=paused)
                elif event.key == pygame.K_r:
                    # restart() builds a new ball, so the CPU must track the new one
                    game.restart()
                    cpu = make_cpu()
                    paused = False
                    hud.update(paused=False, winner_name=None)

        if not paused:
            keys = pygame.key.get_pressed()
            move_p1 = read_paddle_input(keys, pygame.K_w, pygame.K_s)
            if cpu is not None:
                move_p2 = cpu.compute_move()
            else:
                move_p2 = read_paddle_input(keys, pygame.K_UP, pygame.K_DOWN)
            for kind, data in game.step(delta, move_p1, move_p2):
                if kind == "match":
                    hud.update(winner_name=data["winner"].value)

        lib.clear()
        court.draw(lib)
        game.draw(lib)
        hud.draw(lib)
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(run())
