from __future__ import annotations

import argparse
import logging

from .cpu import CpuConfig, CpuController
from .engine import GameConfig, Game
from .entities import PlayerId


def is_valid_config(args: argparse.Namespace) -> bool:
    """Return True if the numeric flags describe a playable match."""
    return (
        args.frames > 0
        and args.delta > 0
        and args.ball_speed > 0
        and args.target >= 0
        and args.error >= 0
    )


def main(argv=None) -> int:
    """Run a headless match between two CPU paddles.

    This prints the start of play, every point and the result as text.
    """
    parser = argparse.ArgumentParser(description="Pong match simulator (CLI)")
    parser.add_argument("--frames", type=int, default=200_000, help="Maximum number of frames to simulate")
    parser.add_argument("--delta", type=int, default=16, help="Milliseconds per frame (default 16)")
    parser.add_argument("--ball-speed", dest="ball_speed", type=float, default=GameConfig.ball_speed, help="Ball speed in pixels per millisecond")
    parser.add_argument("--target", type=int, default=GameConfig.target_score, help="Points needed to win, 0 for endless")
    parser.add_argument("--error", type=float, default=CpuConfig.error_margin, help="CPU aim error in pixels")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--no-reset", dest="no_reset", action="store_true", help="Keep the ball in play after a point")
    parser.add_argument("--verbose", action="store_true", help="Log every collision")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not is_valid_config(args):
        print("Invalid input. Please try again.")
        return 2

    cfg = GameConfig(
        ball_speed=args.ball_speed,
        target_score=args.target,
        reset_on_point=not args.no_reset,
    )
    game = Game(cfg)
    cpu_cfg = CpuConfig(error_margin=args.error)
    # Different seeds per side so both paddles do not make the same mistakes
    seed_2 = None if args.seed is None else args.seed + 1
    cpu_1 = CpuController(game.players[PlayerId.PLAYER_1], game.ball, config=cpu_cfg, seed=args.seed)
    cpu_2 = CpuController(game.players[PlayerId.PLAYER_2], game.ball, config=cpu_cfg, seed=seed_2)

    goal = f"first to {cfg.target_score} points" if cfg.target_score else "endless"
    print(f"Start of play - {PlayerId.PLAYER_1.value} vs {PlayerId.PLAYER_2.value} - {goal}")

    for _ in range(args.frames):
        for event, data in game.step(args.delta, cpu_1.compute_move(), cpu_2.compute_move()):
            if event == "point":
                s1, s2 = data["score"]
                print(f"Point {data['winner'].value}. Score: {s1} - {s2}")
            elif event == "match":
                s1, s2 = data["final_score"]
                print(f"Winner: {data['winner'].value}. Final Score: {s1} - {s2} after {game.frame} frames")
        if game.match_over:
            return 0

    s1, s2 = game.score_tuple()
    print(f"No winner after {game.frame} frames. Score: {s1} - {s2}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
