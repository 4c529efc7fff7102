from collections import Counter
import os, sys

# Ensure project root is on sys.path
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from pong.cpu import CpuConfig, CpuController
from pong.engine import GameConfig, Game
from pong.entities import PlayerId


def run(seed: int, ball_speed=0.3, error_margin=70.0, max_frames=200_000):
    """Play one CPU vs CPU match and return (final score, paddle hits per point).

    This uses a fixed arena and a changing seed.
    """
    game = Game(GameConfig(ball_speed=ball_speed))
    cpu_cfg = CpuConfig(error_margin=error_margin)
    cpu_1 = CpuController(game.players[PlayerId.PLAYER_1], game.ball, config=cpu_cfg, seed=seed)
    cpu_2 = CpuController(game.players[PlayerId.PLAYER_2], game.ball, config=cpu_cfg, seed=seed + 1)
    rallies = []
    hits = 0
    for _ in range(max_frames):
        for event, _data in game.step(16, cpu_1.compute_move(), cpu_2.compute_move()):
            if event == 'paddle':
                hits += 1
            elif event == 'point':
                rallies.append(hits)
                hits = 0
        if game.match_over:
            break
    return game.score_tuple(), rallies


def probe(label, **kwargs):
    """Try many seeds and print simple distribution info.

    This is a rough way to eyeball speed and CPU error settings.
    """
    c = Counter()
    n = 100
    all_rallies = []
    for s in range(n):
        score, rallies = run(s, **kwargs)
        all_rallies.extend(rallies)
        c[score] += 1
    mean = round(sum(all_rallies) / len(all_rallies), 2) if all_rallies else 0
    print(f"\n[{label}] matches: {n}  points: {len(all_rallies)}  mean paddle hits per point: {mean}")
    for k,v in c.most_common(5):
        print(v, k)


def main():
    """Run a few probes with different ball speeds and CPU errors."""
    probe('defaults speed=0.3 error=70', ball_speed=0.3, error_margin=70.0)
    # Faster ball
    probe('fast speed=0.5 error=70', ball_speed=0.5, error_margin=70.0)
    # Sloppier CPU
    probe('sloppy speed=0.3 error=120', ball_speed=0.3, error_margin=120.0)


if __name__ == '__main__':
    main()
