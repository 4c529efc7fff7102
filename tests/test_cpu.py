from pong.ball import Ball
from pong.cpu import CpuConfig, CpuController
from pong.entities import Player


def make(ball_cy, player_id="Player 2", **cfg):
    cfg.setdefault("error_margin", 0.0)
    cfg.setdefault("reaction_distance", 1000.0)
    ball = Ball(400, ball_cy, 16, 16, speed=0.3)
    cx = 68 if player_id == "Player 1" else 732
    player = Player(player_id, cx, 300, 16, 100)
    return ball, CpuController(player, ball, config=CpuConfig(**cfg))


def test_follows_an_incoming_ball():
    _, cpu = make(100)
    assert cpu.compute_move() == -1.0
    _, cpu = make(500)
    assert cpu.compute_move() == 1.0


def test_stops_inside_the_dead_zone():
    _, cpu = make(305, dead_zone=10.0)
    assert cpu.compute_move() == 0.0


def test_ignores_a_ball_moving_away():
    # a new ball moves right, away from Player 1
    ball, cpu = make(100, player_id="Player 1")
    assert cpu.compute_move() == 0.0
    ball.on_wall_collision("Right")
    assert cpu.compute_move() == -1.0


def test_waits_until_the_ball_is_close_enough():
    _, cpu = make(100, reaction_distance=200.0)
    # 332 px between ball and paddle
    assert cpu.compute_move() == 0.0


def test_aim_error_is_reproducible_with_a_seed():
    moves = []
    for _ in range(2):
        ball = Ball(400, 300, 16, 16, speed=0.3)
        player = Player("Player 2", 732, 300, 16, 100)
        cpu = CpuController(player, ball, config=CpuConfig(error_margin=200.0, reaction_distance=1000.0), seed=7)
        moves.append(cpu.compute_move())
        moves.append(cpu._aim_offset_y)
    assert moves[:2] == moves[2:]
