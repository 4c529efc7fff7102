import pytest

from pong.engine import GameConfig, Game, build_walls
from pong.entities import PlayerId, WallId


def kinds(events):
    return [kind for kind, _ in events]


@pytest.fixture()
def game():
    return Game(GameConfig())


def test_walls_frame_the_arena():
    walls = build_walls(GameConfig(width=800, height=600, wall_thickness=20))
    assert walls[WallId.TOP].bottom == 20
    assert walls[WallId.BOTTOM].top == 580
    assert walls[WallId.LEFT].right == 20
    assert walls[WallId.RIGHT].left == 780


def test_new_game(game):
    assert (game.ball.cx, game.ball.cy) == (400, 300)
    assert game.ball.direction == (1.0, 1.0)
    assert game.score_tuple() == (0, 0)
    assert game.playable_band == (20, 580)
    p1 = game.players[PlayerId.PLAYER_1]
    p2 = game.players[PlayerId.PLAYER_2]
    assert p1.cx == 68
    assert p2.cx == 732
    assert p1.cy == p2.cy == 300
    assert not game.match_over


def test_negative_target_is_rejected():
    with pytest.raises(ValueError):
        Game(GameConfig(target_score=-1))


def test_step_moves_the_ball(game):
    assert game.step(10) == []
    assert game.ball.cx == pytest.approx(403)
    assert game.ball.cy == pytest.approx(303)
    assert game.frame == 1


def test_step_moves_and_clamps_paddles(game):
    game.step(1000, -1.0, 1.0)
    assert game.players[PlayerId.PLAYER_1].top == 20
    assert game.players[PlayerId.PLAYER_2].bottom == 580


def test_ball_bounces_off_the_bottom_wall(game):
    game.ball.reset(400, 570)
    events = game.step(16)
    assert events == [("wall", {"wall": WallId.BOTTOM})]
    assert game.ball.direction == (1.0, -1.0)


def test_right_wall_is_a_point_for_player_1(game):
    game.players[PlayerId.PLAYER_2].cy = 100  # out of the way
    game.ball.reset(770, 300)
    events = game.step(16)
    assert kinds(events) == ["wall", "point"]
    assert events[1][1] == {"winner": PlayerId.PLAYER_1, "score": (1, 0)}
    # serve from the center, away from the wall that was hit
    assert (game.ball.cx, game.ball.cy) == (400, 300)
    assert game.ball.direction == (-1.0, 1.0)


def test_left_wall_is_a_point_for_player_2(game):
    game.players[PlayerId.PLAYER_1].cy = 100
    game.ball.on_wall_collision("Right")  # head left
    game.ball.reset(30, 300)
    events = game.step(16)
    assert ("point", {"winner": PlayerId.PLAYER_2, "score": (0, 1)}) in events
    assert game.scores[PlayerId.PLAYER_2].score == 1


def test_overlap_after_bounce_scores_only_once():
    game = Game(GameConfig(reset_on_point=False))
    game.players[PlayerId.PLAYER_2].cy = 100
    game.ball.reset(779, 300)
    assert kinds(game.step(16)) == ["wall", "point"]
    # still overlapping the wall, now moving away from it
    assert kinds(game.step(16)) == ["wall"]
    assert game.score_tuple() == (1, 0)
    assert game.ball.direction[0] == -1.0


def test_paddle_sends_the_ball_back(game):
    game.ball.on_wall_collision("Right")  # head left
    game.ball.reset(88, 300)
    events = game.step(16)
    assert events == [("paddle", {"player": PlayerId.PLAYER_1})]
    assert game.ball.direction == (1.0, 1.0)


def test_match_ends_at_the_target_score():
    game = Game(GameConfig(target_score=2))
    game.players[PlayerId.PLAYER_2].cy = 100
    game.ball.reset(770, 300)
    assert kinds(game.step(16)) == ["wall", "point"]
    assert not game.match_over

    # head right again from the same spot
    game.ball.reset(770, 300)
    game.ball.on_wall_collision("Left")
    events = game.step(16)
    assert kinds(events) == ["wall", "point", "match"]
    assert events[2][1] == {"winner": PlayerId.PLAYER_1, "final_score": (2, 0)}
    assert game.winner is PlayerId.PLAYER_1
    assert game.match_over
    # nothing moves once the match is over
    cx, cy = game.ball.cx, game.ball.cy
    assert game.step(16) == []
    assert (game.ball.cx, game.ball.cy) == (cx, cy)


def test_zero_target_plays_forever():
    game = Game(GameConfig(target_score=0))
    game.players[PlayerId.PLAYER_2].cy = 100
    for _ in range(10):
        game.ball.reset(770, 300)
        game.ball.on_wall_collision("Left")
        game.step(16)
    assert game.score_tuple() == (10, 0)
    assert not game.match_over


def test_restart(game):
    game.players[PlayerId.PLAYER_2].cy = 100
    game.ball.reset(770, 300)
    game.step(16)
    game.restart()
    assert game.score_tuple() == (0, 0)
    assert game.players[PlayerId.PLAYER_2].cy == 300
    assert game.ball.direction == (1.0, 1.0)
    assert game.frame == 0


def test_draw_renders_every_object(game, lib):
    game.draw(lib)
    assert len(lib.named("fill_rect")) == 7  # 4 walls, 2 paddles, ball
    texts = [c[1] for c in lib.named("draw_text")]
    assert texts == ["Placar P1: 0", "Placar P2: 0"]


def test_long_frames_are_split_into_substeps():
    game = Game(GameConfig(ball_speed=10.0))
    assert game.max_substep == 16
    # 160 px in one frame: checked every 16 px
    game.step(16)
    assert game.frame == 1
    assert game.ball.cx == pytest.approx(560)
    assert game.ball.cy == pytest.approx(460)


def test_fast_ball_never_leaves_the_arena():
    game = Game(GameConfig(ball_speed=10.0, target_score=0))
    for _ in range(50):
        game.step(16)
        assert 0 <= game.ball.cx <= 800
        assert 0 <= game.ball.cy <= 600
    assert game.score_tuple() != (0, 0)


def test_fast_ball_match_still_ends():
    game = Game(GameConfig(ball_speed=10.0, target_score=1))
    for _ in range(50):
        game.step(16)
    assert game.match_over
    assert game.score_tuple() == (1, 0)
