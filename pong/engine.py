from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .ball import Ball
from .entities import Player, PlayerId, Wall, WallId
from .render import BLUE, GREEN, Renderer, YELLOW
from .score import Score


logger = logging.getLogger(__name__)

Event = Tuple[str, Dict]


@dataclass
class GameConfig:
    width: int = 800
    height: int = 600
    wall_thickness: float = 20.0
    ball_size: float = 16.0
    ball_speed: float = 0.3  # pixels per millisecond
    paddle_width: float = 16.0
    paddle_height: float = 100.0
    paddle_speed: float = 0.5  # pixels per millisecond
    paddle_margin: float = 40.0  # gap between a side wall and its paddle
    target_score: int = 7  # 0 plays forever
    reset_on_point: bool = True


def build_walls(cfg: GameConfig) -> Dict[WallId, Wall]:
    """Return the four walls framing the arena.

    Walls sit inside the window; the top and bottom ones span the full width.
    """
    t = cfg.wall_thickness
    w = cfg.width
    h = cfg.height
    return {
        WallId.TOP: Wall(WallId.TOP, w / 2, t / 2, w, t),
        WallId.BOTTOM: Wall(WallId.BOTTOM, w / 2, h - t / 2, w, t),
        WallId.LEFT: Wall(WallId.LEFT, t / 2, h / 2, t, h),
        WallId.RIGHT: Wall(WallId.RIGHT, w - t / 2, h / 2, t, h),
    }


def build_players(cfg: GameConfig) -> Dict[PlayerId, Player]:
    """Return both paddles vertically centered, Player 1 on the left."""
    offset = cfg.wall_thickness + cfg.paddle_margin + cfg.paddle_width / 2
    return {
        PlayerId.PLAYER_1: Player(
            PlayerId.PLAYER_1,
            offset,
            cfg.height / 2,
            cfg.paddle_width,
            cfg.paddle_height,
            cfg.paddle_speed,
            GREEN,
        ),
        PlayerId.PLAYER_2: Player(
            PlayerId.PLAYER_2,
            cfg.width - offset,
            cfg.height / 2,
            cfg.paddle_width,
            cfg.paddle_height,
            cfg.paddle_speed,
            BLUE,
        ),
    }


class Game:
    """Frame-step driver for a match.

    Each `step` moves the paddles, advances the ball, then checks the walls and
    then the paddles. Bounces computed here only affect the ball on the next
    step. Hitting the left wall is a point for Player 2 and hitting the right
    wall is a point for Player 1.
    """

    def __init__(self, cfg: Optional[GameConfig] = None):
        self.cfg = cfg or GameConfig()
        if self.cfg.target_score < 0:
            raise ValueError(f"target_score must be non-negative, got {self.cfg.target_score}")
        self.walls = build_walls(self.cfg)
        self.restart()

    def restart(self) -> None:
        # This puts ball, paddles and scores back to their starting state
        cfg = self.cfg
        cx, cy = self.center
        self.ball = Ball(cx, cy, cfg.ball_size, cfg.ball_size, YELLOW, cfg.ball_speed)
        self.players = build_players(cfg)
        self.scores = {pid: Score(pid) for pid in PlayerId}
        self.winner: Optional[PlayerId] = None
        self.frame = 0

    @property
    def center(self) -> Tuple[float, float]:
        return (self.cfg.width / 2, self.cfg.height / 2)

    @property
    def match_over(self) -> bool:
        return self.winner is not None

    @property
    def playable_band(self) -> Tuple[float, float]:
        """Vertical range between the inner edges of the top and bottom walls."""
        return (self.walls[WallId.TOP].bottom, self.walls[WallId.BOTTOM].top)

    def score_tuple(self) -> Tuple[int, int]:
        return (
            self.scores[PlayerId.PLAYER_1].score,
            self.scores[PlayerId.PLAYER_2].score,
        )

    @property
    def max_substep(self) -> float:
        """Longest distance the ball may travel between two collision checks.

        Half of the thinnest obstacle plus the ball, so the ball always
        overlaps a wall or paddle before it can pass through it.
        """
        cfg = self.cfg
        return (min(cfg.wall_thickness, cfg.paddle_width) + cfg.ball_size) / 2

    def step(self, delta: float, move_p1: float = 0.0, move_p2: float = 0.0) -> List[Event]:
        """Advance the match by one frame and return what happened.

        `move_p1` and `move_p2` are paddle directions (-1 up, +1 down). A frame
        that would move the ball further than `max_substep` is played as
        several equal sub-steps.
        """
        if self.match_over:
            return []

        self.frame += 1
        substeps = max(1, math.ceil(self.ball.speed * delta / self.max_substep))
        sub_delta = delta / substeps

        events: List[Event] = []
        for _ in range(substeps):
            events.extend(self._advance(sub_delta, move_p1, move_p2))
            if self.match_over:
                break
        return events

    def _advance(self, delta: float, move_p1: float, move_p2: float) -> List[Event]:
        events: List[Event] = []
        top, bottom = self.playable_band
        self.players[PlayerId.PLAYER_1].move(move_p1, delta, top, bottom)
        self.players[PlayerId.PLAYER_2].move(move_p2, delta, top, bottom)

        self.ball.update(delta)

        # A side wall only scores when the ball arrives moving into it,
        # so a ball still overlapping after the bounce is not counted twice
        sx_before, _ = self.ball.direction
        scorer: Optional[PlayerId] = None
        for wall in self.walls.values():
            if self.ball.check_collision(wall):
                logger.debug("frame %d: ball hit %s wall", self.frame, wall.wall_id.value)
                events.append(("wall", {"wall": wall.wall_id}))
                if wall.wall_id == WallId.LEFT and sx_before < 0:
                    scorer = PlayerId.PLAYER_2
                elif wall.wall_id == WallId.RIGHT and sx_before > 0:
                    scorer = PlayerId.PLAYER_1

        for player in self.players.values():
            if self.ball.check_collision(player):
                logger.debug("frame %d: ball hit %s", self.frame, player.player_id.value)
                events.append(("paddle", {"player": player.player_id}))

        if scorer is not None:
            events.extend(self._award_point(scorer))
        return events

    def _award_point(self, scorer: PlayerId) -> List[Event]:
        events: List[Event] = []
        score = self.scores[scorer]
        score.inc()
        events.append(("point", {"winner": scorer, "score": self.score_tuple()}))
        logger.info("point %s, score %d - %d", scorer.value, *self.score_tuple())

        target = self.cfg.target_score
        if target and score.score >= target:
            self.winner = scorer
            events.append(("match", {"winner": scorer, "final_score": self.score_tuple()}))
            logger.info("match won by %s", scorer.value)

        if self.cfg.reset_on_point:
            self.ball.reset(*self.center)
        return events

    def draw(self, lib: Renderer) -> None:
        for wall in self.walls.values():
            wall.draw(lib)
        for player in self.players.values():
            player.draw(lib)
        self.ball.draw(lib)
        for score in self.scores.values():
            score.draw(lib)
