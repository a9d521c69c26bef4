#!/usr/bin/env python3
"""
client.py

pygame render/input adapter for the game core.
Space / click = activate, Esc = quit.
"""

import argparse
import logging
import math
import random
from typing import Optional, Sequence

import pygame

from .constants import TICK_RATE
from .data_models import GameSnapshot, GameState
from .game import Game
from .notifier import NotificationDispatcher, NotificationResult, UdpScoreNotifier

logger = logging.getLogger(__name__)

IDLE_TEXT = "Click or press Space to start!"
PLAYING_TEXT = "Playing..."
SENDING_TEXT = "You lost! Sending notification..."
FAILED_TEXT = "Notification failed or was rejected. Click to restart."

SKY_COLOR = (78, 192, 202)
OBSTACLE_COLOR = (83, 180, 48)
OBSTACLE_EDGE_COLOR = (40, 110, 20)
FLOOR_COLOR = (222, 216, 149)
WING_COLORS = [(250, 220, 60), (245, 200, 40), (235, 180, 30)]
WHITE = (255, 255, 255)


def status_for_result(result: NotificationResult) -> str:
    if result.ok:
        return f"Sent {result.tx_id} — Score: {result.score}"
    return FAILED_TEXT


class StatusBoard:
    """User-facing status line, fed by state transitions and notification results."""

    def __init__(self, notifying: bool):
        self.notifying = notifying
        self.text = IDLE_TEXT

    def update(self, previous: GameState, snapshot: GameSnapshot):
        if previous is GameState.IDLE and snapshot.state is GameState.PLAYING:
            self.text = PLAYING_TEXT
        elif previous is GameState.PLAYING and snapshot.state is not GameState.PLAYING:
            if self.notifying:
                self.text = SENDING_TEXT
            else:
                self.text = f"You lost! Score: {snapshot.last_score}. Click to restart."

    def apply(self, result: NotificationResult):
        self.text = status_for_result(result)


class FlappyClient:
    def __init__(self, game: Game, dispatcher: Optional[NotificationDispatcher] = None):
        pygame.init()
        self.game = game
        self.dispatcher = dispatcher
        self.width = game.config.playfield_width
        self.height = game.config.playfield_height
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Flappy Gates")

        self.clock = pygame.time.Clock()
        self.status = StatusBoard(notifying=dispatcher is not None)

    def run(self):
        """The main client loop. The clock is the host scheduler: one tick per frame."""
        running = True
        while running:
            self.clock.tick(TICK_RATE)
            previous = self.game.state

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif (event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE) \
                        or event.type == pygame.MOUSEBUTTONDOWN:
                    self.game.handle_activate()

            snapshot = self.game.tick()
            self.status.update(previous, snapshot)

            if self.dispatcher is not None:
                for result in self.dispatcher.poll():
                    self.status.apply(result)

            self._draw(snapshot)

        if self.dispatcher is not None:
            self.dispatcher.shutdown(wait=False)
        pygame.quit()

    def _draw(self, snapshot: GameSnapshot):
        """Renders one frame from the snapshot."""
        screen = self.screen
        screen.fill(SKY_COLOR)
        floor_y = self.game.config.floor_y

        # Obstacles
        for o in snapshot.obstacles:
            lower_top = o.gate + o.gap
            pygame.draw.rect(screen, OBSTACLE_COLOR, (o.x, 0, o.width, o.gate))
            pygame.draw.rect(screen, OBSTACLE_COLOR, (o.x, lower_top, o.width, floor_y - lower_top))
            pygame.draw.rect(screen, OBSTACLE_EDGE_COLOR, (o.x, 0, o.width, o.gate), 2)
            pygame.draw.rect(screen, OBSTACLE_EDGE_COLOR, (o.x, lower_top, o.width, floor_y - lower_top), 2)

        # Floor
        pygame.draw.rect(screen, FLOOR_COLOR, (0, floor_y, self.width, self.height - floor_y))

        # Actor, rotated around the centre of its collision box
        a = snapshot.actor
        body = pygame.Surface((a.width, a.height), pygame.SRCALPHA)
        pygame.draw.ellipse(body, WING_COLORS[snapshot.wing_frame], body.get_rect())
        pygame.draw.circle(body, WHITE, (a.width - 9, 8), 4)
        rotated = pygame.transform.rotate(body, -math.degrees(a.rotation))
        screen.blit(rotated, rotated.get_rect(center=(a.x + a.width / 2, a.y + a.height / 2)))

        # HUD
        large_font = pygame.font.Font(None, 34)
        font = pygame.font.Font(None, 22)
        screen.blit(large_font.render(f"Score: {snapshot.score}", True, WHITE), (20, 20))

        if snapshot.state is GameState.IDLE:
            overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
            overlay.fill((0, 0, 0, 128))
            screen.blit(overlay, (0, 0))
            prompt = large_font.render("CLICK TO START", True, WHITE)
            screen.blit(prompt, (self.width // 2 - prompt.get_width() // 2, self.height // 2))

        status_surf = font.render(self.status.text, True, WHITE)
        screen.blit(status_surf, (10, self.height - 30))

        pygame.display.flip()


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Flappy Gates")
    p.add_argument("--seed", type=int, default=None,
                   help="Seed for gate offsets. Omit for a random run.")
    p.add_argument("--notify-host", default=None,
                   help="Host of the game-over receipt service. Omit to disable notifications.")
    p.add_argument("--notify-port", type=int, default=50008)
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    rng = random.Random(args.seed) if args.seed is not None else None

    dispatcher = None
    if args.notify_host:
        dispatcher = NotificationDispatcher(UdpScoreNotifier((args.notify_host, args.notify_port)))
        logger.info("Game-over notifications go to %s:%d", args.notify_host, args.notify_port)

    game = Game(rng=rng, on_game_over=dispatcher.dispatch if dispatcher else None)
    FlappyClient(game, dispatcher).run()


if __name__ == "__main__":
    main()
