"""Decentral Arena — keep the network alive.

Nodes earn sats every block. Disasters strike every few seconds and knock
out nodes near the epicenter. Every 30 seconds an upgrade is proposed: accept
it and click at least half of your nodes before time runs out, or the nodes
that stayed silent fork off. Fewer than two nodes online ends the game.

Controls:
  Space/Enter  Start (or restart after game over)
  Y / N        Accept / reject the proposed upgrade
  B            Buy a node at a random spot
  Left-drag    Move a node
  Left-click   Select a node during an upgrade challenge
  R            Reset high scores
  Escape       Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from decentral import (
    BeginChallenge,
    Buy,
    Click,
    Drag,
    GameConfig,
    Reject,
    Start,
    clamp_to_play_area,
    load_scores,
    make_node,
    node_at,
    save_scores,
)
from decentral.constants import CHALLENGE, CONFIRM, GAMEOVER, IDLE
from decentral.selectors import can_buy, confirm_remaining
from decentral_schedule import build_session
from ui.constants import COLOR_BG, FPS, HUD_H, SCREEN_H, SCREEN_W
from ui.render import draw_hud, draw_nodes, draw_overlay, draw_splash, draw_ticker

logger = logging.getLogger("decentral_arena")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Decentral Arena — pygame demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--scores", type=str, default="decentral_scores.json",
                   metavar="FILE", help="High score file (default: decentral_scores.json)")
    p.add_argument("--threshold", type=float, default=0.5,
                   help="Share of nodes needed to pass an upgrade (default: 0.5)")
    p.add_argument("--dedupe-tickers", action="store_true",
                   help="Do not repeat a ticker message that is already showing")
    p.add_argument("--log-level", type=str, default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args()


def to_game(pos: tuple[int, int]) -> tuple[float, float]:
    return float(pos[0]), float(pos[1] - HUD_H)


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level, format="%(name)s %(levelname)s %(message)s")

    config = GameConfig(win_threshold=args.threshold, dedupe_tickers=args.dedupe_tickers)
    session = build_session(seed=args.seed, config=config)
    logger.info("seed=%d", session.seed)
    scores = load_scores(args.scores)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Decentral Arena")
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)
    big_font = pygame.font.SysFont("monospace", 20, bold=True)

    dragging: int | None = None
    running = True

    while running:
        pg_clock.tick(FPS)
        state = session.state

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in (pygame.K_SPACE, pygame.K_RETURN):
                    if state.phase in (IDLE, GAMEOVER):
                        session.dispatch(Start())
                elif event.key == pygame.K_y and state.phase == CONFIRM:
                    session.dispatch(BeginChallenge())
                elif event.key == pygame.K_n and state.phase == CONFIRM:
                    session.dispatch(Reject())
                elif event.key == pygame.K_b and can_buy(state):
                    spot = make_node(0, session.rng)
                    session.dispatch(Buy(x=spot.x, y=spot.y))
                elif event.key == pygame.K_r:
                    scores = scores.reset()
                    save_scores(scores, args.scores)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                x, y = to_game(event.pos)
                hit = node_at(state, x, y)
                if hit is not None:
                    if state.phase == CHALLENGE:
                        session.dispatch(Click(id=hit.id))
                    else:
                        dragging = hit.id
            elif event.type == pygame.MOUSEMOTION and dragging is not None:
                if state.phase == GAMEOVER:
                    dragging = None
                else:
                    x, y = clamp_to_play_area(*to_game(event.pos))
                    session.dispatch(Drag(id=dragging, x=x, y=y))
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                dragging = None
            state = session.state

        # --- Update ---
        session.scheduler.poll()
        state = session.state
        best = scores.observe(state)
        if best is not scores:
            scores = best
            save_scores(scores, args.scores)

        # --- Draw ---
        now = session.clock()
        screen.fill(COLOR_BG)
        draw_splash(screen, state, now)
        draw_nodes(screen, state)
        draw_ticker(screen, font, state, now)
        draw_hud(screen, font, state, scores, confirm_remaining(state, now, session.config))
        draw_overlay(screen, big_font, state)
        pygame.display.flip()

    session.scheduler.close()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
