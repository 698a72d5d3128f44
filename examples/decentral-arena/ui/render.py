"""Drawing helpers: nodes, splash, ticker banner, HUD and overlays."""
from __future__ import annotations

import pygame

from decentral import NODE_RADIUS, TICKER_HEIGHT, VIEW, GameState, HighScores
from decentral.constants import CHALLENGE
from decentral.selectors import splash_visible
from ui.constants import (
    COLOR_BANNER,
    COLOR_HUD_BG,
    COLOR_NODE,
    COLOR_NODE_CLICKED,
    COLOR_NODE_DEAD,
    COLOR_NODE_RING,
    COLOR_OVERLAY,
    COLOR_TEXT,
    COLOR_TEXT_DIM,
    HUD_H,
    SPLASH_ALPHA,
    TICKER_SPEED,
)


def to_rgba(color: str, alpha: int) -> tuple[int, int, int, int]:
    """Parse a CSS-style color string and attach an alpha channel."""
    c = pygame.Color(color)
    return (c.r, c.g, c.b, alpha)


def draw_nodes(surface: pygame.Surface, state: GameState) -> None:
    for n in state.nodes:
        pos = (int(n.x), int(n.y) + HUD_H)
        if not n.alive:
            pygame.draw.circle(surface, COLOR_NODE_DEAD, pos, NODE_RADIUS)
            continue
        color = COLOR_NODE_CLICKED if n.id in state.clicked else COLOR_NODE
        pygame.draw.circle(surface, color, pos, NODE_RADIUS)
        if state.phase == CHALLENGE:
            pygame.draw.circle(surface, COLOR_NODE_RING, pos, NODE_RADIUS + 3, 1)


def draw_splash(surface: pygame.Surface, state: GameState, now: float) -> None:
    if not splash_visible(state, now):
        return
    sp = state.spl
    layer = pygame.Surface((VIEW, VIEW), pygame.SRCALPHA)
    pygame.draw.circle(layer, to_rgba(state.tcol, SPLASH_ALPHA), (int(sp.cx), int(sp.cy)), int(sp.r))
    surface.blit(layer, (0, HUD_H))


def draw_ticker(
    surface: pygame.Surface, font: pygame.font.Font, state: GameState, now: float,
) -> None:
    top = HUD_H + VIEW - TICKER_HEIGHT
    pygame.draw.rect(surface, COLOR_BANNER, (0, top, VIEW, TICKER_HEIGHT))
    for i, msg in enumerate(state.tickers):
        age = (now - msg.created_at) / 1000.0
        x = VIEW - age * TICKER_SPEED + i * 40
        if x > VIEW:
            continue
        text = font.render(msg.text, True, pygame.Color(msg.color))
        surface.blit(text, (int(x), top + (TICKER_HEIGHT - text.get_height()) // 2))


def draw_hud(
    surface: pygame.Surface,
    font: pygame.font.Font,
    state: GameState,
    scores: HighScores,
    countdown: int | None,
) -> None:
    pygame.draw.rect(surface, COLOR_HUD_BG, (0, 0, VIEW, HUD_H))
    line1 = (
        f"Block {state.sec}   Sats {state.sats}   "
        f"Nodes {state.alive_count}/{len(state.nodes)}   Node cost {state.node_cost}"
    )
    line2 = f"Best height {scores.best_height}   Best nodes {scores.best_nodes}"
    if countdown is not None:
        line2 += f"   Answer in {countdown}s  [Y]es / [N]o"
    elif state.phase == CHALLENGE:
        line2 += "   Click nodes to signal support!"
    surface.blit(font.render(line1, True, COLOR_TEXT), (10, 8))
    surface.blit(font.render(line2, True, COLOR_TEXT_DIM), (10, 30))


def draw_overlay(surface: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    if state.overlay is None or state.phase == CHALLENGE:
        return
    layer = pygame.Surface((VIEW, VIEW), pygame.SRCALPHA)
    layer.fill(COLOR_OVERLAY)
    surface.blit(layer, (0, HUD_H))
    text = font.render(state.overlay, True, COLOR_TEXT)
    rect = text.get_rect(center=(VIEW // 2, HUD_H + VIEW // 2))
    surface.blit(text, rect)
