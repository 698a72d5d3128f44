"""Layout, color, and rendering constants."""
from __future__ import annotations

from decentral import VIEW

FPS = 60
HUD_H = 56
SCREEN_W = VIEW
SCREEN_H = VIEW + HUD_H

# Ticker banner scroll speed (px per second)
TICKER_SPEED = 90.0

COLOR_BG = (15, 18, 28)
COLOR_HUD_BG = (24, 28, 40)
COLOR_TEXT = (220, 220, 230)
COLOR_TEXT_DIM = (130, 135, 150)
COLOR_NODE = (247, 147, 26)
COLOR_NODE_DEAD = (80, 80, 90)
COLOR_NODE_CLICKED = (16, 185, 129)
COLOR_NODE_RING = (255, 255, 255)
COLOR_BANNER = (10, 10, 16)
COLOR_OVERLAY = (0, 0, 0, 170)
SPLASH_ALPHA = 90
