# motion/endpoints.py
# 화면 네 모서리에 놓이는 PIP 창의 정지 위치
from __future__ import annotations

import enum
from typing import Dict, Tuple
import numpy

import config
from motion.errors import InvalidParameter
from motion.vector import Vec2

Rect = Tuple[float, float, float, float] # (x, y, w, h), y 는 아래로 증가


class Corner(enum.Enum):
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"


def inset(bounds: Rect, padding: float) -> Rect:
    x, y, w, h = (float(b) for b in bounds)
    p = float(padding)
    return x + p, y + p, w - 2.0 * p, h - 2.0 * p


def corner_centers(bounds: Rect,
                   size: Tuple[float, float] = config.Layout.card_size,
                   padding: float = config.Layout.padding,
                ) -> Dict[Corner, Vec2]:
    """bounds 안쪽 여백을 둔 네 모서리에 붙는 카드의 중심점

    Args:
        bounds (Rect): 배치 영역 (x, y, w, h)
        size (Tuple[float, float], optional): 카드 (너비, 높이). Defaults to config.Layout.card_size.
        padding (float, optional): 가장자리 여백. Defaults to config.Layout.padding.

    Returns:
        Dict[Corner, Vec2]: 모서리 -> 카드 중심 (Corner 선언 순서)
    """
    x, y, w, h = inset(bounds, padding)
    cw, ch = float(size[0]), float(size[1])
    if cw <= 0.0 or ch <= 0.0:
        raise InvalidParameter("size", size, "positive")
    if w < cw or h < ch:
        raise InvalidParameter("bounds", bounds, f"large enough for a {cw:g}x{ch:g} card")

    left, right = x + cw / 2.0, x + w - cw / 2.0
    top, bottom = y + ch / 2.0, y + h - ch / 2.0
    return {
        Corner.TOP_LEFT: numpy.array([left, top], dtype=float),
        Corner.TOP_RIGHT: numpy.array([right, top], dtype=float),
        Corner.BOTTOM_LEFT: numpy.array([left, bottom], dtype=float),
        Corner.BOTTOM_RIGHT: numpy.array([right, bottom], dtype=float),
    }
