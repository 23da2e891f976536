# motion/vector.py
# 2차원 벡터/점 보조 함수 모음 (numpy 배열, shape (2,))
from __future__ import annotations

import math
import numpy

from motion.errors import InvalidParameter

Vec2 = numpy.ndarray # (2,)


def vec2(x) -> Vec2:
    """스칼라는 양 축에 복제, 그 외에는 (2,) float 배열로 변환"""
    if is_scalar(x):
        return numpy.array([float(x), float(x)], dtype=float)
    return numpy.asarray(x, dtype=float).reshape(2).copy()


def is_scalar(x) -> bool:
    return bool(numpy.isscalar(x)) or numpy.ndim(x) == 0


def distance(a, b) -> float:
    d = vec2(b) - vec2(a)
    return float(numpy.hypot(d[0], d[1]))


def effective_scale(pixel_scale: float) -> float:
    """픽셀 배율은 최소 1"""
    pixel_scale = float(pixel_scale)
    if not math.isfinite(pixel_scale):
        raise InvalidParameter("pixel_scale", pixel_scale, "finite")
    return max(1.0, pixel_scale)


def pixel_epsilon(pixel_scale: float) -> float:
    """물리 픽셀 1개의 크기 (논리 좌표 단위)"""
    return 1.0 / effective_scale(pixel_scale)


def round_to_pixel(point, pixel_scale: float) -> Vec2:
    """점을 물리 픽셀 경계에 맞춤 round(v*s)/s"""
    s = effective_scale(pixel_scale)
    scaled = vec2(point) * s
    # 0.5 는 0 에서 먼 쪽으로 반올림
    return numpy.sign(scaled) * numpy.floor(numpy.abs(scaled) + 0.5) / s
