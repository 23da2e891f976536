# motion/projection.py
# 마찰로 감속하는 물체가 멈추는 위치(투영) 계산 및 끝점 선택
# 속도가 1ms 마다 deceleration_rate 배로 줄어든다고 가정 (UIScrollView 감속 방식)
from __future__ import annotations

import enum
import logging
import math
from collections import abc
from typing import Any, Hashable, Iterable, Mapping, Sequence, Tuple, Union
import numpy

import config
from motion.errors import InvalidParameter
from motion.vector import Vec2, vec2, distance

logger = logging.getLogger(__name__)

Endpoints = Union[Mapping[Hashable, Any], Sequence[Any]]


class DecelerationRate(float, enum.Enum):
    """1ms 마다 남는 속도의 비율"""
    NORMAL = config.Deceleration.Normal
    FAST = config.Deceleration.Fast


def projection_factor(deceleration_rate: float = DecelerationRate.NORMAL) -> float:
    """초기 속도에 곱하면 이동 거리가 되는 상수

    v(t) = v0 * rate^(1000t) 를 0 ~ ∞ 로 적분하면 v0 * (-1 / (1000 * ln(rate)))
    """
    rate = float(deceleration_rate)
    if not (math.isfinite(rate) and 0.0 < rate < 1.0):
        raise InvalidParameter("deceleration_rate", rate, "in (0, 1)")
    return -1.0 / (1000.0 * math.log(rate))


def project(velocity: float, position: float, deceleration_rate: float = DecelerationRate.NORMAL) -> float:
    """초기 속도 velocity 로 움직이던 값이 마찰로 멈추는 위치

    Args:
        velocity (float): 초기 속도 [/s]
        position (float): 초기 값
        deceleration_rate (float, optional): 1ms 마다 남는 속도 비율 (0, 1). Defaults to NORMAL.

    Returns:
        float: 정지 위치
    """
    return float(position) + projection_factor(deceleration_rate) * float(velocity)


def project_point(velocity, position, deceleration_rate: float = DecelerationRate.NORMAL) -> Vec2:
    """2차원 투영, 축마다 독립적으로 계산"""
    return vec2(position) + projection_factor(deceleration_rate) * vec2(velocity)


def reduce_secondary_axis(velocity) -> Vec2:
    """제스처의 보조 축 방향 속도를 줄임

    각 성분에 |성분 / 주 축 속도| 를 곱함. 주 축은 그대로, 보조 축은 제곱에 비례해 작아짐
    """
    v = vec2(velocity)
    if v[0] == 0.0 and v[1] == 0.0:
        return v
    primary = max(abs(v[0]), abs(v[1]))
    return v * numpy.abs(v / primary)


def _candidates(endpoints: Endpoints) -> Iterable[Tuple[Hashable, Any]]:
    if isinstance(endpoints, abc.Mapping):
        return endpoints.items()
    return enumerate(endpoints)


def closest_endpoint(point, endpoints: Endpoints) -> Hashable:
    """point 에 가장 가까운 끝점

    Args:
        point: 기준 점 (x, y)
        endpoints: {키: 좌표} 매핑 또는 좌표 시퀀스

    Returns:
        Hashable: 매핑이면 키, 시퀀스면 인덱스. 거리가 같으면 먼저 나온 것
    """
    best = None
    best_d = float("inf")
    found = False
    for key, coords in _candidates(endpoints):
        d = distance(point, coords)
        if not found or d < best_d:
            best, best_d, found = key, d, True
    if not found:
        raise InvalidParameter("endpoints", endpoints, "non-empty")
    return best


def intended_endpoint(velocity, position, endpoints: Endpoints,
                      deceleration_rate: float = DecelerationRate.NORMAL) -> Hashable:
    """현재 위치와 속도로 물체가 향하려는 끝점 선택"""
    reduced = reduce_secondary_axis(velocity)
    projected = project_point(reduced, position, deceleration_rate)
    endpoint = closest_endpoint(projected, endpoints)
    logger.debug("projected %s -> endpoint %r", projected, endpoint)
    return endpoint
