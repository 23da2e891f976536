# motion/spring.py
# 감쇠 조화 진동자(질량-스프링-댐퍼) 모델
# m*s'' + c*s' + k*s = 0 의 닫힌 해를 감쇠비에 따라 세 가지 경우로 나누어 계산
from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass
from typing import Tuple
import numpy

import config
from motion.errors import InvalidParameter
from motion.vector import Vec2, vec2, is_scalar, pixel_epsilon

logger = logging.getLogger(__name__)


class DampingRegime(enum.Enum):
    CRITICAL = "critical"
    UNDERDAMPED = "underdamped"
    OVERDAMPED = "overdamped"


def _require(name: str, value: float, ok: bool, requirement: str) -> float:
    if not ok:
        raise InvalidParameter(name, value, requirement)
    return value


@dataclass(frozen=True)
class DampedHarmonicSpring:
    """
    실제 물리 스프링을 본뜬 감쇠 조화 스프링 (불변 값 객체)
        - mass: 질량 m [kg]
        - stiffness: 스프링 상수 k [kg/s^2]
        - damping_coefficient: 점성 감쇠 계수 c [kg/s]
    디자인 친화적인 (감쇠비, 주파수 응답) 으로 만들려면 from_design 사용
    """
    mass: float
    stiffness: float
    damping_coefficient: float

    def __post_init__(self) -> None:
        m, k, c = float(self.mass), float(self.stiffness), float(self.damping_coefficient)
        _require("mass", m, math.isfinite(m) and m > 0.0, "> 0")
        _require("stiffness", k, math.isfinite(k) and k > 0.0, "> 0")
        _require("damping_coefficient", c, math.isfinite(c) and c >= 0.0, ">= 0")
        object.__setattr__(self, "mass", m)
        object.__setattr__(self, "stiffness", k)
        object.__setattr__(self, "damping_coefficient", c)

    @classmethod
    def from_design(cls, damping_ratio: float, frequency_response: float) -> DampedHarmonicSpring:
        """감쇠비와 주파수 응답으로 스프링 생성 (질량은 1 로 고정)

        Args:
            damping_ratio (float): 실제 감쇠 계수 / 임계 감쇠 계수 (>= 0)
            frequency_response (float): 감쇠가 없을 때 한 주기의 길이 [s] (> 0)

        Returns:
            DampedHarmonicSpring: 대응하는 물리 파라미터의 스프링
        """
        zeta, f = float(damping_ratio), float(frequency_response)
        _require("damping_ratio", zeta, math.isfinite(zeta) and zeta >= 0.0, ">= 0")
        _require("frequency_response", f, math.isfinite(f) and f > 0.0, "> 0")

        m = config.DESIGN_MASS
        k = (config.TWO_PI / f) ** 2 * m
        c = 4.0 * math.pi * zeta * m / f
        return cls(mass=m, stiffness=k, damping_coefficient=c)

    @classmethod
    def from_preset(cls, preset: Tuple[float, float]) -> DampedHarmonicSpring:
        damping_ratio, frequency_response = preset
        return cls.from_design(damping_ratio, frequency_response)

    # 파생 속성
    @property
    def damping_ratio(self) -> float:
        """감쇠비 ζ = c / (2*sqrt(k*m))"""
        return self.damping_coefficient / (2.0 * math.sqrt(self.stiffness * self.mass))

    @property
    def undamped_natural_frequency(self) -> float:
        """비감쇠 고유 진동수 ω0 [rad/s]"""
        return math.sqrt(self.stiffness / self.mass)

    @property
    def damped_natural_frequency(self) -> float:
        """감쇠 고유 진동수 ωd [rad/s]"""
        return self.undamped_natural_frequency * math.sqrt(abs(1.0 - self.damping_ratio ** 2))

    @property
    def frequency_response(self) -> float:
        """감쇠가 없을 때 한 주기의 길이 [s]"""
        return config.TWO_PI / self.undamped_natural_frequency

    @property
    def decay_rate(self) -> float:
        """지수 감쇠율 λ = c / 2m"""
        return self.damping_coefficient / self.mass / 2.0

    @property
    def regime(self) -> DampingRegime:
        zeta = self.damping_ratio
        if abs(zeta - 1.0) < config.CRITICAL_DAMPING_TOLERANCE:
            return DampingRegime.CRITICAL
        if zeta < 1.0:
            return DampingRegime.UNDERDAMPED
        return DampingRegime.OVERDAMPED

    # 평가
    def position(self,
                 time: float,
                 initial_position: float = config.DEFAULT_INITIAL_POSITION,
                 initial_velocity: float = config.DEFAULT_INITIAL_VELOCITY,
            ) -> float:
        """시간 t 에서 평형점으로부터의 변위 s(t)

        Args:
            time (float): 경과 시간 [s]
            initial_position (float, optional): t=0 에서의 변위 s0. Defaults to 1.
            initial_velocity (float, optional): t=0 에서의 속도 v0 [/s]. Defaults to 0.

        Returns:
            float: 변위 s(t)
        """
        t = float(time)
        if not math.isfinite(t):
            raise InvalidParameter("time", time, "finite")
        s0 = float(initial_position)
        v0 = float(initial_velocity)
        lam = self.decay_rate
        wd = self.damped_natural_frequency

        regime = self.regime
        if regime is DampingRegime.CRITICAL:
            c1 = s0
            c2 = v0 + lam * s0
            return math.exp(-lam * t) * (c1 + c2 * t)
        if regime is DampingRegime.UNDERDAMPED:
            c1 = s0
            c2 = (v0 + lam * s0) / wd
            return math.exp(-lam * t) * (c1 * math.cos(wd * t) + c2 * math.sin(wd * t))
        c1 = (v0 + s0 * (lam + wd)) / (2.0 * wd)
        c2 = s0 - c1
        # e^(-λt) 를 각 항에 먼저 곱해 큰 t 에서의 overflow 방지
        return c1 * math.exp((wd - lam) * t) + c2 * math.exp(-(lam + wd) * t)

    def curve(self,
              times,
              initial_position: float = config.DEFAULT_INITIAL_POSITION,
              initial_velocity: float = config.DEFAULT_INITIAL_VELOCITY,
            ) -> numpy.ndarray:
        """여러 시간에 대한 변위 배열"""
        times = numpy.asarray(times, dtype=float).reshape(-1)
        return numpy.array([self.position(t, initial_position, initial_velocity) for t in times], dtype=float)

    def peak_time(self) -> float:
        """평형점에서 밀었을 때 첫 극값에 도달하는 시간 [s]"""
        lam = self.decay_rate
        wd = self.damped_natural_frequency
        regime = self.regime
        if regime is DampingRegime.CRITICAL:
            return 1.0 / lam
        if regime is DampingRegime.UNDERDAMPED:
            # λ = 0 (감쇠 없음) 이면 atan2 가 π/2 를 돌려줌
            return math.atan2(wd, lam) / wd
        # log((λ+ωd)/(λ-ωd)) / 2ωd 와 같음 (λ² - ωd² = ω0²), ζ ≫ 1 에서도 유한
        return math.log((lam + wd) / self.undamped_natural_frequency) / wd

    def maximum_displacement_from_equilibrium(self, initial_velocity: float) -> float:
        """평형 상태에서 initial_velocity 로 밀었을 때 도달하는 최대 변위 |s(t*)|"""
        return abs(self.position(self.peak_time(), initial_position=0.0, initial_velocity=initial_velocity))

    # 상대 속도
    def relative_velocity(self,
                          velocity: float,
                          current_value: float,
                          target_value: float,
                          epsilon: float,
                        ) -> Tuple[float, float]:
        """절대 속도를 current -> target 구간이 [0, 1] 이 되도록 정규화

        두 값이 epsilon 보다 가까우면 current 를 target 에서 epsilon 만큼 떨어뜨려
        초기 속도가 유지되도록 함. 이동량 자체가 무시할 만하면 0 을 돌려줌.

        Args:
            velocity (float): 현재 속도 [/s]
            current_value (float): 현재 값
            target_value (float): 목표 값
            epsilon (float): 이 거리 이하이면 두 값이 같다고 봄 (> 0)

        Returns:
            Tuple[float, float]: (보정된 현재 값, 상대 속도)
                보정된 현재 값을 실제 애니메이션 시작점으로 써야 함
        """
        eps = float(epsilon)
        _require("epsilon", eps, math.isfinite(eps) and eps > 0.0, "> 0")
        v = float(velocity)
        current = float(current_value)
        target = float(target_value)

        if abs(target - current) >= eps:
            return current, v / (target - current)

        if self.maximum_displacement_from_equilibrium(v) >= 2.0 * eps:
            current = target + eps if v >= 0.0 else target - eps
            logger.debug("current value displaced to %r (target=%r, velocity=%r)", current, target, v)
            return current, v / (target - current)

        logger.debug("negligible motion at velocity %r, relative velocity is 0", v)
        return current, 0.0

    # 타이밍 함수
    def timing_function_relative(self, relative_velocity) -> SpringTimingParameters:
        """상대 초기 속도(초당 완료 비율)로 타이밍 파라미터 생성
            스칼라면 2차원 속성에서도 양 축에 같은 속도가 적용됨
        """
        return SpringTimingParameters(
            mass=self.mass,
            stiffness=self.stiffness,
            damping=self.damping_coefficient,
            initial_velocity=vec2(relative_velocity),
        )

    def timing_function(self,
                        velocity,
                        current_value,
                        target_value,
                        pixel_scale: float | None = None,
                    ):
        """끝점과 초기 속도로 애니메이션용 타이밍 파라미터 생성

        pixel_scale 이 주어지면 epsilon 은 물리 픽셀 하나 (보정이 눈에 보이지 않음),
        없으면 |속도 * 1e-3| (1차원 전용)

        Args:
            velocity: 초기 속도, 스칼라 또는 (vx, vy)
            current_value: 현재 값, 스칼라 또는 (x, y)
            target_value: 목표 값, 스칼라 또는 (x, y)
            pixel_scale (float | None, optional): 화면 배율. Defaults to None.

        Returns:
            tuple: (보정된 현재 값, SpringTimingParameters)
        """
        # 세 값은 모두 스칼라이거나 모두 2차원
        if len({is_scalar(velocity), is_scalar(current_value), is_scalar(target_value)}) != 1:
            raise InvalidParameter("velocity", velocity, "the same dimension as current_value and target_value")
        if pixel_scale is not None:
            eps = pixel_epsilon(pixel_scale)
            if is_scalar(velocity):
                current, rel = self.relative_velocity(velocity, current_value, target_value, eps)
                return current, self.timing_function_relative(rel)
            v = vec2(velocity)
            current = vec2(current_value)
            target = vec2(target_value)
            cx, rx = self.relative_velocity(v[0], current[0], target[0], eps)
            cy, ry = self.relative_velocity(v[1], current[1], target[1], eps)
            return numpy.array([cx, cy], dtype=float), self.timing_function_relative(numpy.array([rx, ry], dtype=float))

        if not is_scalar(velocity):
            raise InvalidParameter("pixel_scale", pixel_scale, "given for two-dimensional values")
        eps = abs(config.VELOCITY_EPSILON_FRACTION * float(velocity))
        if eps == 0.0:
            # 속도 0: 보존할 초기 속도가 없음
            return float(current_value), self.timing_function_relative(0.0)
        current, rel = self.relative_velocity(velocity, current_value, target_value, eps)
        return current, self.timing_function_relative(rel)


@dataclass(frozen=True, eq=False)
class SpringTimingParameters:
    """
    외부 애니메이터에 넘기는 타이밍 곡선
    스프링 상수 + 축별 상대 초기 속도 (초당 완료 비율)
    """
    mass: float
    stiffness: float
    damping: float
    initial_velocity: Vec2

    @property
    def spring(self) -> DampedHarmonicSpring:
        return DampedHarmonicSpring(mass=self.mass, stiffness=self.stiffness, damping_coefficient=self.damping)

    def fraction_complete(self, time: float) -> Vec2:
        """축별 진행률 1 - s(t), s0 = 1 (남은 비율), v0 = -상대 속도"""
        spring = self.spring
        v = self.initial_velocity
        return numpy.array([
            1.0 - spring.position(time, 1.0, -float(v[0])),
            1.0 - spring.position(time, 1.0, -float(v[1])),
        ], dtype=float)

    def value_at(self, time: float, start, target):
        """start -> target 애니메이션의 시간 t 에서의 값"""
        fraction = self.fraction_complete(time)
        if is_scalar(start) and is_scalar(target):
            return float(start) + (float(target) - float(start)) * float(fraction[0])
        start = vec2(start)
        return start + (vec2(target) - start) * fraction


def sample_curve(spring: DampedHarmonicSpring,
                 start: float = config.Graph.time_range[0],
                 stop: float = config.Graph.time_range[1],
                 count: int = config.Graph.samples,
            ) -> Tuple[numpy.ndarray, numpy.ndarray]:
    """운동 방정식 그래프용 (시간, 변위) 샘플"""
    if int(count) < 2:
        raise InvalidParameter("count", count, ">= 2")
    times = numpy.linspace(float(start), float(stop), int(count))
    return times, spring.curve(times)
