"""
무작위 추적 모드 (의사 난수)

서로 다른 주파수의 사인파 합으로 만든 리사주 형태의 경로
난수를 사용하지 않으므로 매번 동일한 경로가 재현됩니다
"""

from __future__ import annotations

import math

from . import register_mode
from .base import Point, TrajectoryMode

TIME_SCALE = 20
CENTER = 0.5
# 가중치 합이 1.0이므로 정규화 좌표는 [0.1, 0.9] 범위를 벗어나지 않음
AMPLITUDE = 0.4
WEIGHTS = (0.5, 0.3, 0.2)
X_FREQS = (1.1, 2.3, 3.7)
Y_FREQS = (1.4, 2.9, 4.1)


def _wave(t: float, freqs) -> float:
    """느린 파형 + 중간파 + 빠른 떨림 (sin, cos, sin)"""
    w1, w2, w3 = WEIGHTS
    f1, f2, f3 = freqs
    return w1 * math.sin(t * f1) + w2 * math.cos(t * f2) + w3 * math.sin(t * f3)


def pursuit_pos(progress: float, w: float, h: float) -> Point:
    """
    리사주 곡선 방식의 목표 위치를 계산합니다.

    t = progress * 20 에서 축마다 3개 사인파의 가중합을 구하고
    중앙 0.5 기준 진폭 0.4로 정규화 좌표를 만든 뒤 픽셀로 변환합니다.

    Args:
        progress (float): 진행률 (0.0 ~ 1.0)
        w (float): 화면 너비
        h (float): 화면 높이

    Returns:
        Point: 목표 위치
    """
    t = progress * TIME_SCALE
    norm_x = CENTER + AMPLITUDE * _wave(t, X_FREQS)
    norm_y = CENTER + AMPLITUDE * _wave(t, Y_FREQS)
    return Point(norm_x * w, norm_y * h)


RANDOM = register_mode(
    TrajectoryMode(
        key="random",
        name="Random Pursuit",
        duration=20000,
        get_pos=pursuit_pos,
    )
)
