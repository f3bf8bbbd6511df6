"""
수평 사인파 모드

화면 중앙 높이에서 좌우로 부드럽게 왕복하는 목표
"""

from __future__ import annotations

import math

from . import register_mode
from .base import Point, TrajectoryMode

SPEED = 2  # 전체 구간 동안 2회 왕복
AMPLITUDE_RATIO = 0.4


def horizontal_pos(progress: float, w: float, h: float) -> Point:
    """
    x = w/2 + 0.4w * sin(progress * 2π * 2), y = h/2

    Args:
        progress (float): 진행률 (0.0 ~ 1.0)
        w (float): 화면 너비
        h (float): 화면 높이

    Returns:
        Point: 목표 위치
    """
    amplitude = w * AMPLITUDE_RATIO
    x = w / 2 + amplitude * math.sin(progress * math.pi * 2 * SPEED)
    return Point(x, h / 2)


HORIZONTAL = register_mode(
    TrajectoryMode(
        key="horizontal",
        name="Horizontal Sine",
        duration=15000,
        get_pos=horizontal_pos,
    )
)
