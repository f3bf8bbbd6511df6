"""
원형 추적 모드

화면 중앙을 중심으로 원을 그리며 움직이는 목표 (부드러운 추적 운동)
"""

from __future__ import annotations

import math

from . import register_mode
from .base import Point, TrajectoryMode

SPEED = 2  # 전체 구간 동안 2바퀴
# 가로가 더 긴 화면에서도 잘리지 않도록 높이 기준 반지름 사용
RADIUS_RATIO = 0.35


def circular_pos(progress: float, w: float, h: float) -> Point:
    """진행률에 따른 원 위의 위치 (progress=0 에서 중앙 오른쪽)"""
    radius = h * RADIUS_RATIO
    angle = progress * math.pi * 2 * SPEED
    return Point(w / 2 + radius * math.cos(angle), h / 2 + radius * math.sin(angle))


CIRCULAR = register_mode(
    TrajectoryMode(
        key="circular",
        name="Circular Tracking",
        duration=15000,
        get_pos=circular_pos,
    )
)
