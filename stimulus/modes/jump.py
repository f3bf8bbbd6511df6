"""
점프 (사카드) 모드

고정된 위치들을 순서대로 순간 이동하는 목표
위치 사이를 보간하지 않으므로 시선이 급격히 이동(사카드)해야 합니다
"""

from __future__ import annotations

import math

from . import register_mode
from .base import Point, TrajectoryMode

# 고정 순서의 목표 위치 (화면 너비/높이 비율)
# 0.5 = 중앙, 0.2 = 좌측/상단, 0.8 = 우측/하단
SEQUENCE = (
    (0.5, 0.5),  # 중앙
    (0.2, 0.2),  # 좌상
    (0.8, 0.8),  # 우하
    (0.2, 0.8),  # 좌하
    (0.8, 0.2),  # 우상
    (0.5, 0.2),  # 상단 중앙
    (0.5, 0.8),  # 하단 중앙
    (0.5, 0.5),  # 다시 중앙
)

STEP_DURATION = 2000  # 위치당 2초


def step_index(progress: float) -> int:
    """
    진행률에 해당하는 단계 인덱스를 계산합니다.

    progress=1.0 에서 범위를 벗어나지 않도록 [0, len(SEQUENCE) - 1]로 제한합니다.

    Args:
        progress (float): 진행률 (0.0 ~ 1.0)

    Returns:
        int: SEQUENCE 인덱스
    """
    index = math.floor(progress * len(SEQUENCE))
    return min(max(index, 0), len(SEQUENCE) - 1)


def jump_pos(progress: float, w: float, h: float) -> Point:
    """현재 단계의 목표 위치를 화면 크기로 변환"""
    nx, ny = SEQUENCE[step_index(progress)]
    return Point(nx * w, ny * h)


JUMP = register_mode(
    TrajectoryMode(
        key="jump",
        name="Step / Saccade (Jump)",
        duration=STEP_DURATION * len(SEQUENCE),
        get_pos=jump_pos,
    )
)
