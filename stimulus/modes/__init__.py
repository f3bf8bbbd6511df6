"""
시선 추적 자극 모드 모듈

진행률과 화면 크기로 목표 위치를 계산하는 궤적 모드들의 레지스트리
각 모드 모듈은 임포트 시 register_mode()로 자신을 등록합니다
"""

from __future__ import annotations

import logging
from typing import Dict, List

from .base import Point, PositionFn, TrajectoryMode

logger = logging.getLogger(__name__)

__all__ = [
    "Point",
    "PositionFn",
    "TrajectoryMode",
    "AVAILABLE_MODES",
    "register_mode",
    "get_mode",
    "list_modes",
]

# 등록된 모드들의 딕셔너리 (모드 키 -> 모드)
AVAILABLE_MODES: Dict[str, TrajectoryMode] = {}


def register_mode(mode: TrajectoryMode) -> TrajectoryMode:
    """
    새로운 모드를 레지스트리에 등록합니다.

    Args:
        mode (TrajectoryMode): 등록할 모드

    Returns:
        TrajectoryMode: 등록된 모드 (모듈 상수로 그대로 사용)

    Raises:
        ValueError: 같은 키의 모드가 이미 등록되어 있는 경우
    """
    if mode.key in AVAILABLE_MODES:
        raise ValueError(f"Mode key '{mode.key}' already registered")
    AVAILABLE_MODES[mode.key] = mode
    logger.debug(f"[Modes] 등록됨: {mode.key} ({mode.name}, {mode.duration}ms)")
    return mode


def get_mode(key: str) -> TrajectoryMode:
    """
    주어진 키의 모드를 반환합니다.

    존재 여부만 확인하려면 AVAILABLE_MODES.get(key)를 사용하세요 (없으면 None).

    Args:
        key (str): 모드 키

    Returns:
        TrajectoryMode: 등록된 모드

    Raises:
        ValueError: 요청한 모드가 등록되어 있지 않은 경우
    """
    try:
        return AVAILABLE_MODES[key]
    except KeyError as e:
        raise ValueError(
            f"Unknown mode '{key}'. Available: {sorted(AVAILABLE_MODES)}"
        ) from e


def list_modes() -> List[TrajectoryMode]:
    """등록된 모드를 키 순서로 반환합니다."""
    return [AVAILABLE_MODES[k] for k in sorted(AVAILABLE_MODES)]


# 모드 모듈 임포트 (임포트 시 레지스트리에 등록됨)
from . import circular, horizontal, jump, pursuit
