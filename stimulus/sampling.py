"""
궤적 샘플링 유틸리티

경과 시간을 진행률로 변환하고, 모드의 전체 경로를 프레임 단위로 미리 계산합니다
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

import numpy as np

if TYPE_CHECKING:
    from stimulus.modes import TrajectoryMode

DEFAULT_FPS = 60


def progress_from_elapsed(elapsed_ms: float, duration_ms: float) -> float:
    """
    경과 시간을 [0, 1] 범위의 진행률로 변환합니다.

    Args:
        elapsed_ms (float): 경과 시간 (밀리초)
        duration_ms (float): 전체 시간 (밀리초)

    Returns:
        float: 진행률 (0.0 ~ 1.0)

    Raises:
        ValueError: duration_ms가 0 이하인 경우
    """
    if duration_ms <= 0:
        raise ValueError(f"duration must be positive, got {duration_ms}")
    return min(max(elapsed_ms / duration_ms, 0.0), 1.0)


def frame_count(duration_ms: float, fps: float = DEFAULT_FPS) -> int:
    """
    한 번의 실행이 차지하는 프레임 수 (최소 2: 시작과 끝)

    Raises:
        ValueError: fps가 0 이하인 경우
    """
    if fps <= 0:
        raise ValueError(f"fps must be positive, got {fps}")
    return max(int(duration_ms / 1000 * fps), 2)


def progress_grid(samples: int) -> np.ndarray:
    """0.0부터 1.0까지 (양끝 포함) 균등한 진행률 배열"""
    if samples < 2:
        raise ValueError(f"samples must be at least 2, got {samples}")
    return np.linspace(0.0, 1.0, samples)


def sample_path(
    mode: "TrajectoryMode",
    width: float,
    height: float,
    samples: int | None = None,
    fps: float = DEFAULT_FPS,
) -> np.ndarray:
    """
    모드의 전체 경로를 미리 계산합니다.

    samples를 지정하지 않으면 duration과 fps로 프레임 수를 정합니다.
    i번째 프레임의 진행률은 i / (frames - 1) 입니다.

    Args:
        mode (TrajectoryMode): 샘플링할 모드
        width (float): 화면 너비 (픽셀)
        height (float): 화면 높이 (픽셀)
        samples (int | None): 샘플 수 (None이면 프레임 수 사용)
        fps (float): 초당 프레임 수 (기본값: 60)

    Returns:
        np.ndarray: (N, 2) 위치 배열
    """
    if samples is None:
        samples = frame_count(mode.duration, fps)
    grid = progress_grid(samples)
    return np.array([mode.get_pos(float(p), width, height) for p in grid], dtype=float)


def path_bounds(path: np.ndarray) -> Tuple[float, float, float, float]:
    """샘플링된 경로의 (min_x, min_y, max_x, max_y)"""
    mins = path.min(axis=0)
    maxs = path.max(axis=0)
    return float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1])
