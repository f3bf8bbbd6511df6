"""
자극 모드 기본 타입

모든 궤적 모드가 공유하는 위치(Point)와 모드(TrajectoryMode) 정의
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, NamedTuple

from stimulus.sampling import progress_from_elapsed


class Point(NamedTuple):
    """화면 좌표 (픽셀 단위)"""

    x: float
    y: float


# (진행률, 화면 너비, 화면 높이) -> 목표 위치
PositionFn = Callable[[float, float, float], Point]


@dataclass(frozen=True)
class TrajectoryMode:
    """
    시선 추적 과제 하나의 정의

    모듈 임포트 시 한 번 생성되어 레지스트리에 등록되며 이후 변경되지 않습니다.

    Attributes:
        key (str): 레지스트리 키 (예: "horizontal")
        name (str): 화면에 표시할 이름
        duration (int): 전체 진행 시간 (밀리초)
        get_pos (PositionFn): 진행률(0.0 ~ 1.0)과 화면 크기로 목표 위치를 계산하는 순수 함수
    """

    key: str
    name: str
    duration: int
    get_pos: PositionFn

    def position_at(self, elapsed_ms: float, width: float, height: float) -> Point:
        """
        경과 시간으로 목표 위치를 계산합니다.

        진행률은 [0, 1] 범위로 고정되므로 duration이 지난 뒤에는 마지막 위치를 반환합니다.

        Args:
            elapsed_ms (float): 모드 시작 후 경과 시간 (밀리초)
            width (float): 화면 너비 (픽셀)
            height (float): 화면 높이 (픽셀)

        Returns:
            Point: 목표 위치
        """
        return self.get_pos(progress_from_elapsed(elapsed_ms, self.duration), width, height)

    def is_finished(self, elapsed_ms: float) -> bool:
        """경과 시간이 duration 이상이면 True"""
        return elapsed_ms >= self.duration

    def describe(self) -> dict:
        """API 응답용 요약 (get_pos 제외)"""
        return {"key": self.key, "name": self.name, "duration": self.duration}
