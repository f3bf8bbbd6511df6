"""시선 추적 자극 모드 조회 REST API 엔드포인트."""
from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from backend.core.config import settings
from stimulus.modes import TrajectoryMode, get_mode, list_modes
from stimulus.sampling import frame_count, sample_path

logger = logging.getLogger(__name__)
router = APIRouter()


class ModeInfo(BaseModel):
    """모드 요약 정보."""
    key: str
    name: str
    duration: int = Field(description="전체 진행 시간 (밀리초)")


class PointResponse(BaseModel):
    """화면 좌표 (픽셀)."""
    x: float
    y: float


class PositionResponse(BaseModel):
    """특정 진행률에서의 목표 위치."""
    key: str
    progress: float = Field(ge=0.0, le=1.0)
    width: int
    height: int
    point: PointResponse


class PathResponse(BaseModel):
    """미리 계산된 전체 경로."""
    key: str
    width: int
    height: int
    duration: int
    points: List[PointResponse]


def _resolve_mode(key: str) -> TrajectoryMode:
    """키로 모드를 찾고, 없으면 404."""
    try:
        return get_mode(key)
    except ValueError:
        logger.warning(f"[Modes] 알 수 없는 모드 요청: {key}")
        raise HTTPException(status_code=404, detail=f"모드 {key}을 찾을 수 없습니다") from None


def _viewport(width: Optional[int], height: Optional[int]) -> tuple[int, int]:
    """요청 화면 크기, 없으면 설정의 기본 화면 크기."""
    default_w, default_h = settings.screen_size
    return (width or default_w, height or default_h)


@router.get("", response_model=List[ModeInfo])
async def get_modes():
    """기능: 등록된 모든 모드 조회.

    args: 없음
    return: 모드 목록 (key, name, duration)
    """
    return [ModeInfo(**mode.describe()) for mode in list_modes()]


@router.get("/{key}", response_model=ModeInfo)
async def get_mode_info(key: str):
    """기능: 단일 모드 조회.

    args: key
    return: 모드 정보, 없으면 404
    """
    return ModeInfo(**_resolve_mode(key).describe())


@router.get("/{key}/position", response_model=PositionResponse)
async def get_position(
    key: str,
    progress: float = Query(..., ge=0.0, le=1.0),
    width: Optional[int] = Query(None, gt=0),
    height: Optional[int] = Query(None, gt=0),
):
    """기능: 진행률에 해당하는 목표 위치 계산.

    args: key, progress (0.0 ~ 1.0), width, height (생략 시 기본 화면 크기)
    return: 목표 위치
    """
    mode = _resolve_mode(key)
    w, h = _viewport(width, height)
    x, y = mode.get_pos(progress, w, h)
    return PositionResponse(
        key=mode.key,
        progress=progress,
        width=w,
        height=h,
        point=PointResponse(x=x, y=y),
    )


@router.get("/{key}/path", response_model=PathResponse)
async def get_path(
    key: str,
    samples: Optional[int] = Query(None, ge=2),
    width: Optional[int] = Query(None, gt=0),
    height: Optional[int] = Query(None, gt=0),
    fps: Optional[int] = Query(None, gt=0),
):
    """기능: 모드의 전체 경로를 프레임 단위로 샘플링.

    args: key, samples (생략 시 duration * fps), width, height, fps
    return: 경로 좌표 목록
    """
    mode = _resolve_mode(key)
    w, h = _viewport(width, height)

    count = samples if samples is not None else frame_count(mode.duration, fps or settings.default_fps)
    if count > settings.max_path_samples:
        raise HTTPException(
            status_code=422,
            detail=f"경로 샘플 수 {count}가 최대값 {settings.max_path_samples}을 초과합니다",
        )

    path = sample_path(mode, w, h, samples=count)

    logger.info(f"[Modes] 경로 샘플링: {mode.key} ({len(path)} points, {w}x{h})")
    return PathResponse(
        key=mode.key,
        width=w,
        height=h,
        duration=mode.duration,
        points=[PointResponse(x=float(x), y=float(y)) for x, y in path],
    )
