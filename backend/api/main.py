"""FastAPI 애플리케이션."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.core.config import settings
from backend.api import modes
from stimulus import __version__
from stimulus.modes import AVAILABLE_MODES

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """서버 시작 및 종료 이벤트."""
    logger.info(f"[Backend] GazeHome 자극 서버 시작: {settings.host}:{settings.port}")
    logger.info(f"[Backend] 등록된 모드: {', '.join(sorted(AVAILABLE_MODES))}")
    yield
    logger.info("[Backend] 종료 중...")


# FastAPI 앱 생성
app = FastAPI(
    title="GazeHome 시선 자극 API",
    description="시선 추적 과제용 목표 궤적 제공",
    version=__version__,
    lifespan=lifespan,
)

# CORS 미들웨어
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 포함
app.include_router(modes.router, prefix="/api/modes", tags=["Modes"])


@app.get("/")
async def root():
    """루트 엔드포인트."""
    return {
        "app": "GazeHome 시선 자극",
        "version": __version__,
        "status": "실행 중",
    }


@app.get("/health")
async def health():
    """헬스 체크 엔드포인트."""
    return {"status": "건강함", "modes": len(AVAILABLE_MODES)}
