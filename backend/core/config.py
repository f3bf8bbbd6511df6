"""백엔드 서버 설정."""
from __future__ import annotations

from pathlib import Path
from typing import Tuple

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """애플리케이션 설정 - 라즈베리파이 4 & 7inch 디스플레이 기준."""

    # ===== 서버 설정 =====
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False
    log_level: str = "info"

    # ===== 디스플레이 설정 (7inch 800x480) =====
    # 요청에 화면 크기가 없을 때 사용하는 기본 해상도
    screen_width: int = 800
    screen_height: int = 480

    # ===== 경로 샘플링 설정 =====
    default_fps: int = 60
    # 20초 모드 * 60fps = 1200 프레임, 여유 포함
    max_path_samples: int = 5000

    # ===== CORS 설정 =====
    cors_origins: list[str] = [
        "http://localhost:3000",        # 개발용
        "http://localhost:5173",        # 개발용 (Vite)
        "http://localhost",             # 직접 접근
        "http://127.0.0.1:3000",        # 루프백
        "http://127.0.0.1:5173",        # 루프백 (Vite)
        "http://raspberrypi.local:3000", # 라즈베리파이 (mDNS)
        "http://raspberrypi.local:5173", # 라즈베리파이 (mDNS, Vite)
    ]

    @property
    def screen_size(self) -> Tuple[int, int]:
        """화면 크기를 튜플로 반환합니다."""
        return (self.screen_width, self.screen_height)

    class Config:
        """Pydantic 설정."""
        # 프로젝트 루트의 .env 파일 로드
        env_file = str(Path(__file__).parent.parent.parent / ".env")
        env_file_encoding = "utf-8"


settings = Settings()
