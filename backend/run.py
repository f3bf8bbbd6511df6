#!/usr/bin/env python3
"""GazeHome 자극 서버를 실행합니다."""
import logging
from pathlib import Path

import uvicorn

from backend.core.config import settings

project_root = Path(__file__).parent.parent


def main() -> None:
    """설정을 출력하고 uvicorn으로 API 서버를 실행합니다."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    env_file = project_root / ".env"
    if not env_file.exists():
        print(f"⚠️  Warning: .env file not found at {env_file}")
        print("ℹ️  Using default configuration...")

    print(f"""
╔══════════════════════════════════════════╗
║   GazeHome 시선 자극 서버                ║
╚══════════════════════════════════════════╝

서버: http://{settings.host}:{settings.port}
API 문서: http://{settings.host}:{settings.port}/docs

설정:
  - 기본 화면 해상도: {settings.screen_width}x{settings.screen_height}
  - 기본 FPS: {settings.default_fps}

중지하려면 Ctrl+C를 누르세요
""")

    uvicorn.run(
        "backend.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
