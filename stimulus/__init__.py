"""
GazeHome Stimulus - 시선 추적 자극 궤적 라이브러리

이 패키지는 시선 추적 과제에서 피험자가 바라봐야 할 목표 위치를
진행률(0.0 ~ 1.0)과 화면 크기로부터 결정적으로 계산합니다.

주요 기능:
- 모드 레지스트리: horizontal, circular, jump, random
- 샘플링: 진행률 계산, 프레임 단위 경로 샘플링 (numpy)
"""

from ._version import __version__

# 지연 로딩 맵
# 모듈을 실제로 사용할 때만 임포트하여 시작 시간을 단축합니다
_lazy_map = {
    # 모드 레지스트리
    "AVAILABLE_MODES": ("stimulus.modes", "AVAILABLE_MODES"),
    "Point": ("stimulus.modes", "Point"),
    "TrajectoryMode": ("stimulus.modes", "TrajectoryMode"),
    "get_mode": ("stimulus.modes", "get_mode"),
    "list_modes": ("stimulus.modes", "list_modes"),
    # 샘플링 함수들
    "progress_from_elapsed": ("stimulus.sampling", "progress_from_elapsed"),
    "frame_count": ("stimulus.sampling", "frame_count"),
    "sample_path": ("stimulus.sampling", "sample_path"),
}


def __getattr__(name: str):
    """
    요청된 심볼을 지연 로딩합니다.

    Args:
        name (str): 불러올 심볼의 이름

    Returns:
        요청된 심볼 (클래스, 함수, 객체 등)

    Raises:
        AttributeError: 심볼을 찾을 수 없는 경우
    """
    try:
        module_name, symbol = _lazy_map[name]
    except KeyError:
        raise AttributeError(name) from None

    import importlib

    module = importlib.import_module(module_name)
    value = getattr(module, symbol)
    # 글로벌 네임스페이스에 캐싱 (이후 빠른 접근)
    globals()[name] = value
    return value


def __dir__():
    """패키지의 공개 인터페이스 목록을 반환합니다."""
    std_attrs = set(globals()) | {"__getattr__", "__dir__"}
    return sorted(std_attrs | _lazy_map.keys())


# 공개 API 목록
__all__ = list(_lazy_map) + ["__version__"]
