"""옵션 ID 생성 유틸리티 모듈.

Option ID generation utility module.
IDs combine the option type prefix, a millisecond timestamp and a random
number, e.g. ``COUNTRY_OPT_20250724120830123_4821937``.
"""

import random
from datetime import datetime

# 난수 범위 — Random suffix range, upper bound exclusive
_RANDOM_MIN: int = 1
_RANDOM_MAX: int = 10_000_000


def timestamp_token(now: datetime | None = None) -> str:
    """현재 시각을 밀리초 단위 숫자 문자열로 변환합니다.

    Format a datetime as ``yyyyMMddHHmmssSSS`` (e.g. 20250724120830123).

    Args:
        now: 기준 시각, None이면 현재 로컬 시각 (Reference time, default: local now)

    Returns:
        str: 17자리 타임스탬프 (17-digit timestamp)
    """
    now = now or datetime.now()
    return now.strftime("%Y%m%d%H%M%S") + f"{now.microsecond // 1000:03d}"


def generate_option_id(prefix: str, now: datetime | None = None) -> str:
    """옵션 유형 접두사로 새 ID를 생성합니다.

    Generate a new option id for the given catalog prefix.

    Args:
        prefix: 옵션 유형 접두사 (Option type prefix, e.g. "COUNTRY_OPT")
        now: 기준 시각 (Reference time, mainly for tests)

    Returns:
        str: "<prefix>_<timestamp>_<random>" 형식의 ID
    """
    suffix: int = random.randrange(_RANDOM_MIN, _RANDOM_MAX)
    return f"{prefix}_{timestamp_token(now)}_{suffix}"
