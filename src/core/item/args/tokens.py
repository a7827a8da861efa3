"""토큰 공용 유틸"""

import re
from typing import Optional

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

# 호스트 정수 범위 (32비트 signed)
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_MAX_DIGITS = 10


def parse_int(token: str) -> Optional[int]:
    """10진 정수 토큰만 허용. 그 외 None.

    int()와 달리 공백, 밑줄, 비ASCII 숫자를 거부한다.
    32비트 범위를 벗어나면 정수가 아닌 것으로 본다.
    """
    if not _INT_PATTERN.fullmatch(token):
        return None
    if len(token.lstrip("+-").lstrip("0")) > _MAX_DIGITS:
        return None
    value = int(token)
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value
