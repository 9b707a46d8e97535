# skelgen/codegen/tables.py
"""테이블 직렬화 (정수/문자열 배열 → C 배열 리터럴 본문).

개요
----
- `int_type_for()`  : 값 범위를 모두 담을 수 있는 **가장 좁은** 정수 타입 이름
- `int_array_to_string()`  : `%6d` 고정폭, 한 줄에 10개, 줄머리 공백 2칸
- `string_array_to_string()` : 이스케이프 + 75칸 그리디 줄바꿈

출력 형식은 Bison이 만드는 yacc.c와 **바이트 단위로 동일**해야 한다.
(생성물 diff 비교가 가능하도록 줄 나눔 규칙까지 맞춘다.)
"""

from __future__ import annotations
from typing import List, Sequence

# (타입 이름, 최솟값, 최댓값): 위에서부터 차례로 시도
INT_TYPES = [
    ("yytype_int8",   -127,   127),
    ("yytype_uint8",     0,   255),
    ("yytype_int16", -32767, 32767),
    ("yytype_uint16",    0, 65535),
]
FALLBACK_INT_TYPE = "int"

INTS_PER_LINE = 10
STRING_LINE_MAX = 75


def int_type_for(ary: Sequence[int]) -> str:
    """b4_int_type_for: 배열의 min/max가 모두 들어가는 가장 좁은 타입."""
    if not ary:
        raise ValueError("tables: int_type_for() needs a non-empty table")
    lo, hi = min(ary), max(ary)
    for name, tmin, tmax in INT_TYPES:
        if tmin <= lo <= tmax and tmin <= hi <= tmax:
            return name
    return FALLBACK_INT_TYPE


def int_array_to_string(ary: Sequence[int]) -> str:
    """
    정수 리스트를 C 배열 본문으로 직렬화한다.

    예) [0, 1, 2] -> "       0,     1,     2"

    타입 폭(int_type_for)과 무관하게 항상 같은 모양으로 찍는다.
    """
    last = len(ary) - 1
    lines: List[str] = []
    for start in range(0, len(ary), INTS_PER_LINE):
        line = "  "
        for i in range(start, min(start + INTS_PER_LINE, len(ary))):
            line += "%6d%s" % (ary[i], "" if i == last else ",")
        lines.append(line)
    return "\n".join(lines)


def escape_c(s: str) -> str:
    """C 문자열 리터럴 이스케이프 (역슬래시, 큰따옴표)."""
    return s.replace("\\", "\\\\").replace('"', '\\"')


def string_array_to_string(ary: Sequence[str]) -> str:
    """
    문자열 리스트를 `"a", "b", ...` 형태로 직렬화한다.

    줄바꿈 규칙(그리디)
    ------------------
    - 현재 줄은 공백 1칸으로 시작한다.
    - `현재 줄 + s + ' "",'` 길이가 75를 넘으면 현재 줄을 내보내고
      `  "s",` 로 새 줄을 시작한다. 아니면 ` "s",` 를 덧붙인다.
    - 마지막 줄은 개행 없이 끝난다. (종결자 YY_NULLPTR는 호출 측에서 붙임)
    """
    out = ""
    tmp = " "
    for s in ary:
        s = escape_c(s)
        if len(tmp + s + ' "",') > STRING_LINE_MAX:
            out += tmp + "\n"
            tmp = f'  "{s}",'
        else:
            tmp += f' "{s}",'
    return out + tmp
