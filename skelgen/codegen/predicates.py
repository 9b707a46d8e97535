# skelgen/codegen/predicates.py
"""테이블 값 비교식 생성 (b4_table_value_equals).

생성된 파서는 "이 테이블 칸에 특정 심볼 값이 들어올 수 있는가?"를 검사한다.
literal이 테이블 값 범위 밖이면 비교는 항상 거짓이므로 상수 "0"을 내보내
C 컴파일러가 해당 분기를 접어 버릴 수 있게 한다(기본 축약 단축 경로).
"""

from __future__ import annotations
from typing import Any, Mapping, Tuple


def _bounds(table: Any) -> Tuple[int, int]:
    """정수 시퀀스, {"min":..,"max":..} 매핑, min/max 속성(메서드)을 가진 객체에서 범위를 얻는다."""
    if isinstance(table, Mapping):
        if "min" not in table or "max" not in table:
            raise ValueError("predicates: table_value_equals() needs both 'min' and 'max'")
        return table["min"], table["max"]
    if hasattr(table, "min") and hasattr(table, "max"):
        lo, hi = table.min, table.max
        return (lo() if callable(lo) else lo), (hi() if callable(hi) else hi)
    if not table:
        raise ValueError("predicates: table_value_equals() needs a non-empty table")
    return min(table), max(table)


def table_value_equals(table: Any, value: str, literal: int, symbol: str) -> str:
    """
    literal ∉ [min, max] 이면 "0", 아니면 "((value) == symbol)".

    예) table_value_equals(yypact, "yyn", -8, "YYPACT_NINF")
        → "((yyn) == YYPACT_NINF)"
    """
    lo, hi = _bounds(table)
    if literal < lo or hi < literal:
        return "0"
    return f"(({value}) == {symbol})"
