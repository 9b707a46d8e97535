# skelgen/codegen/enums.py
"""열거형(enum yytokentype / enum yysymbol_kind_t) 본문 생성."""

from __future__ import annotations
from typing import Optional, Sequence, Tuple

from ..lalr.table import AnalysisContext

TOKEN_ENUM_WIDTH, TOKEN_ENUM_INDENT = 30, "    "
SYMBOL_ENUM_WIDTH, SYMBOL_ENUM_INDENT = 40, "  "


def render_enum(entries: Sequence[Tuple[str, int, Optional[str]]],
                max_id: int, width: int, indent: str) -> str:
    """
    (이름, 번호, 주석|None) 목록을 `NAME = ID,` 줄들로 만든다.

    - 번호가 max_id인 항목만 끝 쉼표를 생략한다.
    - 주석이 있으면 대입문을 width칸으로 왼쪽 정렬한 뒤 `/* 주석  */`을 붙인다.
    """
    out = []
    for name, number, comment in entries:
        s = "%s = %d%s" % (name, number, "" if number == max_id else ",")
        if comment is not None:
            out.append("%s%-*s /* %s  */\n" % (indent, width, s, comment))
        else:
            out.append(f"{indent}{s}\n")
    return "".join(out)


def token_enums(context: AnalysisContext) -> str:
    """b4_token_enums 일부: 마지막 쉼표 기준은 yymaxutok."""
    return render_enum(context.yytokentype, context.yymaxutok,
                       TOKEN_ENUM_WIDTH, TOKEN_ENUM_INDENT)


def symbol_enum(context: AnalysisContext) -> str:
    """b4_symbol_enum: 마지막 쉼표 기준은 표의 마지막 항목 번호."""
    if not context.yysymbol_kind_t:
        return ""
    last = context.yysymbol_kind_t[-1][1]
    return render_enum(context.yysymbol_kind_t, last,
                       SYMBOL_ENUM_WIDTH, SYMBOL_ENUM_INDENT)
