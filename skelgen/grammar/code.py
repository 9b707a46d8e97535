# skelgen/grammar/code.py
"""사용자 코드 블록(Code)

문법 파일에 적힌 `{ ... }` 액션/프린터 코드를 **원문 그대로** 보관한다.

- text  : 중괄호 내부 원문
- line  : 원본 문법 파일에서의 시작 줄(1-based)
- column: 원본 문법 파일에서의 시작 칸(1-based). 출력 시 들여쓰기 복원에 사용
- kind  : "action"(규칙 축약 시 실행) | "printer"(%printer, 값 표시용)

참조 치환
---------
`translated_code()`는 `$$`, `$n`, `$<tag>$`, `$<tag>n`, `@$`, `@n` 참조를
스켈레톤(yacc.c)의 스택 표현식으로 바꾼 문자열을 돌려준다.

  * action : `$$` → `(yyval)`,        `$n` → `(yyvsp[n - len(rhs)])`
             `@$` → `(yyloc)`,        `@n` → `(yylsp[n - len(rhs)])`
  * printer: `$$` → `(*yyvaluep)`,    `@$` → `(*yylocationp)`

태그가 있으면 값 참조 뒤에 `.tag`를 붙인다 (예: `(yyval.ival)`).
"""

from __future__ import annotations
import regex as re
from dataclasses import dataclass
from typing import Optional, Sequence

ACTION, PRINTER = "action", "printer"

# $$ / $3 / $-1 / $<tag>$ / $<tag>2 / @$ / @1
_REF_RE = re.compile(
    r"(?P<sigil>[$@])(?:<(?P<tag>[A-Za-z_][A-Za-z0-9_.]*)>)?(?P<ref>\$|-?[0-9]+)"
)


@dataclass(frozen=True)
class Code:
    text: str
    line: int
    column: int = 1
    kind: str = ACTION

    def __post_init__(self) -> None:
        if self.line < 1 or self.column < 1:
            raise ValueError(
                f"code: line/column must be >= 1 (line={self.line}, column={self.column})"
            )
        if self.kind not in (ACTION, PRINTER):
            raise ValueError(f"code: unknown kind {self.kind!r}")

    def translated_code(self, tag: Optional[str] = None, rhs_tags: Sequence[Optional[str]] = ()) -> str:
        """
        참조를 치환한 코드 문자열을 반환한다.

        Parameters
        ----------
        tag : Optional[str]
            `$$`의 의미값 타입 태그(action이면 좌변, printer면 해당 심볼의 태그).
        rhs_tags : Sequence[Optional[str]]
            우변 심볼 태그 목록. 길이가 곧 우변 길이이며 `$n` 오프셋 계산에 쓰인다.
            printer 코드에서는 무시된다.
        """
        if self.kind == PRINTER:
            return _REF_RE.sub(lambda m: self._printer_ref(m, tag), self.text)
        return _REF_RE.sub(lambda m: self._action_ref(m, tag, rhs_tags), self.text)

    # ---- 내부 ----
    def _printer_ref(self, m, tag: Optional[str]) -> str:
        if m.group("ref") != "$":
            raise ValueError(
                f"code: positional reference {m.group(0)!r} is not allowed in %printer "
                f"(line {self.line})"
            )
        if m.group("sigil") == "@":
            return "(*yylocationp)"
        return _value_ref("*yyvaluep", m.group("tag") or tag)

    def _action_ref(self, m, lhs_tag: Optional[str], rhs_tags: Sequence[Optional[str]]) -> str:
        ref = m.group("ref")
        if m.group("sigil") == "@":
            if ref == "$":
                return "(yyloc)"
            return f"(yylsp[{int(ref) - len(rhs_tags)}])"

        if ref == "$":
            return _value_ref("yyval", m.group("tag") or lhs_tag)

        n = int(ref)
        tag = m.group("tag")
        if tag is None and 1 <= n <= len(rhs_tags):
            tag = rhs_tags[n - 1]
        return _value_ref(f"yyvsp[{n - len(rhs_tags)}]", tag)


def _value_ref(base: str, tag: Optional[str]) -> str:
    # yyval + ival -> (yyval.ival),  *yyvaluep + ival -> ((*yyvaluep).ival)
    if not tag:
        return f"({base})"
    if base.startswith("*"):
        return f"(({base}).{tag})"
    return f"({base}.{tag})"
