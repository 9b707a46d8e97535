# skelgen/grammar/ast.py
"""Grammar 모델 (출력 단계 입력)

상류(문법 파서/분석기)가 완성해서 넘겨주는 **읽기 전용** 문법 정보.
- Symbol : 단말/비단말 1개 (enum 이름, 주석, 타입 태그, %printer 코드)
- Rule   : 프로덕션 1개 (좌변/우변 심볼, 축약 액션 코드)
- Grammar: 특수 심볼 4종 + 심볼/규칙 목록 + %parse-param, 프롤로그/에필로그
"""

from __future__     import annotations
from dataclasses    import dataclass, field
from typing         import List, Optional

from .code          import Code


@dataclass(frozen=True)
class Symbol:
    """
    심볼 1개.
    - number   : 심볼 번호(yysymbol_kind_t 값)
    - name     : 문법에서의 이름 (예: "NUM", "expr", "\\"+\\"")
    - enum_name: 생성 코드에서의 enum 이름 (예: "YYSYMBOL_NUM")
    - comment  : 사람이 읽는 표시 이름. 없으면 name
    - tag      : %union 멤버 이름(<ival> 등). 없으면 None
    - printer  : %printer 코드 블록
    """
    number: int
    name: str
    enum_name: str
    comment: Optional[str] = None
    tag: Optional[str] = None
    printer: Optional[Code] = None
    term: bool = True

    @property
    def display_name(self) -> str:
        return self.comment if self.comment is not None else self.name


@dataclass(frozen=True)
class Rule:
    """
    규칙(프로덕션) 1개.
    - id  : 0부터 시작. 0번은 증강 규칙($accept: start $end)
    - lhs : 좌변 심볼
    - rhs : 우변 심볼 리스트 (ε는 빈 리스트)
    - code: 축약 시 실행할 액션 코드 (없으면 None)
    """
    id: int
    lhs: Symbol
    rhs: List[Symbol] = field(default_factory=list)
    code: Optional[Code] = None
    comment: Optional[str] = None

    @property
    def as_comment(self) -> str:
        if self.comment is not None:
            return self.comment
        r = " ".join(s.name for s in self.rhs) if self.rhs else "%empty"
        return f"{self.lhs.name}: {r}"

    def translated_code(self) -> str:
        """$$/$n 참조를 yyval/yyvsp로 치환한 액션 코드."""
        if self.code is None:
            return ""
        return self.code.translated_code(self.lhs.tag, [s.tag for s in self.rhs])


@dataclass(frozen=True)
class Grammar:
    # 특수 심볼
    eof_symbol: Symbol
    error_symbol: Symbol
    undef_symbol: Symbol
    accept_symbol: Symbol

    # 선언 순서 그대로
    symbols: List[Symbol] = field(default_factory=list)
    rules: List[Rule] = field(default_factory=list)

    # %parse-param {int *result}  → 중괄호 포함 원문
    parse_param: Optional[str] = None

    # %{ ... %} 프롤로그 / %union 본문 / %% 이후 에필로그
    prologue: Optional[Code] = None
    union_code: Optional[Code] = None
    aux: Optional[Code] = None

    # %locations
    locations: bool = False
