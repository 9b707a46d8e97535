# skelgen/lalr/table.py
"""
분석 결과(AnalysisContext) 컨테이너.

LALR 오토마톤 구성/충돌 해결/테이블 압축은 상류 단계의 책임이다.
이 모듈은 그 결과를 **읽기 전용**으로 묶어서 출력 단계(codegen.output)에 넘긴다.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..grammar.ast import Rule

# (enum 이름, 번호, 표시 이름|None)
EnumEntry = Tuple[str, int, Optional[str]]


@dataclass(frozen=True)
class AnalysisContext:
    """
    AnalysisContext
    ===============
    Bison 스켈레톤(yacc.c)이 요구하는 상수/테이블 묶음.

    크기 상수
    ---------
    - yyfinal     : 수용(accept) 상태 번호
    - yylast      : yytable/yycheck의 마지막 인덱스
    - yyntokens   : 단말 개수
    - yynnts      : 비단말 개수
    - yynrules    : 규칙 개수
    - yynstates   : 상태 개수
    - yymaxutok   : 사용자 토큰 번호의 최댓값 (token enum의 마지막 값)
    - yypact_ninf : yypact의 "기본 축약" 표시값
    - yytable_ninf: yytable의 "오류" 표시값

    열거형
    ------
    - yytokentype    : [(이름, 번호, 표시이름|None)], 번호 오름차순
    - yysymbol_kind_t: 같은 형태, 비단말까지 포함하는 상위 집합

    테이블
    ------
    - yytranslate, yyrline, yytname, yypact, yydefact, yypgoto, yydefgoto,
      yytable, yycheck, yystos, yyr1, yyr2
    - rules: 규칙 목록 (id 오름차순). 액션 코드 임베딩에 사용
    """
    yyfinal: int
    yylast: int
    yyntokens: int
    yynnts: int
    yynrules: int
    yynstates: int
    yymaxutok: int
    yypact_ninf: int
    yytable_ninf: int

    yytokentype: List[EnumEntry] = field(default_factory=list)
    yysymbol_kind_t: List[EnumEntry] = field(default_factory=list)
    rules: List[Rule] = field(default_factory=list)

    yytranslate: List[int] = field(default_factory=list)
    yyrline: List[int] = field(default_factory=list)
    yytname: List[str] = field(default_factory=list)
    yypact: List[int] = field(default_factory=list)
    yydefact: List[int] = field(default_factory=list)
    yypgoto: List[int] = field(default_factory=list)
    yydefgoto: List[int] = field(default_factory=list)
    yytable: List[int] = field(default_factory=list)
    yycheck: List[int] = field(default_factory=list)
    yystos: List[int] = field(default_factory=list)
    yyr1: List[int] = field(default_factory=list)
    yyr2: List[int] = field(default_factory=list)
