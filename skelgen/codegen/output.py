# skelgen/codegen/output.py
"""Bison 스켈레톤 출력기 (템플릿 실행 + 자리표시자 해석).

개요
----
- AnalysisContext / Grammar 를 받아 스켈레톤(yacc.c, yacc.h)을 Jinja2로 실행한다.
- 스켈레톤에는 정확히 두 변수만 바인딩한다.
  * `context`: AnalysisContext (테이블/상수)
  * `output` : 이 Output 객체 (tables/enums/predicates/actions 서비스 메서드)
- render()는 두 단계로 진행된다.
  1) 실행: 템플릿 → `[@oline@]`, `[@ofile@]` 가 남아 있는 원시 텍스트
  2) 해석: fixup.replace_special_variables()로 줄 번호/파일명을 채움
- 본문과 헤더는 각자의 출력 경로로 따로 해석한다(줄 번호 체계가 다름).
- 두 텍스트를 **모두 만든 뒤에** 싱크에 쓴다. 도중에 실패하면 아무것도 쓰지 않는다.

스켈레톤에서의 사용 예
----------------------
    static const {{ output.int_type_for(context.yytranslate) }} yytranslate[] =
    {
    {{ output.yytranslate() }}
    };
"""

from __future__ import annotations
import logging
import os
import regex as re
from pathlib import Path
from typing import Optional, Sequence, TextIO, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..config import OutputConfig
from ..grammar.ast import Grammar
from ..grammar.code import Code
from ..lalr.table import AnalysisContext
from .. import report
from ..report import DurationHook
from . import actions, enums, predicates, tables
from .fixup import replace_special_variables

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

# 템플릿에서 output.xxx 로 바로 읽을 수 있는 값
_CONTEXT_DELEGATES = frozenset({
    "yyfinal", "yylast", "yyntokens", "yynnts", "yynrules", "yynstates",
    "yymaxutok", "yypact_ninf", "yytable_ninf",
})
_GRAMMAR_DELEGATES = frozenset({
    "eof_symbol", "error_symbol", "undef_symbol", "accept_symbol",
})

_GUARD_RE = re.compile(r"[^a-zA-Z_0-9]+")
_PARAM_NAME_RE = re.compile(r"\b([a-zA-Z0-9_]+)\s*$")


def make_environment(config: OutputConfig) -> Environment:
    """스켈레톤 실행용 Jinja2 환경. `c_string` 필터로 C 문자열 이스케이프."""
    env = Environment(
        loader=FileSystemLoader(str(config.template_dir)),
        undefined=StrictUndefined,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["c_string"] = tables.escape_c
    return env


class Output:
    def __init__(self, *,
                 out: TextIO,
                 output_file_path: PathLike,
                 template_name: str,
                 grammar_file_path: PathLike,
                 context: AnalysisContext,
                 grammar: Grammar,
                 header_out: Optional[TextIO] = None,
                 header_file_path: Optional[PathLike] = None,
                 config: Optional[OutputConfig] = None,
                 report_duration: Optional[DurationHook] = None):
        self.config = config or OutputConfig.default()
        if header_file_path and header_out is None and not self.config.open_header_file:
            raise ValueError(
                f"output: header_file_path={os.fspath(header_file_path)!r} is set "
                "but no header_out was given and opening the header file is disabled"
            )

        self.out = out
        self.output_file_path = os.fspath(output_file_path)
        self.template_name = template_name
        self.grammar_file_path = os.fspath(grammar_file_path)
        self.header_out = header_out
        self.header_file_path = os.fspath(header_file_path) if header_file_path else None
        self.context = context
        self.grammar = grammar
        self._report_duration = report_duration
        self._env = make_environment(self.config)

    def __getattr__(self, name: str):
        if name in _CONTEXT_DELEGATES:
            return getattr(self.context, name)
        if name in _GRAMMAR_DELEGATES:
            return getattr(self.grammar, name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    # ---------- 렌더링 ----------

    def render(self) -> None:
        with report.report_duration("render", self._report_duration):
            body = self._render_template(self.template_name, self.output_file_path)

            header = None
            if self.header_file_path:
                header = self._render_template(self.config.header_template_name,
                                               self.header_file_path)

            if header is None:
                self.out.write(body)
            elif self.header_out is not None:
                self.out.write(body)
                self.header_out.write(header)
            else:
                # 헤더 파일이 열리지 않으면 본문도 쓰지 않는다
                with open(self.header_file_path, "w", encoding="utf-8") as f:
                    self.out.write(body)
                    f.write(header)

    def _render_template(self, name: str, ofile: str) -> str:
        template = self._env.get_template(name)
        raw = template.render(context=self.context, output=self)
        text = replace_special_variables(raw, ofile)
        logger.debug("rendered %s -> %s (%d lines)", name, ofile, text.count("\n"))
        return text

    # ---------- 열거형 ----------

    def token_enums(self) -> str:
        return enums.token_enums(self.context)

    def symbol_enum(self) -> str:
        return enums.symbol_enum(self.context)

    # ---------- 테이블 ----------

    def yytranslate(self) -> str:
        return tables.int_array_to_string(self.context.yytranslate)

    def yyrline(self) -> str:
        return tables.int_array_to_string(self.context.yyrline)

    def yytname(self) -> str:
        return tables.string_array_to_string(self.context.yytname) + " YY_NULLPTR"

    def int_type_for(self, ary: Sequence[int]) -> str:
        return tables.int_type_for(ary)

    def int_array_to_string(self, ary: Sequence[int]) -> str:
        return tables.int_array_to_string(ary)

    def table_value_equals(self, table, value: str, literal: int, symbol: str) -> str:
        return predicates.table_value_equals(table, value, literal, symbol)

    # ---------- 사용자 코드 ----------

    def user_actions(self) -> str:
        return actions.user_actions(self.context.rules, self.grammar_file_path)

    def symbol_actions_for_printer(self) -> str:
        return actions.symbol_actions_for_printer(self.grammar.symbols, self.grammar_file_path)

    def parse_param(self) -> str:
        """%parse-param 선언에서 바깥 중괄호를 뗀 것."""
        if not self.grammar.parse_param:
            return ""
        return self.grammar.parse_param[1:-1]

    def parse_param_name(self) -> str:
        """"{int *result}" → "result" (선언의 마지막 식별자)."""
        m = _PARAM_NAME_RE.search(self.parse_param())
        return m.group(1) if m else ""

    def user_formals(self) -> str:
        if self.grammar.parse_param:
            return f", {self.parse_param()}"
        return ""

    def user_args(self) -> str:
        if self.grammar.parse_param:
            return f", {self.parse_param_name()}"
        return ""

    def aux(self) -> Optional[Code]:
        return self.grammar.aux

    # ---------- 파일명 ----------

    def template_basename(self) -> str:
        return Path(self.template_name).name

    def spec_mapped_header_file(self) -> Optional[str]:
        return self.header_file_path

    def b4_cpp_guard__b4_spec_mapped_header_file(self) -> str:
        if not self.header_file_path:
            return ""
        return "YY_YY_" + _GUARD_RE.sub("_", self.header_file_path).upper() + "_INCLUDED"
