# skelgen/codegen/actions.py
"""사용자 코드 임베딩 (b4_user_actions / %printer 케이스).

문법 파일의 액션/프린터 코드를 `switch` 의 `case` 로 끼워 넣는다.

    case 3: /* expr: expr '+' term  */
  #line 27 "calc.y"
                  { (yyval) = (yyvsp[-2]) + (yyvsp[0]); }
  #line [@oline@] [@ofile@]
      break;

- 첫 번째 `#line` 은 원본 문법 파일 위치를 가리킨다(디버거가 .y 로 이동).
- 두 번째 `#line` 은 **생성 파일** 위치로 되돌리는 지시문인데, 임베딩 때문에
  줄 번호가 밀리므로 이 시점에는 알 수 없다. 따라서 자리표시자
  `[@oline@]`, `[@ofile@]` 를 남겨 두고 fixup 단계에서 채운다.
- 코드 첫 줄 앞에는 `column - 1` 칸의 공백을 넣어 원래 들여쓰기를 복원한다.
  (두 번째 줄부터는 원문에 들여쓰기가 그대로 남아 있다.)
"""

from __future__ import annotations
from typing import Iterable

from ..grammar.ast import Rule, Symbol
from .fixup import OFILE, OLINE
from .tables import escape_c

RESTORE_LINE = f"#line {OLINE} {OFILE}\n"


def _indent_for(column: int) -> str:
    return " " * (column - 1)


def user_actions(rules: Iterable[Rule], grammar_file_path: str) -> str:
    """
    액션 코드가 있는 규칙마다 `case (id+1):` 블록을 만든다.

    액션이 없는 규칙은 건너뛴다. 마지막에는 항상 생성 파일 위치 복원용
    `#line` 을 붙이므로, 액션이 하나도 없어도 결과는 빈 문자열이 아니다.
    """
    path = escape_c(grammar_file_path)
    out = []
    for rule in sorted(rules, key=lambda r: r.id):
        code = rule.code
        if code is None:
            continue
        out.append(
            f"  case {rule.id + 1}: /* {rule.as_comment}  */\n"
            f"#line {code.line} \"{path}\"\n"
            f"{_indent_for(code.column)}{rule.translated_code()}\n"
            f"{RESTORE_LINE}"
            f"    break;\n"
            f"\n"
        )
    out.append("\n" + RESTORE_LINE)
    return "".join(out)


def symbol_actions_for_printer(symbols: Iterable[Symbol], grammar_file_path: str) -> str:
    """%printer 코드가 있는 심볼마다 `case YYSYMBOL_xxx:` 블록을 만든다 (선언 순서)."""
    path = escape_c(grammar_file_path)
    out = []
    for sym in symbols:
        printer = sym.printer
        if printer is None:
            continue
        out.append(
            f"    case {sym.enum_name}: /* {sym.display_name}  */\n"
            f"#line {printer.line} \"{path}\"\n"
            f"{_indent_for(printer.column)}{printer.translated_code(sym.tag)}\n"
            f"{RESTORE_LINE}"
            f"        break;\n"
            f"\n"
        )
    return "".join(out)
