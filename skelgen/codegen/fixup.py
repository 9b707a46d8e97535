# skelgen/codegen/fixup.py
"""자리표시자 해석 단계 (render 2단계).

템플릿 실행 결과에는 아직 값이 정해지지 않은 두 종류의 자리표시자가 남아 있다.

- `[@oline@]` : "다음 줄 번호". 이 자리표시자가 놓인 물리적 줄 번호(1-based) + 1
- `[@ofile@]` : 생성 파일 경로. 큰따옴표로 감싼 출력 경로

줄 번호는 전체 텍스트가 조립된 뒤에야 확정되므로, 줄 단위로 토큰화한 다음
자리표시자 토큰만 값으로 바꾼다. 본문(.c)과 헤더(.h)는 서로 다른 파일이므로
각각 자기 출력 경로로 따로 해석해야 한다.

주의: 한 줄 안에서 자리표시자의 위치(열)는 고려하지 않는다.
      같은 줄의 `[@oline@]` 는 모두 같은 값이 된다.
"""

from __future__ import annotations
import enum
import regex as re
from typing import List, Union

from .tables import escape_c

OLINE = "[@oline@]"
OFILE = "[@ofile@]"


class Placeholder(enum.Enum):
    OLINE = "oline"
    OFILE = "ofile"


_PLACEHOLDER_RE = re.compile(r"\[@(?P<name>oline|ofile)@\]")

Token = Union[str, Placeholder]


def tokenize_line(line: str) -> List[Token]:
    """한 줄을 리터럴 문자열과 Placeholder 토큰의 리스트로 나눈다."""
    toks: List[Token] = []
    pos = 0
    for m in _PLACEHOLDER_RE.finditer(line):
        if m.start() > pos:
            toks.append(line[pos:m.start()])
        toks.append(Placeholder(m.group("name")))
        pos = m.end()
    if pos < len(line):
        toks.append(line[pos:])
    return toks


def resolve_tokens(toks: List[Token], lineno: int, ofile: str) -> str:
    """토큰 리스트를 다시 문자열로. lineno는 해당 줄의 1-based 번호."""
    parts = []
    for t in toks:
        if t is Placeholder.OLINE:
            parts.append(str(lineno + 1))
        elif t is Placeholder.OFILE:
            parts.append(f'"{escape_c(ofile)}"')
        else:
            parts.append(t)
    return "".join(parts)


def replace_special_variables(text: str, ofile: str) -> str:
    """
    텍스트 전체의 자리표시자를 해석한다.

    Parameters
    ----------
    text : str
        템플릿 실행 결과(자리표시자 포함).
    ofile : str
        이 텍스트가 기록될 출력 파일 경로.
    """
    # splitlines()는 \f, \v 등에서도 끊으므로 쓰지 않는다 (C 코드에 \f가 올 수 있음)
    return "\n".join(
        resolve_tokens(tokenize_line(line), i, ofile)
        for i, line in enumerate(text.split("\n"), 1)
    )
