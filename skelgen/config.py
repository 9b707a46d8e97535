# skelgen/config.py
"""출력 단계 설정.

템플릿 디렉터리는 설치 경로에서 암묵적으로 찾지 않고, OutputConfig로
**명시적으로** 넘긴다. 번들 스켈레톤을 쓰려면 `OutputConfig.default()`.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

HEADER_TEMPLATE_NAME = "bison/yacc.h"


def default_template_dir() -> Path:
    """패키지에 포함된 스켈레톤 디렉터리 (skelgen/template)."""
    return Path(__file__).resolve().parent / "template"


@dataclass(frozen=True)
class OutputConfig:
    """
    - template_dir        : 스켈레톤 루트 디렉터리
    - header_template_name: 헤더 스켈레톤 이름 (template_dir 기준 상대 경로)
    - open_header_file    : header_out 없이 header_file_path만 있을 때
                            해당 경로에 파일을 새로 만들어도 되는지
    """
    template_dir: Path
    header_template_name: str = HEADER_TEMPLATE_NAME
    open_header_file: bool = True

    @classmethod
    def default(cls, **overrides) -> "OutputConfig":
        return cls(template_dir=default_template_dir(), **overrides)
