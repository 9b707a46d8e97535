# skelgen/report.py
"""소요 시간 보고 훅.

`with report_duration("render", hook):` 블록의 경과 시간을 측정해
hook(name, seconds)를 **정확히 한 번** 호출한다. 블록이 예외로 끝나도 호출한다.
hook을 주지 않으면 `skelgen.report` 로거에 INFO로 남긴다.
"""

from __future__ import annotations
import logging
import time
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

logger = logging.getLogger(__name__)

DurationHook = Callable[[str, float], None]


def log_duration(name: str, elapsed: float) -> None:
    logger.info("%s %10.5f s", name, elapsed)


@contextmanager
def report_duration(name: str, hook: Optional[DurationHook] = None) -> Iterator[None]:
    start = time.perf_counter()
    try:
        yield
    finally:
        (hook or log_duration)(name, time.perf_counter() - start)
