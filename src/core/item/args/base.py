"""Lookup arg parser 인터페이스 + 저장소

규칙:
- 모든 parser는 남은 토큰 전체와 같은 메타 스냅샷을 받는다
- 인식하지 못한 토큰은 무시한다 (다른 parser의 몫)
- 아무것도 인식하지 못하면 None 또는 always_true를 반환한다
- 최종 조건 = 모든 parser 조건의 AND
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import Iterator, Optional, Sequence

from ..models import ItemMeta
from ..testable import ItemPredicate, always_true

logger = logging.getLogger(__name__)


class LookupArgParser(ABC):
    """modifier 토큰 → 추가 매칭 조건"""

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def parse_arguments(
        self, args: Sequence[str], meta: ItemMeta
    ) -> Optional[ItemPredicate]:
        """토큰을 해석해 meta를 수정하고 조건을 반환.

        Args:
            args: identity/수량 토큰을 제외한 나머지 전부
            meta: 대표 인스턴스의 메타 스냅샷 (수정 가능)

        Returns:
            조건 함수. 인식한 토큰이 없으면 None.
        """
        ...

    def apply(self, args: Sequence[str], meta: ItemMeta) -> ItemPredicate:
        """parse_arguments 호출 + 계약 강제. None → always_true."""
        predicate = self.parse_arguments(args, meta)
        if predicate is None:
            return always_true
        if not callable(predicate):
            raise TypeError(
                f"{self.name}.parse_arguments must return a predicate or None, "
                f"got {type(predicate).__name__}"
            )
        return predicate


class ArgParserRegistry:
    """등록 순서를 유지하는 arg parser 목록 (copy-on-write tuple)"""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._parsers: tuple[LookupArgParser, ...] = ()

    def register(self, parser: LookupArgParser) -> None:
        if not isinstance(parser, LookupArgParser):
            raise TypeError(f"Not a LookupArgParser: {parser!r}")
        with self._lock:
            self._parsers = self._parsers + (parser,)
        logger.info("Registered arg parser: %s", parser.name)

    def __iter__(self) -> Iterator[LookupArgParser]:
        return iter(self._parsers)

    def __len__(self) -> int:
        return len(self._parsers)

    def parse(self, args: Sequence[str], meta: ItemMeta) -> list[ItemPredicate]:
        """모든 parser를 등록 순서대로 적용. always_true는 결과에서 뺀다."""
        frozen_args = tuple(args)
        predicates: list[ItemPredicate] = []
        for parser in self._parsers:
            predicate = parser.apply(frozen_args, meta)
            if predicate is not always_true:
                predicates.append(predicate)
        return predicates

    def clear(self) -> None:
        """전체 해제 (종료/테스트용)"""
        with self._lock:
            self._parsers = ()
