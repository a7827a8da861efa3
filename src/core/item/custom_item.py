"""커스텀 아이템 — 플러그인이 (namespace, id) 키로 등록하는 매처"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from .models import ItemStack
from .testable import ItemPredicate, TestableItem

logger = logging.getLogger(__name__)


class ItemRegistrationError(ValueError):
    """커스텀 아이템 정의/등록 불변식 위반 (프로그래밍 오류)."""


@dataclass(frozen=True)
class RegistryKey:
    """커스텀 아이템 키 (namespace, id)"""

    namespace: str
    id: str

    @classmethod
    def of(cls, namespace: str, item_id: str) -> RegistryKey:
        """lookup 문자열 토큰용. 소문자로 정규화."""
        return cls(namespace.lower(), item_id.lower())

    @classmethod
    def parse(cls, key: str) -> RegistryKey:
        """'ns:id' 파싱. 형식 오류 시 ValueError."""
        parts = key.split(":")
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"Invalid registry key: {key!r}")
        return cls.of(parts[0], parts[1])

    def __str__(self) -> str:
        return f"{self.namespace}:{self.id}"


class CustomItem(TestableItem):
    """플러그인 정의 아이템.

    test: 인스턴스 predicate 또는 다른 TestableItem (조합)
    item: 대표 인스턴스. 반드시 읽을 수 있는 메타가 있고 test를 통과해야 한다.
    """

    def __init__(
        self,
        key: RegistryKey,
        test: Union[ItemPredicate, TestableItem],
        item: ItemStack,
    ) -> None:
        self._key = key
        self._definition: Optional[TestableItem] = (
            test if isinstance(test, TestableItem) else None
        )
        self._test: ItemPredicate = (
            test.matches if isinstance(test, TestableItem) else test
        )
        self._item = item.copy()

        if self._item.get_item_meta() is None:
            logger.error("Custom item %s has no readable item meta", key)
            raise ItemRegistrationError(
                f"Custom item {key} must have readable item meta"
            )
        if not self._test(self._item.copy()):
            logger.error("Custom item %s does not match its own item", key)
            raise ItemRegistrationError(
                f"The item of custom item {key} must match its test"
            )

    @classmethod
    def from_testable(cls, key: RegistryKey, definition: TestableItem) -> CustomItem:
        """기존 매처를 그대로 커스텀 아이템으로 감싼다."""
        return cls(key, definition, definition.get_item())

    @property
    def key(self) -> RegistryKey:
        return self._key

    def matches(self, item: Optional[ItemStack]) -> bool:
        return item is not None and self._test(item)

    def get_item(self) -> ItemStack:
        return self._item.copy()

    @property
    def kind(self) -> str:
        return "custom"

    def children(self) -> tuple[TestableItem, ...]:
        return (self._definition,) if self._definition is not None else ()

    def __repr__(self) -> str:
        return f"CustomItem({self._key})"
