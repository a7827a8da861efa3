"""커스텀 아이템 저장소 — (namespace, id) → CustomItem

copy-on-write: 쓰기는 Lock으로 직렬화하고 새 dict를 통째로 교체한다.
읽기는 잠그지 않고 현재 dict 참조 하나만 본다 (항상 완결된 스냅샷).
"""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Mapping, Optional

from .custom_item import CustomItem, ItemRegistrationError, RegistryKey
from .models import ItemStack

logger = logging.getLogger(__name__)


class CustomItemRegistry:
    """
    커스텀 아이템 저장소.
    호스트 앱 시작 시 생성해 주입한다 (전역 static 없음).
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: Mapping[RegistryKey, CustomItem] = MappingProxyType({})

    def register(self, key: RegistryKey, item: CustomItem) -> None:
        """등록. 이미 존재하는 키면 경고 로그 후 덮어쓴다.

        정의 트리가 같은 키의 커스텀 아이템을 참조하면 거부 (자기 참조).
        """
        for node in item.iter_tree():
            if node is not item and isinstance(node, CustomItem) and node.key == key:
                logger.error("Custom item %s references its own key", key)
                raise ItemRegistrationError(
                    f"Custom item {key} must not reference its own key"
                )

        with self._lock:
            current = self._items.get(key)
            if current is item:
                return
            if current is not None:
                logger.warning("Overwriting existing custom item: %s", key)
            updated = dict(self._items)
            updated[key] = item
            self._items = MappingProxyType(updated)
        logger.debug("Registered custom item: %s", key)

    def remove(self, key: RegistryKey) -> None:
        """삭제. 없으면 아무 일도 없다."""
        with self._lock:
            if key not in self._items:
                return
            updated = dict(self._items)
            del updated[key]
            self._items = MappingProxyType(updated)
        logger.debug("Removed custom item: %s", key)

    def get(self, key: RegistryKey) -> Optional[CustomItem]:
        """O(1) 조회. 없으면 None."""
        return self._items.get(key)

    def get_all(self) -> set[CustomItem]:
        """전체 커스텀 아이템 스냅샷."""
        return set(self._items.values())

    def keys(self) -> list[RegistryKey]:
        return list(self._items.keys())

    def is_custom_item(self, item: ItemStack) -> bool:
        """인스턴스가 어느 커스텀 아이템이든 매칭되는지."""
        return self.get_custom_item(item) is not None

    def get_custom_item(self, item: ItemStack) -> Optional[CustomItem]:
        """인스턴스를 매칭하는 첫 커스텀 아이템 (등록 순서). 없으면 None."""
        for custom in self._items.values():
            if custom.matches(item):
                return custom
        return None

    def count(self) -> int:
        """등록된 커스텀 아이템 수."""
        return len(self._items)

    def clear(self) -> None:
        """전체 삭제 (종료/테스트용)"""
        with self._lock:
            self._items = MappingProxyType({})
