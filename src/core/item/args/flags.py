"""unbreakable / flag arg parsers"""

from __future__ import annotations

from typing import Optional, Sequence

from ..models import ItemFlag, ItemMeta, ItemStack
from ..testable import ItemPredicate
from .base import LookupArgParser


class UnbreakableArgParser(LookupArgParser):
    """`unbreakable` 토큰 → 파괴 불가 아이템만"""

    def parse_arguments(
        self, args: Sequence[str], meta: ItemMeta
    ) -> Optional[ItemPredicate]:
        if not any(arg.lower() == "unbreakable" for arg in args):
            return None

        meta.unbreakable = True

        def test(item: ItemStack) -> bool:
            return item.meta is not None and item.meta.unbreakable

        return test


class FlagArgParser(LookupArgParser):
    """`flag:<item_flag>` 토큰 → 해당 플래그를 모두 가진 아이템만"""

    def parse_arguments(
        self, args: Sequence[str], meta: ItemMeta
    ) -> Optional[ItemPredicate]:
        required: set[ItemFlag] = set()
        for arg in args:
            parts = arg.lower().split(":")
            if len(parts) != 2 or parts[0] != "flag":
                continue
            try:
                required.add(ItemFlag(parts[1]))
            except ValueError:
                continue

        if not required:
            return None

        meta.flags.update(required)
        flags = frozenset(required)

        def test(item: ItemStack) -> bool:
            return item.meta is not None and flags <= item.meta.flags

        return test
