"""인챈트 arg parser — `sharpness:5` 형식"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..models import Enchantment, ItemMeta, ItemStack
from ..testable import ItemPredicate
from .base import LookupArgParser
from .tokens import parse_int

logger = logging.getLogger(__name__)


class EnchantmentArgParser(LookupArgParser):
    """`<enchantment>:<level>` 토큰마다 최소 레벨 요구 조건을 만든다.

    같은 인챈트가 여러 번 나오면 마지막 값이 쓰인다.
    """

    def parse_arguments(
        self, args: Sequence[str], meta: ItemMeta
    ) -> Optional[ItemPredicate]:
        required: dict[Enchantment, int] = {}

        for arg in args:
            parts = arg.lower().split(":")
            if len(parts) != 2:
                continue
            try:
                enchantment = Enchantment(parts[0])
            except ValueError:
                continue
            level = parse_int(parts[1])
            if level is None or level < 1:
                logger.debug("Ignoring malformed enchantment level: %s", arg)
                continue
            required[enchantment] = level

        if not required:
            return None

        meta.enchants.update(required)

        def test(item: ItemStack) -> bool:
            if item.meta is None:
                return False
            return all(
                item.meta.enchants.get(enchantment, 0) >= level
                for enchantment, level in required.items()
            )

        return test
