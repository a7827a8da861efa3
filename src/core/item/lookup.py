"""아이템 lookup — 문자열 → TestableItem

문법:
    spec     := alt ('?' alt)*
    alt      := identity (' ' amount)? (' ' modifier)*
    identity := material | namespace:id | namespace:id:amount (레거시)

적용 순서:
1. '?' 대안: 왼쪽부터 재귀 lookup, 첫 비-Empty 결과
2. 공백 분리, 토큰 0 = identity
3. identity 해석 (재질 / 커스텀 아이템 / 레거시 id:amount, ns:id:amount)
4. 두 번째 토큰이 정수면 수량 (신 형식, 레거시 수량보다 우선)
5. 나머지 토큰 → 모든 arg parser → ModifiedTestableItem
6. 수량 != 1 → TestableStack

해석할 수 없는 입력은 예외 없이 EmptyTestableItem이 된다.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from .args.base import ArgParserRegistry
from .args.tokens import parse_int
from .custom_item import CustomItem, RegistryKey
from .models import ItemStack, Material, resolve_material
from .registry import CustomItemRegistry
from .testable import (
    EmptyTestableItem,
    ItemPredicate,
    MaterialTestableItem,
    ModifiedTestableItem,
    StackPolicy,
    TestableItem,
    TestableStack,
)

logger = logging.getLogger(__name__)

MaterialResolver = Callable[[str], Optional[Material]]

# Empty는 상태가 없으므로 공유
EMPTY = EmptyTestableItem()


class ItemLookup:
    """커스텀 아이템 저장소 + arg parser 목록 위에서 lookup 문자열을 해석.

    사용 패턴:
        lookup = ItemLookup(custom_items, arg_parsers)
        recipe_part = lookup.lookup("DIAMOND_SWORD sharpness:3")
        if recipe_part.matches(stack): ...
    """

    def __init__(
        self,
        custom_items: CustomItemRegistry,
        arg_parsers: ArgParserRegistry,
        material_resolver: MaterialResolver = resolve_material,
        stack_policy: StackPolicy = StackPolicy.AT_LEAST,
    ) -> None:
        self._custom_items = custom_items
        self._arg_parsers = arg_parsers
        self._resolve_material = material_resolver
        self._stack_policy = stack_policy

    @property
    def custom_items(self) -> CustomItemRegistry:
        return self._custom_items

    @property
    def arg_parsers(self) -> ArgParserRegistry:
        return self._arg_parsers

    @property
    def stack_policy(self) -> StackPolicy:
        return self._stack_policy

    def resolve_material(self, name: str) -> Optional[Material]:
        """lookup과 같은 규칙으로 재질 이름 해석. AIR와 미등록 이름은 None."""
        return self._resolve_material(name)

    def lookup(self, key: str) -> TestableItem:
        """lookup 문자열 해석. 실패 시 EmptyTestableItem."""
        if "?" in key:
            for option in key.split("?"):
                result = self.lookup(option)
                if not isinstance(result, EmptyTestableItem):
                    return result
            return EMPTY

        args = key.rstrip(" ").split(" ")
        if not args[0]:
            return EMPTY

        resolved = self._resolve_identity(args[0])
        if resolved is None:
            logger.debug("Unresolved item lookup: %r", key)
            return EMPTY
        item, stack_amount = resolved

        modifier_start = 1
        if len(args) >= 2:
            amount = parse_int(args[1])
            if amount is not None:
                stack_amount = amount
                modifier_start = 2

        modified = self._apply_modifiers(item, args[modifier_start:])
        if modified is None:
            return EMPTY
        item = modified

        if stack_amount == 1:
            return item
        return TestableStack(item, stack_amount, self._stack_policy)

    def _resolve_identity(self, token: str) -> Optional[tuple[TestableItem, int]]:
        """identity 토큰 → (기반 매처, 레거시 수량). 해석 불가 시 None."""
        split = token.lower().split(":")

        if len(split) == 1:
            material = self._resolve_material(token)
            if material is None or material is Material.AIR:
                return None
            return MaterialTestableItem(material), 1

        if len(split) == 2:
            custom = self._custom_items.get(RegistryKey.of(split[0], split[1]))
            if custom is not None:
                return custom, 1

            # 레거시 id:amount — 'id amount'로 대체됨
            material = self._resolve_material(split[0])
            amount = parse_int(split[1])
            if material is None or material is Material.AIR or amount is None:
                return None
            return MaterialTestableItem(material), amount

        # 레거시 namespace:id:amount — 'namespace:id amount'로 대체됨
        if len(split) == 3:
            custom = self._custom_items.get(RegistryKey.of(split[0], split[1]))
            amount = parse_int(split[2])
            if custom is None or amount is None:
                return None
            return custom, amount

        return None

    def _apply_modifiers(
        self, item: TestableItem, modifier_args: Sequence[str]
    ) -> Optional[TestableItem]:
        """modifier 토큰을 모든 arg parser에 넘긴다.

        조건이 하나라도 생기거나 메타가 바뀌면 ModifiedTestableItem.
        parser 예외는 로그 후 None (lookup 실패).
        """
        if len(self._arg_parsers) == 0:
            return item

        example = item.get_item()
        original_meta = example.get_item_meta()
        if original_meta is None:
            return item
        meta = original_meta.copy()

        try:
            predicates = self._arg_parsers.parse(modifier_args, meta)
        except Exception:
            logger.exception(
                "Arg parser failed for modifiers %r on %r", modifier_args, item
            )
            return None

        if not predicates and meta == original_meta:
            return item

        example.set_item_meta(meta)
        return ModifiedTestableItem(item, _all_of(tuple(predicates)), example)

    def is_custom_item(self, item: ItemStack) -> bool:
        return self._custom_items.is_custom_item(item)

    def get_custom_item(self, item: ItemStack) -> Optional[CustomItem]:
        return self._custom_items.get_custom_item(item)


def _all_of(predicates: tuple[ItemPredicate, ...]) -> ItemPredicate:
    def test(item: ItemStack) -> bool:
        for predicate in predicates:
            if not predicate(item):
                return False
        return True

    return test
