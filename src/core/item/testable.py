"""TestableItem 계층 — lookup 결과로 돌려주는 매처

변형:
- EmptyTestableItem: 조회 실패. 아무것도 매칭하지 않는다.
- MaterialTestableItem: 재질만 비교 (수량/메타 무시)
- ModifiedTestableItem: 기반 매처 + 추가 조건 + 표시용 예시
- TestableStack: 기반 매처 + 수량 조건

모든 매처는 생성 후 불변. matches/get_item은 어느 스레드에서 호출해도 안전.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Iterator, Optional

from .models import ItemStack, Material

# 후보 인스턴스 → bool. 상태 없음, 스레드 안전해야 함.
ItemPredicate = Callable[[ItemStack], bool]


class TestableItem(ABC):
    """아이템 정체성 매처

    matches(): 후보 인스턴스가 "같은 종류의 아이템"인지 판정 (핫 패스)
    get_item(): 대표 인스턴스의 새 복사본
    """

    # pytest가 Test* 클래스로 수집하지 않도록
    __test__ = False

    @abstractmethod
    def matches(self, item: Optional[ItemStack]) -> bool:
        ...

    @abstractmethod
    def get_item(self) -> ItemStack:
        ...

    @property
    @abstractmethod
    def kind(self) -> str:
        """짧은 종류 라벨 (empty, material, custom, modified, stack)"""
        ...

    def children(self) -> tuple[TestableItem, ...]:
        return ()

    def iter_tree(self) -> Iterator[TestableItem]:
        """자신과 감싼 매처 전체를 전위 순회."""
        yield self
        for child in self.children():
            yield from child.iter_tree()


class EmptyTestableItem(TestableItem):
    def matches(self, item: Optional[ItemStack]) -> bool:
        return False

    def get_item(self) -> ItemStack:
        return ItemStack.of(Material.AIR)

    @property
    def kind(self) -> str:
        return "empty"

    def __repr__(self) -> str:
        return "EmptyTestableItem()"


class MaterialTestableItem(TestableItem):
    def __init__(self, material: Material) -> None:
        self._material = material

    @property
    def material(self) -> Material:
        return self._material

    def matches(self, item: Optional[ItemStack]) -> bool:
        return item is not None and item.material is self._material

    def get_item(self) -> ItemStack:
        return ItemStack.of(self._material)

    @property
    def kind(self) -> str:
        return "material"

    def __repr__(self) -> str:
        return f"MaterialTestableItem({self._material.value})"


class ModifiedTestableItem(TestableItem):
    """기반 매처 + arg parser가 만든 조건.

    example은 get_item 전용. 매칭에는 쓰이지 않는다.
    """

    def __init__(
        self,
        handle: TestableItem,
        test: ItemPredicate,
        example: ItemStack,
    ) -> None:
        self._handle = handle
        self._test = test
        self._example = example.copy()

    @property
    def handle(self) -> TestableItem:
        return self._handle

    def matches(self, item: Optional[ItemStack]) -> bool:
        return item is not None and self._handle.matches(item) and self._test(item)

    def get_item(self) -> ItemStack:
        return self._example.copy()

    @property
    def kind(self) -> str:
        return "modified"

    def children(self) -> tuple[TestableItem, ...]:
        return (self._handle,)

    def __repr__(self) -> str:
        return f"ModifiedTestableItem({self._handle!r})"


class StackPolicy(str, Enum):
    """TestableStack 수량 비교 방식"""

    AT_LEAST = "at_least"  # 보유 수량 >= 요구 수량
    EXACT = "exact"  # 보유 수량 == 요구 수량

    def accepts(self, amount: int, required: int) -> bool:
        if self is StackPolicy.EXACT:
            return amount == required
        return amount >= required


class TestableStack(TestableItem):
    def __init__(
        self,
        handle: TestableItem,
        amount: int,
        policy: StackPolicy = StackPolicy.AT_LEAST,
    ) -> None:
        self._handle = handle
        self._amount = amount
        self._policy = policy

    @property
    def handle(self) -> TestableItem:
        return self._handle

    @property
    def amount(self) -> int:
        return self._amount

    @property
    def policy(self) -> StackPolicy:
        return self._policy

    def matches(self, item: Optional[ItemStack]) -> bool:
        return (
            item is not None
            and self._handle.matches(item)
            and self._policy.accepts(item.amount, self._amount)
        )

    def get_item(self) -> ItemStack:
        item = self._handle.get_item()
        item.amount = self._amount
        return item

    @property
    def kind(self) -> str:
        return "stack"

    def children(self) -> tuple[TestableItem, ...]:
        return (self._handle,)

    def __repr__(self) -> str:
        return (
            f"TestableStack({self._handle!r}, amount={self._amount}, "
            f"policy={self._policy.value})"
        )


def always_true(item: ItemStack) -> bool:
    """아무 토큰도 인식하지 못한 arg parser의 기본 조건"""
    return True
