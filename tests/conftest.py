"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from src.core.item.args import ArgParserRegistry, register_default_arg_parsers
from src.core.item.custom_item import CustomItem, RegistryKey
from src.core.item.lookup import ItemLookup
from src.core.item.models import ItemMeta, ItemStack, Material
from src.core.item.registry import CustomItemRegistry
from src.core.item.testable import StackPolicy
from src.main import app

RUBY_KEY = RegistryKey("test", "ruby")


def make_tagged_item(material: Material, item_id: str, amount: int = 1) -> ItemStack:
    """플러그인 데이터 태그로 식별되는 인스턴스"""
    return ItemStack(
        material=material,
        amount=amount,
        meta=ItemMeta(display_name=item_id.title(), tags={"test:item": item_id}),
    )


def make_tagged_custom_item(
    key: RegistryKey, material: Material = Material.EMERALD
) -> CustomItem:
    """태그 비교 방식의 커스텀 아이템"""
    item_id = key.id

    def test(stack: ItemStack) -> bool:
        return (
            stack.material is material
            and stack.meta is not None
            and stack.meta.tags.get("test:item") == item_id
        )

    return CustomItem(key, test, make_tagged_item(material, item_id))


@pytest.fixture()
def custom_items() -> CustomItemRegistry:
    registry = CustomItemRegistry()
    registry.register(RUBY_KEY, make_tagged_custom_item(RUBY_KEY))
    return registry


@pytest.fixture()
def arg_parsers() -> ArgParserRegistry:
    registry = ArgParserRegistry()
    register_default_arg_parsers(registry)
    return registry


@pytest.fixture()
def item_lookup(
    custom_items: CustomItemRegistry, arg_parsers: ArgParserRegistry
) -> ItemLookup:
    """기본 parser + ruby 커스텀 아이템. 수량 정책은 AT_LEAST 고정."""
    return ItemLookup(custom_items, arg_parsers, stack_policy=StackPolicy.AT_LEAST)


@pytest.fixture()
def client() -> TestClient:
    """FastAPI TestClient (lifespan 포함)"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_custom_item():
    """RegistryKey → 태그 비교 커스텀 아이템 팩토리"""
    return make_tagged_custom_item


@pytest.fixture()
def make_stack():
    """(material, item_id, amount) → 태그 달린 인스턴스 팩토리"""
    return make_tagged_item
