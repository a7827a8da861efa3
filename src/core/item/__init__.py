"""아이템 정체성 & lookup 엔진 — 순수 Python, 호스트 무관"""

from .args import ArgParserRegistry, LookupArgParser, register_default_arg_parsers
from .custom_item import CustomItem, ItemRegistrationError, RegistryKey
from .lookup import ItemLookup
from .models import Enchantment, ItemFlag, ItemMeta, ItemStack, Material, resolve_material
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

__all__ = [
    "ArgParserRegistry",
    "LookupArgParser",
    "register_default_arg_parsers",
    "CustomItem",
    "ItemRegistrationError",
    "RegistryKey",
    "ItemLookup",
    "Enchantment",
    "ItemFlag",
    "ItemMeta",
    "ItemStack",
    "Material",
    "resolve_material",
    "CustomItemRegistry",
    "EmptyTestableItem",
    "ItemPredicate",
    "MaterialTestableItem",
    "ModifiedTestableItem",
    "StackPolicy",
    "TestableItem",
    "TestableStack",
]
