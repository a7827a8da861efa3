"""Item lookup core"""
__version__ = "0.1.0"

from src.core.item import CustomItemRegistry, ItemLookup, TestableItem
from src.core.item.args import ArgParserRegistry

__all__ = [
    "ArgParserRegistry",
    "CustomItemRegistry",
    "ItemLookup",
    "TestableItem",
]
