"""Lookup arg parsers — modifier 토큰 해석기"""

from .base import ArgParserRegistry, LookupArgParser
from .enchantment import EnchantmentArgParser
from .flags import FlagArgParser, UnbreakableArgParser
from .model_data import CustomModelDataArgParser
from .name import NameArgParser


def register_default_arg_parsers(registry: ArgParserRegistry) -> None:
    """기본 parser 5종을 고정 순서로 등록."""
    registry.register(EnchantmentArgParser())
    registry.register(CustomModelDataArgParser())
    registry.register(UnbreakableArgParser())
    registry.register(FlagArgParser())
    registry.register(NameArgParser())


__all__ = [
    "ArgParserRegistry",
    "LookupArgParser",
    "EnchantmentArgParser",
    "CustomModelDataArgParser",
    "UnbreakableArgParser",
    "FlagArgParser",
    "NameArgParser",
    "register_default_arg_parsers",
]
