"""Custom model data arg parser — `custom-model-data:7`"""

from __future__ import annotations

from typing import Optional, Sequence

from ..models import ItemMeta, ItemStack
from ..testable import ItemPredicate
from .base import LookupArgParser
from .tokens import parse_int

PREFIX = "custom-model-data:"


class CustomModelDataArgParser(LookupArgParser):
    def parse_arguments(
        self, args: Sequence[str], meta: ItemMeta
    ) -> Optional[ItemPredicate]:
        model_data: Optional[int] = None
        for arg in args:
            if not arg.lower().startswith(PREFIX):
                continue
            value = parse_int(arg[len(PREFIX):])
            if value is not None:
                model_data = value

        if model_data is None:
            return None

        meta.custom_model_data = model_data

        def test(item: ItemStack) -> bool:
            return item.meta is not None and item.meta.custom_model_data == model_data

        return test
