"""표시 이름 arg parser — `name:Excalibur` 또는 `name:"Holy Sword"`

토큰은 공백으로 잘려 들어오므로 다시 이어 붙여서 따옴표 구간을 찾는다.
"""

from __future__ import annotations

import re
from typing import Optional, Sequence

from ..models import ItemMeta, ItemStack
from ..testable import ItemPredicate
from .base import LookupArgParser

_QUOTED = re.compile(r'(?:^|\s)name:"([^"]*)"', re.IGNORECASE)
_BARE = re.compile(r'(?:^|\s)name:([^\s"]+)', re.IGNORECASE)


class NameArgParser(LookupArgParser):
    def parse_arguments(
        self, args: Sequence[str], meta: ItemMeta
    ) -> Optional[ItemPredicate]:
        joined = " ".join(args)
        found = _QUOTED.search(joined) or _BARE.search(joined)
        if found is None:
            return None

        display_name = found.group(1)
        meta.display_name = display_name

        def test(item: ItemStack) -> bool:
            return item.meta is not None and item.meta.display_name == display_name

        return test
