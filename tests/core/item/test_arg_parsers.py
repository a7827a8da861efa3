"""Lookup arg parser: 계약, 등록 순서, 기본 parser 5종"""

from __future__ import annotations

from typing import Optional, Sequence

import pytest

from src.core.item.args import (
    ArgParserRegistry,
    CustomModelDataArgParser,
    EnchantmentArgParser,
    FlagArgParser,
    LookupArgParser,
    NameArgParser,
    UnbreakableArgParser,
    register_default_arg_parsers,
)
from src.core.item.args.tokens import parse_int
from src.core.item.models import Enchantment, ItemFlag, ItemMeta, ItemStack, Material
from src.core.item.testable import ItemPredicate, always_true


class RecordingParser(LookupArgParser):
    def __init__(self, label: str, calls: list) -> None:
        self.label = label
        self.calls = calls

    def parse_arguments(
        self, args: Sequence[str], meta: ItemMeta
    ) -> Optional[ItemPredicate]:
        self.calls.append((self.label, args))
        return None


class BrokenContractParser(LookupArgParser):
    def parse_arguments(self, args, meta):
        return "not a predicate"


def _stack(**meta_fields) -> ItemStack:
    return ItemStack(Material.DIAMOND_SWORD, meta=ItemMeta(**meta_fields))


# ── 토큰 유틸 ─────────────────────────────────────────────────


class TestParseInt:
    @pytest.mark.parametrize("token,expected", [("5", 5), ("+3", 3), ("-2", -2), ("007", 7)])
    def test_valid(self, token: str, expected: int) -> None:
        assert parse_int(token) == expected

    @pytest.mark.parametrize(
        "token,expected",
        [("2147483647", 2147483647), ("-2147483648", -2147483648), ("0000000000012", 12)],
    )
    def test_int_range_bounds(self, token: str, expected: int) -> None:
        assert parse_int(token) == expected

    @pytest.mark.parametrize(
        "token",
        ["", "abc", "1.5", " 5", "1_000", "٣", "5x", "2147483648", "-2147483649", "9" * 5000],
    )
    def test_invalid(self, token: str) -> None:
        assert parse_int(token) is None


# ── 계약 ──────────────────────────────────────────────────────


class TestContract:
    def test_none_becomes_always_true(self) -> None:
        parser = RecordingParser("a", [])
        assert parser.apply(("x",), ItemMeta()) is always_true

    def test_non_callable_is_contract_violation(self) -> None:
        with pytest.raises(TypeError):
            BrokenContractParser().apply((), ItemMeta())

    def test_register_rejects_non_parser(self) -> None:
        with pytest.raises(TypeError):
            ArgParserRegistry().register(lambda args, meta: None)  # type: ignore[arg-type]


# ── ArgParserRegistry ─────────────────────────────────────────


class TestArgParserRegistry:
    def test_registration_order_and_full_args(self) -> None:
        calls: list = []
        registry = ArgParserRegistry()
        registry.register(RecordingParser("first", calls))
        registry.register(RecordingParser("second", calls))

        predicates = registry.parse(["sharpness:1", "unbreakable"], ItemMeta())

        assert predicates == []
        assert calls == [
            ("first", ("sharpness:1", "unbreakable")),
            ("second", ("sharpness:1", "unbreakable")),
        ]
        assert [p.label for p in registry] == ["first", "second"]

    def test_defaults(self) -> None:
        registry = ArgParserRegistry()
        register_default_arg_parsers(registry)
        assert [type(p) for p in registry] == [
            EnchantmentArgParser,
            CustomModelDataArgParser,
            UnbreakableArgParser,
            FlagArgParser,
            NameArgParser,
        ]

    def test_unrelated_tokens_do_not_block(self) -> None:
        registry = ArgParserRegistry()
        register_default_arg_parsers(registry)
        meta = ItemMeta()
        predicates = registry.parse(["foo", "bar:baz", "sharpness:3"], meta)
        assert len(predicates) == 1
        assert meta.enchants == {Enchantment.SHARPNESS: 3}

    def test_clear(self) -> None:
        registry = ArgParserRegistry()
        register_default_arg_parsers(registry)
        registry.clear()
        assert len(registry) == 0


# ── 기본 parser ───────────────────────────────────────────────


class TestEnchantmentArgParser:
    def test_minimum_level(self) -> None:
        meta = ItemMeta()
        test = EnchantmentArgParser().parse_arguments(
            ("sharpness:3", "Unbreaking:2"), meta
        )
        assert meta.enchants == {Enchantment.SHARPNESS: 3, Enchantment.UNBREAKING: 2}
        assert test is not None
        assert test(_stack(enchants={Enchantment.SHARPNESS: 3, Enchantment.UNBREAKING: 2}))
        assert test(
            _stack(
                enchants={
                    Enchantment.SHARPNESS: 5,
                    Enchantment.UNBREAKING: 3,
                    Enchantment.MENDING: 1,
                }
            )
        )
        assert not test(_stack(enchants={Enchantment.SHARPNESS: 2, Enchantment.UNBREAKING: 2}))
        assert not test(_stack(enchants={Enchantment.SHARPNESS: 3}))
        assert not test(ItemStack.of(Material.AIR))

    def test_ignores_unknown_and_malformed(self) -> None:
        meta = ItemMeta()
        parser = EnchantmentArgParser()
        assert parser.parse_arguments(("unknown:2", "sharpness:abc", "sharpness:0", "x"), meta) is None
        assert meta == ItemMeta()


class TestCustomModelDataArgParser:
    def test_exact_value(self) -> None:
        meta = ItemMeta()
        test = CustomModelDataArgParser().parse_arguments(("custom-model-data:7",), meta)
        assert meta.custom_model_data == 7
        assert test(_stack(custom_model_data=7))
        assert not test(_stack(custom_model_data=8))
        assert not test(_stack())

    def test_not_present(self) -> None:
        meta = ItemMeta()
        assert CustomModelDataArgParser().parse_arguments(("custom-model-data:x",), meta) is None
        assert meta.custom_model_data is None


class TestUnbreakableArgParser:
    def test_unbreakable(self) -> None:
        meta = ItemMeta()
        test = UnbreakableArgParser().parse_arguments(("UNBREAKABLE",), meta)
        assert meta.unbreakable
        assert test(_stack(unbreakable=True))
        assert not test(_stack())

    def test_absent(self) -> None:
        assert UnbreakableArgParser().parse_arguments(("sharpness:1",), ItemMeta()) is None


class TestFlagArgParser:
    def test_all_flags_required(self) -> None:
        meta = ItemMeta()
        test = FlagArgParser().parse_arguments(
            ("flag:hide_enchants", "flag:hide_attributes", "flag:nope"), meta
        )
        assert meta.flags == {ItemFlag.HIDE_ENCHANTS, ItemFlag.HIDE_ATTRIBUTES}
        assert test(_stack(flags={ItemFlag.HIDE_ENCHANTS, ItemFlag.HIDE_ATTRIBUTES, ItemFlag.HIDE_DYE}))
        assert not test(_stack(flags={ItemFlag.HIDE_ENCHANTS}))


class TestNameArgParser:
    def test_bare_name(self) -> None:
        meta = ItemMeta()
        test = NameArgParser().parse_arguments(("sharpness:1", "name:Excalibur"), meta)
        assert meta.display_name == "Excalibur"
        assert test(_stack(display_name="Excalibur"))
        assert not test(_stack(display_name="Other"))

    def test_quoted_name_spans_tokens(self) -> None:
        meta = ItemMeta()
        test = NameArgParser().parse_arguments(('name:"Holy', "Sword", 'of', 'Light"'), meta)
        assert meta.display_name == "Holy Sword of Light"
        assert test(_stack(display_name="Holy Sword of Light"))

    def test_absent(self) -> None:
        assert NameArgParser().parse_arguments(("nickname:x",), ItemMeta()) is None
