"""호스트 아이템 모델 — Material, ItemMeta, ItemStack

서버(호스트)가 제공하는 아이템 표현의 최소 대역.
Core는 material / amount / meta 세 가지만 본다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Material(str, Enum):
    """호스트 재질 태그. AIR = '아이템 없음' 센티널."""

    AIR = "AIR"
    STONE = "STONE"
    COBBLESTONE = "COBBLESTONE"
    DIRT = "DIRT"
    OAK_LOG = "OAK_LOG"
    OAK_PLANKS = "OAK_PLANKS"
    STICK = "STICK"
    COAL = "COAL"
    IRON_INGOT = "IRON_INGOT"
    GOLD_INGOT = "GOLD_INGOT"
    DIAMOND = "DIAMOND"
    EMERALD = "EMERALD"
    NETHERITE_INGOT = "NETHERITE_INGOT"
    REDSTONE = "REDSTONE"
    BOOK = "BOOK"
    PAPER = "PAPER"
    BLAZE_ROD = "BLAZE_ROD"
    ENDER_PEARL = "ENDER_PEARL"
    DIAMOND_SWORD = "DIAMOND_SWORD"
    DIAMOND_PICKAXE = "DIAMOND_PICKAXE"
    IRON_SWORD = "IRON_SWORD"
    BOW = "BOW"
    LEATHER_CHESTPLATE = "LEATHER_CHESTPLATE"
    PLAYER_HEAD = "PLAYER_HEAD"


class Enchantment(str, Enum):
    SHARPNESS = "sharpness"
    SMITE = "smite"
    UNBREAKING = "unbreaking"
    MENDING = "mending"
    EFFICIENCY = "efficiency"
    FORTUNE = "fortune"
    SILK_TOUCH = "silk_touch"
    LOOTING = "looting"
    FIRE_ASPECT = "fire_aspect"
    PROTECTION = "protection"
    POWER = "power"
    INFINITY = "infinity"


class ItemFlag(str, Enum):
    HIDE_ENCHANTS = "hide_enchants"
    HIDE_ATTRIBUTES = "hide_attributes"
    HIDE_UNBREAKABLE = "hide_unbreakable"
    HIDE_DYE = "hide_dye"


@dataclass
class ItemMeta:
    """아이템 메타데이터. 가변 — 공유하려면 copy()."""

    display_name: Optional[str] = None
    lore: list[str] = field(default_factory=list)
    enchants: dict[Enchantment, int] = field(default_factory=dict)
    custom_model_data: Optional[int] = None
    unbreakable: bool = False
    flags: set[ItemFlag] = field(default_factory=set)
    # 플러그인 데이터 컨테이너 (커스텀 아이템 식별 태그 등)
    tags: dict[str, str] = field(default_factory=dict)

    def copy(self) -> ItemMeta:
        return ItemMeta(
            display_name=self.display_name,
            lore=list(self.lore),
            enchants=dict(self.enchants),
            custom_model_data=self.custom_model_data,
            unbreakable=self.unbreakable,
            flags=set(self.flags),
            tags=dict(self.tags),
        )


@dataclass
class ItemStack:
    """호스트 아이템 인스턴스. AIR는 meta를 갖지 않는다."""

    material: Material
    amount: int = 1
    meta: Optional[ItemMeta] = None

    def __post_init__(self) -> None:
        if self.material is Material.AIR:
            self.meta = None
        elif self.meta is None:
            self.meta = ItemMeta()

    @classmethod
    def of(cls, material: Material, amount: int = 1) -> ItemStack:
        """대표 인스턴스 생성 (instantiate)."""
        return cls(material=material, amount=amount)

    def get_item_meta(self) -> Optional[ItemMeta]:
        """메타 스냅샷 (read_metadata). 원본과 독립."""
        return self.meta.copy() if self.meta is not None else None

    def set_item_meta(self, meta: Optional[ItemMeta]) -> None:
        """메타 적용 (apply_metadata). AIR에는 적용되지 않는다."""
        if self.material is Material.AIR:
            return
        self.meta = meta.copy() if meta is not None else ItemMeta()

    def copy(self) -> ItemStack:
        return ItemStack(
            material=self.material,
            amount=self.amount,
            meta=self.get_item_meta(),
        )


def resolve_material(name: str) -> Optional[Material]:
    """대소문자 무시 재질 조회. 미등록 이름과 AIR는 None."""
    try:
        material = Material(name.upper())
    except ValueError:
        return None
    if material is Material.AIR:
        return None
    return material
