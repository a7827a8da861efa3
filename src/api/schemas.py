"""API request/response schemas."""

from typing import Optional

from pydantic import BaseModel, Field

from src.core.item.models import Enchantment, ItemFlag, ItemMeta, ItemStack, Material


# === Shared ===


class ItemMetaInfo(BaseModel):
    """아이템 메타데이터"""

    display_name: Optional[str] = None
    lore: list[str] = []
    enchants: dict[Enchantment, int] = {}
    custom_model_data: Optional[int] = None
    unbreakable: bool = False
    flags: list[ItemFlag] = []
    tags: dict[str, str] = {}

    @classmethod
    def from_meta(cls, meta: ItemMeta) -> "ItemMetaInfo":
        return cls(
            display_name=meta.display_name,
            lore=list(meta.lore),
            enchants=dict(meta.enchants),
            custom_model_data=meta.custom_model_data,
            unbreakable=meta.unbreakable,
            flags=sorted(meta.flags, key=lambda flag: flag.value),
            tags=dict(meta.tags),
        )

    def to_meta(self) -> ItemMeta:
        return ItemMeta(
            display_name=self.display_name,
            lore=list(self.lore),
            enchants=dict(self.enchants),
            custom_model_data=self.custom_model_data,
            unbreakable=self.unbreakable,
            flags=set(self.flags),
            tags=dict(self.tags),
        )


class ItemStackInfo(BaseModel):
    """아이템 인스턴스"""

    material: str = Field(..., min_length=1, description="재질 이름 (대소문자 무시)")
    amount: int = Field(1, description="수량 (lookup 수량은 음수일 수 있음)")
    meta: Optional[ItemMetaInfo] = None

    @classmethod
    def from_stack(cls, stack: ItemStack) -> "ItemStackInfo":
        return cls(
            material=stack.material.value,
            amount=stack.amount,
            meta=ItemMetaInfo.from_meta(stack.meta) if stack.meta is not None else None,
        )

    def to_stack(self, material: Material) -> ItemStack:
        return ItemStack(
            material=material,
            amount=self.amount,
            meta=self.meta.to_meta() if self.meta is not None else None,
        )


# === Request Schemas ===


class MatchRequest(BaseModel):
    """lookup 문자열 매칭 요청"""

    spec: str = Field(..., description="lookup 문자열 (예: 'DIAMOND_SWORD sharpness:3')")
    item: ItemStackInfo


# === Response Schemas ===


class LookupResponse(BaseModel):
    """lookup 결과"""

    spec: str
    resolved: bool
    kind: str = Field(..., description="empty, material, custom, modified, stack")
    item: Optional[ItemStackInfo] = None


class MatchResponse(BaseModel):
    """매칭 결과"""

    spec: str
    matches: bool


class CustomItemListResponse(BaseModel):
    """등록된 커스텀 아이템 키 목록"""

    keys: list[str] = []
    count: int = 0
