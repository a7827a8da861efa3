"""Item lookup API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from src.api.schemas import (
    CustomItemListResponse,
    ItemStackInfo,
    LookupResponse,
    MatchRequest,
    MatchResponse,
)
from src.core.item.lookup import ItemLookup
from src.core.item.models import Material
from src.core.item.testable import EmptyTestableItem
from src.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/items", tags=["items"])


def get_item_lookup(request: Request) -> ItemLookup:
    """ItemLookup 인스턴스 반환 (의존성 주입)"""
    item_lookup: ItemLookup = request.app.state.item_lookup
    return item_lookup


@router.get("/lookup", response_model=LookupResponse)
def lookup_item(
    spec: str = Query(..., description="lookup 문자열"),
    item_lookup: ItemLookup = Depends(get_item_lookup),
) -> LookupResponse:
    """lookup 문자열 해석 결과와 대표 아이템 반환"""
    result = item_lookup.lookup(spec)
    if isinstance(result, EmptyTestableItem):
        return LookupResponse(spec=spec, resolved=False, kind=result.kind)
    return LookupResponse(
        spec=spec,
        resolved=True,
        kind=result.kind,
        item=ItemStackInfo.from_stack(result.get_item()),
    )


@router.post("/match", response_model=MatchResponse)
def match_item(
    request: MatchRequest,
    item_lookup: ItemLookup = Depends(get_item_lookup),
) -> MatchResponse:
    """주어진 아이템이 lookup 문자열에 매칭되는지 판정"""
    material_name = request.item.material
    # AIR는 빈 슬롯. 어떤 lookup에도 매칭되지 않는다
    if material_name.upper() == Material.AIR.value:
        material = Material.AIR
    else:
        material = item_lookup.resolve_material(material_name)
    if material is None:
        raise HTTPException(
            status_code=422, detail=f"Unknown material: {material_name}"
        )

    matcher = item_lookup.lookup(request.spec)
    matched = matcher.matches(request.item.to_stack(material))
    logger.debug(f"Match {request.spec!r} → {matched}")
    return MatchResponse(spec=request.spec, matches=matched)


@router.get("/custom", response_model=CustomItemListResponse)
def list_custom_items(
    item_lookup: ItemLookup = Depends(get_item_lookup),
) -> CustomItemListResponse:
    """등록된 커스텀 아이템 키 목록 (정렬)"""
    keys = sorted(str(key) for key in item_lookup.custom_items.keys())
    return CustomItemListResponse(keys=keys, count=len(keys))
