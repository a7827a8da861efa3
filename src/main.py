"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from src.api.health import router as health_router
from src.api.items import router as items_router
from src.config import settings
from src.core.item.args import ArgParserRegistry, register_default_arg_parsers
from src.core.item.lookup import ItemLookup
from src.core.item.registry import CustomItemRegistry
from src.core.logging import get_logger, setup_logging

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


def create_item_lookup() -> ItemLookup:
    """저장소 2종 + ItemLookup 생성. 프로세스 수명은 lifespan이 관리."""
    custom_items = CustomItemRegistry()
    arg_parsers = ArgParserRegistry()
    if settings.REGISTER_DEFAULT_ARG_PARSERS:
        register_default_arg_parsers(arg_parsers)
    return ItemLookup(
        custom_items,
        arg_parsers,
        stack_policy=settings.STACK_MATCH_POLICY,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info("Initializing item lookup...")
    item_lookup = create_item_lookup()
    app.state.item_lookup = item_lookup
    logger.info(
        "Item lookup initialized (%d arg parsers, stack policy=%s).",
        len(item_lookup.arg_parsers),
        item_lookup.stack_policy.value,
    )

    yield

    # 종료 시 정리
    logger.info("Shutting down...")
    item_lookup.custom_items.clear()
    item_lookup.arg_parsers.clear()


app = FastAPI(title="Item Lookup", lifespan=lifespan)

app.include_router(health_router)
app.include_router(items_router)
