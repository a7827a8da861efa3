"""Health check endpoint."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
def health_check(request: Request) -> dict[str, str | int]:
    """Return application health and registry sizes."""
    item_lookup = getattr(request.app.state, "item_lookup", None)
    if item_lookup is None:
        return {"status": "error", "custom_items": 0, "arg_parsers": 0}
    return {
        "status": "ok",
        "custom_items": item_lookup.custom_items.count(),
        "arg_parsers": len(item_lookup.arg_parsers),
    }
