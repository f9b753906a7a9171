"""Health check endpoint."""

from typing import Any

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
def health_check(request: Request) -> dict[str, Any]:
    """Return application status and the enabled server mods."""
    manager = getattr(request.app.state, "module_manager", None)
    if manager is None:
        return {"status": "error", "modules": []}
    return {
        "status": "ok",
        "modules": [m.name for m in manager.get_enabled_modules()],
    }
