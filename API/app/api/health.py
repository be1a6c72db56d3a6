from fastapi import APIRouter

from app.core.settings import settings
from app.memory.store import get_store_runtime_status

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    llm_configured = settings.llm_provider.lower() == "openrouter" and bool(settings.openrouter_api_key)
    return {
        "status": "ok",
        "service": "learnpath-api",
        "llm": {
            "provider": settings.llm_provider,
            "model": settings.llm_model if llm_configured else None,
            "configured": llm_configured,
            "ai_roadmaps_enabled": settings.ai_roadmaps_enabled,
        },
        "plan_store": get_store_runtime_status(),
    }
