# mlops_api/routers/health.py
from fastapi import APIRouter, Depends

from mlops_api.config import get_settings
from mlops_api.core.registry import AppStore
from mlops_api.deps import get_store

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(store: AppStore = Depends(get_store)):
    settings = get_settings()
    return {
        "status": "ok",
        "version": settings.APP_VERSION,
        "port": settings.PORT,
        "counts": {
            "users": len(store.users),
            "models": len(store.models),
            "pipelines": len(store.pipelines),
        },
    }
