from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .core.registry import AppStore
from .error_handlers import register_error_handlers
from .middleware_logging import register_request_logging
from .routers.health import router as health_router
from .routers.models import router as models_router
from .routers.pages import router as pages_router
from .routers.pipelines import router as pipelines_router
from .routers.users import router as users_router


def create_app(store: Optional[AppStore] = None) -> FastAPI:
    """Build the API around ``store`` (a fresh seeded one when omitted)."""
    settings = get_settings()

    app = FastAPI(title="ML Ops Demo API", version=settings.APP_VERSION)
    app.state.store = store if store is not None else AppStore()

    register_request_logging(app, settings.LOG_LEVEL)
    register_error_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(pages_router)
    app.include_router(users_router)
    app.include_router(models_router)
    app.include_router(pipelines_router)
    app.include_router(health_router)
    return app


app = create_app()
