import logging
import time
from typing import Callable
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

logger = logging.getLogger("mlops_api.request")


def configure_logging(level: str = "INFO") -> None:
    # no-op if the root logger already has handlers (uvicorn, pytest)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("mlops_api").setLevel(level)


def route_tag(request: Request) -> str:
    """First tag of the matched APIRouter route, "-" for unmatched paths."""
    route = request.scope.get("route")
    tags = getattr(route, "tags", None)
    return str(tags[0]) if tags else "-"


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable):
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "tag=%s %s %s -> 500 in %.2fms UNHANDLED",
                route_tag(request), request.method, request.url.path,
                (time.perf_counter() - start) * 1000.0,
            )
            raise

        # rejected requests stand out next to the error handler warnings
        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(
            level,
            "tag=%s %s %s -> %s in %.2fms client=%s",
            route_tag(request), request.method, request.url.path, response.status_code,
            (time.perf_counter() - start) * 1000.0,
            request.client.host if request.client else "-",
        )
        return response


def register_request_logging(app, level: str = "INFO"):
    configure_logging(level)
    app.add_middleware(RequestLogMiddleware)
