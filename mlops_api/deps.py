from fastapi import Request

from mlops_api.core.registry import AppStore


def get_store(request: Request) -> AppStore:
    return request.app.state.store


def is_missing(value) -> bool:
    """Absent, null and "" count as missing; 0 and False do not."""
    return value is None or value == ""
