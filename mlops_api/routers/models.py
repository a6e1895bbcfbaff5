# mlops_api/routers/models.py
import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status
from pydantic import BaseModel, Field

from mlops_api.core.registry import AppStore
from mlops_api.deps import get_store, is_missing

logger = logging.getLogger("mlops_api.models")

router = APIRouter(prefix="/api", tags=["models"])


class RegisterModelRequest(BaseModel):
    # only presence is checked; values are stored as sent
    name: Optional[Any] = None
    version: Optional[Any] = None
    artifact_url: Optional[Any] = Field(None, alias="artifactUrl")


@router.get("/models")
def list_models(store: AppStore = Depends(get_store)):
    return [m.to_api() for m in store.models.list()]


@router.post("/models", status_code=status.HTTP_201_CREATED)
def register_model(
    req: Optional[RegisterModelRequest] = Body(None),
    store: AppStore = Depends(get_store),
):
    if req is None or any(is_missing(v) for v in (req.name, req.version, req.artifact_url)):
        raise HTTPException(status_code=400, detail="Missing fields")

    model = store.models.register(req.name, req.version, req.artifact_url)
    logger.info("registered model id=%s name=%s version=%s", model.id, model.name, model.version)
    return model.to_api()
