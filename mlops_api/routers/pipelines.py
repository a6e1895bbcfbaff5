# mlops_api/routers/pipelines.py
import json
import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import BaseModel, Field

from mlops_api.core.registry import AppStore
from mlops_api.deps import get_store, is_missing

logger = logging.getLogger("mlops_api.pipelines")

router = APIRouter(prefix="/api/pipelines", tags=["pipelines"])


class RunPipelineRequest(BaseModel):
    # any JSON value; echoed back, never looked up in the catalog
    pipeline_id: Optional[Any] = Field(None, alias="pipelineId")


def render_pipeline_id(value: Any) -> str:
    """Strings as sent, anything else in its JSON form (true, 7, [1, 2])."""
    if isinstance(value, str):
        return value
    return json.dumps(value)


@router.get("")
def list_pipelines(store: AppStore = Depends(get_store)):
    return [p.to_api() for p in store.pipelines]


@router.post("/run")
def run_pipeline(req: Optional[RunPipelineRequest] = Body(None)):
    if req is None or is_missing(req.pipeline_id):
        raise HTTPException(status_code=400, detail="Missing pipelineId")

    logger.info("pipeline trigger acknowledged pipelineId=%r", req.pipeline_id)
    return {"message": f"Pipeline {render_pipeline_id(req.pipeline_id)} triggered successfully"}
