# mlops_api/routers/users.py
from fastapi import APIRouter, Depends

from mlops_api.core.registry import AppStore
from mlops_api.deps import get_store

router = APIRouter(prefix="/api", tags=["users"])


@router.get("/users")
def list_users(store: AppStore = Depends(get_store)):
    return [u.to_api() for u in store.users]
