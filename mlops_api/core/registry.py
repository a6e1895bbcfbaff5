"""In-memory stores backing the API.

One ``AppStore`` is created per application and lives as long as it does;
nothing is persisted. Users and pipelines are fixed seed tuples, models are
appended through ``ModelRegistry.register``.
"""
import itertools
import threading
from typing import List, Tuple

from .models import Model, Pipeline, PipelineStatus, User

SEED_USERS: Tuple[User, ...] = (
    User(id=1, name="Alice Johnson", role="data-scientist"),
    User(id=2, name="Bob Smith", role="ml-engineer"),
)

SEED_PIPELINES: Tuple[Pipeline, ...] = (
    Pipeline(id=1, name="daily-churn-pipeline", status=PipelineStatus.ready),
    Pipeline(id=2, name="fraud-detection-pipeline", status=PipelineStatus.paused),
)


class ModelRegistry:
    """Append-only list of registered models.

    Ids come from a counter owned by the registry, not from the list length,
    so they stay unique even if removal is ever added. Sync route handlers run
    on a thread pool, hence the lock around id assignment and append.
    """

    def __init__(self):
        self._models: List[Model] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def register(self, name: str, version: str, artifact_url: str) -> Model:
        with self._lock:
            model = Model(
                id=next(self._ids),
                name=name,
                version=version,
                artifact_url=artifact_url,
            )
            self._models.append(model)
        return model

    def list(self) -> List[Model]:
        with self._lock:
            return list(self._models)

    def __len__(self) -> int:
        with self._lock:
            return len(self._models)


class AppStore:
    def __init__(self, users=SEED_USERS, pipelines=SEED_PIPELINES):
        self.users: Tuple[User, ...] = tuple(users)
        self.models = ModelRegistry()
        self.pipelines: Tuple[Pipeline, ...] = tuple(pipelines)
