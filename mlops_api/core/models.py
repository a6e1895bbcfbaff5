from dataclasses import dataclass, asdict
from typing import Any
from enum import Enum


class ModelStatus(str, Enum):
    registered = "registered"


class PipelineStatus(str, Enum):
    ready = "ready"
    paused = "paused"


@dataclass(frozen=True)
class User:
    id: int
    name: str
    role: str

    def to_api(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Model:
    id: int
    name: Any
    version: Any
    artifact_url: Any
    status: ModelStatus = ModelStatus.registered

    def to_api(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "version": self.version,
            "artifactUrl": self.artifact_url,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class Pipeline:
    id: int
    name: str
    status: PipelineStatus

    def to_api(self) -> dict:
        d = asdict(self)
        d["status"] = self.status.value
        return d
