import json
from dataclasses import dataclass
from typing import Optional

from kube_workload.resources.deployment import Deployment
from kube_workload.resources.statefulset import StatefulSet

# apps/v1 defaults spec.replicas to 1 when it is not set
DEFAULT_REPLICAS = 1

WORKLOAD_CLASSES = [Deployment, StatefulSet]

KIND_CLASSES = {clazz.token: clazz for clazz in WORKLOAD_CLASSES}


@dataclass(frozen=True)
class WorkloadConfig:
    """Everything a single invocation needs, passed explicitly to each operation."""

    api: object
    namespace: str
    all_kinds: bool = False
    stop: bool = False
    start: bool = False
    dry_run: bool = False


@dataclass(frozen=True)
class Workload:
    name: str
    kind: str
    scale: int

    @property
    def key(self) -> str:
        return snapshot_key(self.kind, self.name)

    @property
    def resource_class(self):
        return KIND_CLASSES[self.kind]

    def to_json(self) -> str:
        # same compact layout as records written by earlier releases
        return json.dumps(
            {"name": self.name, "scale": self.scale, "kind": self.kind},
            separators=(",", ":"),
        )

    @classmethod
    def from_json(cls, data: str) -> "Workload":
        state = json.loads(data)
        scale = state["scale"]
        if not isinstance(scale, int) or isinstance(scale, bool):
            raise ValueError(f"scale must be an integer, got {scale!r}")
        return cls(name=state["name"], kind=state["kind"], scale=scale)

    @classmethod
    def from_resource(cls, resource) -> "Workload":
        replicas = resource.get_replicas()
        return cls(
            name=resource.name,
            kind=resource.token,
            scale=DEFAULT_REPLICAS if replicas is None else replicas,
        )


def snapshot_key(kind: str, name: str) -> str:
    return f"{kind}-{name}"


def resolve_kind(token: str) -> Optional[type]:
    """Return the workload class for a kind token or alias, None if unknown."""
    token = token.lower()
    for clazz in WORKLOAD_CLASSES:
        if token in clazz.aliases:
            return clazz
    return None
