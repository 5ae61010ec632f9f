from typing import Optional

from pykube.objects import NamespacedAPIObject

from .scalable import Scalable


class Deployment(NamespacedAPIObject, Scalable):
    """
    Use latest workloads API version (apps/v1), pykube is stuck with old version
    """

    version = "apps/v1"
    endpoint = "deployments"
    kind = "Deployment"

    token = "deployment"
    aliases = frozenset(["deployment", "deploy"])

    def set_replicas(self, count):
        self.obj.setdefault("spec", {})["replicas"] = count

    def get_replicas(self) -> Optional[int]:
        replicas = self.obj.get("spec", {}).get("replicas")
        if replicas is None:
            return None
        return int(replicas)
