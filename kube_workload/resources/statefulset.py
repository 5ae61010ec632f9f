from typing import Optional

from pykube.objects import NamespacedAPIObject

from .scalable import Scalable


class StatefulSet(NamespacedAPIObject, Scalable):
    """
    Use latest workloads API version (apps/v1), pykube is stuck with old version
    """

    version = "apps/v1"
    endpoint = "statefulsets"
    kind = "StatefulSet"

    token = "statefulset"
    aliases = frozenset(["statefulset", "sts"])

    def set_replicas(self, count):
        self.obj.setdefault("spec", {})["replicas"] = count

    def get_replicas(self) -> Optional[int]:
        replicas = self.obj.get("spec", {}).get("replicas")
        if replicas is None:
            return None
        return int(replicas)
