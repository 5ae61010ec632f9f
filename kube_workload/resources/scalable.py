import abc
from typing import Optional


class Scalable(abc.ABC):
    """Replica count accessors shared by all workload kinds this plugin can pause."""

    # canonical lower-case kind used in snapshot keys
    token = None
    aliases = frozenset()

    @abc.abstractmethod
    def set_replicas(self, count: int):
        pass

    @abc.abstractmethod
    def get_replicas(self) -> Optional[int]:
        pass
