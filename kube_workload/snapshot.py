import logging
from typing import Dict
from typing import Iterable

from pykube import ConfigMap

from kube_workload.errors import InvalidSnapshotError
from kube_workload.errors import SnapshotNotFoundError
from kube_workload.workload import Workload

SNAPSHOT_CONFIGMAP_NAME = "snap-backup"

logger = logging.getLogger(__name__)


def _get_or_create_configmap(api, namespace: str, dry_run: bool = False):
    configmap = (
        ConfigMap.objects(api)
        .filter(namespace=namespace)
        .get_or_none(name=SNAPSHOT_CONFIGMAP_NAME)
    )
    if configmap is not None:
        return configmap

    configmap = ConfigMap(
        api,
        {
            "metadata": {"name": SNAPSHOT_CONFIGMAP_NAME, "namespace": namespace},
            "data": {},
        },
    )
    if dry_run:
        logger.info(
            f"**DRY-RUN**: would create ConfigMap {namespace}/{SNAPSHOT_CONFIGMAP_NAME}"
        )
    else:
        logger.info(f"Creating ConfigMap {namespace}/{SNAPSHOT_CONFIGMAP_NAME}")
        configmap.create()
    return configmap


def get_snapshot(api, namespace: str, dry_run: bool = False) -> Dict[str, str]:
    """Return the saved workload states of a namespace, creating an empty record on first access."""
    configmap = _get_or_create_configmap(api, namespace, dry_run)
    return dict(configmap.obj.get("data") or {})


def merge_snapshot(
    api, namespace: str, updates: Dict[str, str], dry_run: bool = False
) -> Dict[str, str]:
    """
    Overlay updates on the namespace's snapshot record and write it back in a single update.

    Keys not mentioned in updates are preserved. Two concurrent invocations are not
    serialized: whichever update lands last wins for the whole record.
    """
    configmap = _get_or_create_configmap(api, namespace, dry_run)
    data = dict(configmap.obj.get("data") or {})
    data.update(updates)
    configmap.obj["data"] = data
    if dry_run:
        logger.info(
            f"**DRY-RUN**: would update ConfigMap {namespace}/{SNAPSHOT_CONFIGMAP_NAME} with {', '.join(sorted(updates))}"
        )
    else:
        configmap.update()
    return data


def save_workloads(api, namespace: str, workloads: Iterable[Workload], dry_run=False):
    updates = {workload.key: workload.to_json() for workload in workloads}
    for key, value in sorted(updates.items()):
        logger.info(f"Saving state of {namespace}/{key}: {value}")
    return merge_snapshot(api, namespace, updates, dry_run)


def saved_scale(snapshot: Dict[str, str], workload: Workload, namespace: str) -> int:
    data = snapshot.get(workload.key)
    if data is None:
        raise SnapshotNotFoundError(workload.key, namespace)
    try:
        return Workload.from_json(data).scale
    except (ValueError, KeyError, TypeError) as e:
        raise InvalidSnapshotError(workload.key, e)
