import logging
from typing import List
from typing import Sequence

import requests
from pykube.exceptions import PyKubeError

from kube_workload.errors import SelectionError
from kube_workload.errors import UsageError
from kube_workload.workload import resolve_kind
from kube_workload.workload import Workload
from kube_workload.workload import WORKLOAD_CLASSES
from kube_workload.workload import WorkloadConfig

logger = logging.getLogger(__name__)

SUPPORTED_KINDS_MESSAGE = "Supported kinds are deployment (deploy) and statefulset (sts)"


def parse_targets(all_kinds: bool, args: Sequence[str]):
    """
    Validate the positional arguments before anything talks to the cluster.

    Returns (kind class, names); kind class is None when all kinds are selected.
    """
    if all_kinds:
        if args:
            logger.warning(
                f"--all-kinds is set, ignoring arguments: {' '.join(args)}"
            )
        return None, []
    if not args:
        raise UsageError(
            "No argument provided and --all-kinds is not set. Nothing to do."
        )
    clazz = resolve_kind(args[0])
    if clazz is None:
        raise UsageError(f"Unknown kind '{args[0]}'. {SUPPORTED_KINDS_MESSAGE}")
    names = list(args[1:])
    if not names:
        raise UsageError(f"No {clazz.token} name specified. Nothing to do.")
    return clazz, names


def list_workloads(api, namespace: str, kind) -> List[Workload]:
    return [
        Workload.from_resource(resource)
        for resource in kind.objects(api).filter(namespace=namespace)
    ]


def all_workloads(config: WorkloadConfig) -> List[Workload]:
    workloads = []
    for clazz in WORKLOAD_CLASSES:
        found = list_workloads(config.api, config.namespace, clazz)
        logger.debug(
            f"Found {len(found)} {clazz.endpoint} in namespace {config.namespace}"
        )
        workloads.extend(found)
    return workloads


def get_workloads(config: WorkloadConfig, kind, names: Sequence[str]) -> List[Workload]:
    """Fetch every named workload, reporting all failures at once."""
    workloads = []
    failures = []
    query = kind.objects(config.api).filter(namespace=config.namespace)
    for name in names:
        try:
            resource = query.get_by_name(name)
        except (PyKubeError, requests.RequestException) as e:
            logger.debug(f"Could not fetch {kind.kind} {config.namespace}/{name}: {e}")
            failures.append((name, e))
        else:
            workloads.append(Workload.from_resource(resource))
    if failures:
        raise SelectionError(failures)
    return workloads


def select_workloads(config: WorkloadConfig, kind, names: Sequence[str]) -> List[Workload]:
    if config.all_kinds:
        return all_workloads(config)
    return get_workloads(config, kind, names)
