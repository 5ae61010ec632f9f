import logging
from typing import List
from typing import Sequence

from kube_workload import snapshot
from kube_workload.errors import UsageError
from kube_workload.selector import select_workloads
from kube_workload.workload import Workload
from kube_workload.workload import WorkloadConfig

logger = logging.getLogger(__name__)


def check_actions(stop: bool, start: bool):
    if stop and start:
        raise UsageError("Only one of --stop/--start is possible at a time")


def scale_workload(config: WorkloadConfig, workload: Workload, replicas: int):
    """Read the live object, change only its replica count and write it back."""
    kind = workload.resource_class
    resource = (
        kind.objects(config.api)
        .filter(namespace=config.namespace)
        .get_by_name(workload.name)
    )
    current = resource.get_replicas()
    resource.set_replicas(replicas)
    if config.dry_run:
        logger.info(
            f"**DRY-RUN**: would scale {resource.kind} {config.namespace}/{workload.name} from {current} to {replicas} replicas"
        )
        return
    logger.info(
        f"Scaling {resource.kind} {config.namespace}/{workload.name} from {current} to {replicas} replicas"
    )
    resource.update()


def print_workloads(workloads: Sequence[Workload]):
    print("No workload action specified. Listing current state")
    for workload in workloads:
        print(f"Name: {workload.name} Scale: {workload.scale} Kind: {workload.kind}")


def stop_workloads(config: WorkloadConfig, workloads: Sequence[Workload]):
    if not workloads:
        logger.info(f"No workloads to stop in namespace {config.namespace}")
        return
    # the snapshot must be stored before anything is scaled down
    snapshot.save_workloads(
        config.api, config.namespace, workloads, dry_run=config.dry_run
    )
    for workload in workloads:
        scale_workload(config, workload, 0)


def start_workloads(config: WorkloadConfig, workloads: Sequence[Workload]):
    if not workloads:
        logger.info(f"No workloads to start in namespace {config.namespace}")
        return
    saved = snapshot.get_snapshot(config.api, config.namespace, dry_run=config.dry_run)
    # resolve every saved scale first so a missing entry aborts before any write
    targets = [
        (workload, snapshot.saved_scale(saved, workload, config.namespace))
        for workload in workloads
    ]
    for workload, replicas in targets:
        scale_workload(config, workload, replicas)


def run(config: WorkloadConfig, kind, names: Sequence[str]) -> List[Workload]:
    """Select the targeted workloads, then list, stop or start them."""
    workloads = select_workloads(config, kind, names)
    if config.stop:
        stop_workloads(config, workloads)
    elif config.start:
        start_workloads(config, workloads)
    else:
        print_workloads(workloads)
    return workloads
