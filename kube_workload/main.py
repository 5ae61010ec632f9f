#!/usr/bin/env python3
import logging
import sys

from kube_workload import __version__
from kube_workload import actions
from kube_workload import cmd
from kube_workload import helper
from kube_workload.errors import WorkloadError
from kube_workload.selector import parse_targets
from kube_workload.workload import WorkloadConfig

logger = logging.getLogger("workload")


def main(args=None):
    parser = cmd.get_parser()
    try:
        args = parser.parse_args(args)
    except SystemExit as e:
        # argparse exits with 2 on usage errors, every failure of this tool exits with 1
        if e.code:
            sys.exit(1)
        raise

    logging.basicConfig(
        format="%(asctime)s %(levelname)s: %(message)s",
        level=logging.DEBUG if args.debug else logging.INFO,
    )

    config_str = ", ".join(f"{k}={v}" for k, v in sorted(vars(args).items()))
    logger.debug(f"kubectl-workload v{__version__} started with {config_str}")

    if args.dry_run:
        logger.info("**DRY-RUN**: no workload or snapshot will be changed!")

    try:
        actions.check_actions(args.stop, args.start)
        kind, names = parse_targets(args.all_kinds, args.args)
        config = WorkloadConfig(
            api=helper.get_kube_api(args.kubeconfig, args.context),
            namespace=args.namespace,
            all_kinds=args.all_kinds,
            stop=args.stop,
            start=args.start,
            dry_run=args.dry_run,
        )
        actions.run(config, kind, names)
    except WorkloadError as e:
        logger.error(str(e))
        sys.exit(1)
    except Exception as e:
        logger.exception(f"Failed to process workloads: {e}")
        sys.exit(1)
