import os

import argparse

DESCRIPTION = """Stop and start workloads. Kubernetes has no notion of a stopped workload:
stopping saves the current scale of each workload in a ConfigMap before scaling it to 0,
starting restores the saved scale."""


def get_parser():
    parser = argparse.ArgumentParser(prog="kubectl-workload", description=DESCRIPTION)
    parser.add_argument(
        "args",
        nargs="*",
        metavar="KIND [NAME ...]",
        help="Workload kind (deployment/deploy or statefulset/sts) followed by names",
    )
    parser.add_argument(
        "--all-kinds",
        "-a",
        help="Operate on all deployments and statefulsets in the namespace",
        action="store_true",
    )
    parser.add_argument(
        "--namespace",
        "-n",
        help="Namespace (default: default)",
        default=os.getenv("WORKLOAD_NAMESPACE", "default"),
    )
    parser.add_argument(
        "--stop", help="Save the current scale and scale down to 0", action="store_true"
    )
    parser.add_argument(
        "--start", help="Restore the saved scale", action="store_true"
    )
    parser.add_argument(
        "--dry-run",
        help="Dry run mode: do not change anything, just print what would be done",
        action="store_true",
    )
    parser.add_argument(
        "--debug", "-d", help="Debug mode: print more information", action="store_true"
    )
    parser.add_argument("--kubeconfig", help="Path to the kubeconfig file to use")
    parser.add_argument("--context", help="Name of the kubeconfig context to use")
    return parser
