class WorkloadError(Exception):
    """Base class for failures reported to the operator as a single error line."""


class UsageError(WorkloadError):
    pass


class SelectionError(WorkloadError):
    """One or more explicitly named workloads could not be fetched."""

    def __init__(self, failures):
        self.failures = list(failures)
        details = "; ".join(f"{name}: {error}" for name, error in self.failures)
        super().__init__(f"Error processing the request: {details}")


class SnapshotNotFoundError(WorkloadError):
    def __init__(self, key: str, namespace: str):
        self.key = key
        self.namespace = namespace
        super().__init__(
            f"No saved scale for {key} in namespace {namespace}, it was never stopped with this tool"
        )


class InvalidSnapshotError(WorkloadError):
    def __init__(self, key: str, reason):
        self.key = key
        super().__init__(f"Could not read saved state for {key}: {reason}")
