"""Mapping of action failures to HTTP status codes."""

from loreexplorer.domain.result import Failure

FAILURE_STATUS = {
    "validation": 422,
    "already_saved": 409,
    "busy": 429,
    "generation": 502,
    "store_unavailable": 503,
}


def status_for(failure: Failure, operation: str = "generate") -> int:
    """HTTP status for a failure. Any save failure past validation is a 503."""
    if operation == "save" and failure.kind in ("generation", "store_unavailable"):
        return 503
    return FAILURE_STATUS.get(failure.kind, 500)
