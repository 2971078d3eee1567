"""Error taxonomy for triage and solution requests.

Messages carried by these exceptions are the generic, caller-facing ones;
specifics (which issue failed, the underlying exception) are logged instead.
"""

from __future__ import annotations

from .config import BATCH_FAILURE_MESSAGE, INVALID_REQUEST_MESSAGE, SYNTHESIS_FAILURE_MESSAGE


class TriageError(RuntimeError):
    status_code = 500
    default_message = "Triage failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class InputMalformedError(TriageError):
    """Request is missing required fields or has the wrong shape."""

    status_code = 400
    default_message = INVALID_REQUEST_MESSAGE


class BatchFailureError(TriageError):
    """At least one issue in a batch could not be triaged; no partial results."""

    default_message = BATCH_FAILURE_MESSAGE


class SynthesisFailureError(TriageError):
    default_message = SYNTHESIS_FAILURE_MESSAGE
