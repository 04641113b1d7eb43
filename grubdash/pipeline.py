"""
Validation pipeline: an ordered list of validators run against a request context before a
single terminal operation. The first validator that returns an error stops the run.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence, TypeVar

from grubdash.errors import GrubDashError
from grubdash.metrics import requests_rejected_total
from grubdash.store import RecordStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class PipelineContext:
    store: RecordStore
    data: dict[str, Any] = field(default_factory=dict)
    route_id: str | None = None
    record: Any = None  # set by the existence check


Validator = Callable[[PipelineContext], GrubDashError | None]
Terminal = Callable[[PipelineContext], T]


def run_pipeline(validators: Sequence[Validator], ctx: PipelineContext, terminal: Terminal) -> T:
    """Run validators in order; raise the first error, else return terminal(ctx)."""
    for validator in validators:
        error = validator(ctx)
        if error is not None:
            requests_rejected_total.labels(
                resource=ctx.store.resource,
                reason=type(error).__name__,
            ).inc()
            logger.info(
                "Rejected %s request at %s: %s",
                ctx.store.resource,
                getattr(validator, "__name__", repr(validator)),
                error.message,
            )
            raise error
    return terminal(ctx)


def is_present(value) -> bool:
    return value is not None and value != ""


def is_non_empty_string(value) -> bool:
    return isinstance(value, str) and value != ""


def is_positive_integer(value) -> bool:
    """JSON integers (or integral floats like 10.0) above zero. Booleans don't count."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value > 0
    if isinstance(value, float):
        return value.is_integer() and value > 0
    return False
