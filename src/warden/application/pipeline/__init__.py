"""Application pipeline – sequencing, concurrent loading and pipeline steps."""
from warden.application.pipeline.concurrent import ConcurrentLoader, already_bound
from warden.application.pipeline.middleware import Endpoint, Middleware, Next
from warden.application.pipeline.pipeline import Pipeline
from warden.application.pipeline.sequencer import Completed, Halted, RunResult, Sequencer
from warden.application.pipeline.specs import as_spec_list
from warden.application.pipeline.steps import Enforce, EnforceAction, Load, Step

__all__ = [
    "Completed",
    "ConcurrentLoader",
    "Endpoint",
    "Enforce",
    "EnforceAction",
    "Halted",
    "Load",
    "Middleware",
    "Next",
    "Pipeline",
    "RunResult",
    "Sequencer",
    "Step",
    "already_bound",
    "as_spec_list",
]
