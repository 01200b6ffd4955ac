from addthread.core import (
    AddParams,
    CompletionSignal,
    DemoConfig,
    SignalState,
    add,
    run,
    start_worker,
)
from addthread.exceptions import SignalAlreadyConsumedError, SignalAlreadySetError, SignalException

name = "addthread"

__version__ = "0.1.0"

__all__ = [
    # demo
    "run",
    "DemoConfig",
    # worker
    "AddParams",
    "add",
    "start_worker",
    # signal
    "CompletionSignal",
    "SignalState",
    # exceptions
    "SignalException",
    "SignalAlreadySetError",
    "SignalAlreadyConsumedError",
]
