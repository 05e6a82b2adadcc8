"""
Deferred-error chaining for Python.

Run a series of fallible actions through one Context without checking an
error after every step. The first error latches and every later action is
skipped; the caller inspects the outcome once, at flush().

    from chaining import ActionArg, new_context

    def add_one(value):
        return value + 1, None

    def multiply_by_six(value):
        return value * 6, None

    ctx = new_context()
    ctx.apply_unary_value(add_one, ActionArg.supplied(1))
    ctx.apply_unary_value(multiply_by_six, ActionArg.previous())
    result, err = ctx.flush()   # (12, None)
"""

from chaining.argument import ActionArg
from chaining.assertions import ChainAssertions
from chaining.behavior import InjectionBehavior
from chaining.capture import capture, capture_void
from chaining.config import ChainingSettings
from chaining.context import ChainState, Context, Snapshot, new_context
from chaining.dispatch import (
    Action,
    Dispatcher,
    LoggingDispatcher,
    dispatch,
    dispatcher_from_settings,
)
from chaining.errors import ContractViolation
from chaining.logs import configure_structlog

__all__ = [
    "Action",
    "ActionArg",
    "ChainAssertions",
    "ChainState",
    "ChainingSettings",
    "Context",
    "ContractViolation",
    "Dispatcher",
    "InjectionBehavior",
    "LoggingDispatcher",
    "Snapshot",
    "capture",
    "capture_void",
    "configure_structlog",
    "dispatch",
    "dispatcher_from_settings",
    "new_context",
]

__version__ = "0.1.0"
