"""
Context — the mutable holder threading results through a chain of actions.

Each Apply method reshapes the caller's action into the canonical
(value) -> (result, error) form and hands it to the bound dispatcher.
The first error latches: every later Apply call is skipped until flush()
hands back the (result, error) snapshot and resets the context.

    ctx = new_context()
    ctx.apply_unary_value(add_one, ActionArg.supplied(1))
    ctx.apply_unary_value(multiply_by_six, ActionArg.previous())
    result, err = ctx.flush()   # (12, None)

State machine:

    CLEAR ──action succeeds──→ CLEAR
    CLEAR ──action fails─────→ FAULTED
    FAULTED ──any Apply──────→ FAULTED   (action not invoked)
    any ──flush()────────────→ CLEAR

A Context is one sequential chain for one thread of control. It is not
synchronised; concurrent chains need separate Context instances.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any, NamedTuple

from chaining.argument import ActionArg
from chaining.behavior import InjectionBehavior
from chaining.dispatch import Dispatcher, dispatch
from chaining.errors import ContractViolation


class ChainState(Enum):
    """Whether the context still runs actions."""

    CLEAR = "CLEAR"
    FAULTED = "FAULTED"


class Snapshot(NamedTuple):
    """What flush() hands back: the last result and the first error."""

    result: Any
    error: Any


class Context:
    """
    Holds the last result and last error of an in-progress chain.

    `last_result` and `last_error` are written only by the dispatcher.
    Both are None on a fresh or flushed context.
    """

    def __init__(self, dispatcher: Dispatcher = dispatch) -> None:
        self._dispatcher = dispatcher
        self.last_result: Any = None
        self.last_error: Any = None

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    @property
    def state(self) -> ChainState:
        return ChainState.FAULTED if self.last_error is not None else ChainState.CLEAR

    @property
    def faulted(self) -> bool:
        return self.last_error is not None

    def flush(self) -> Snapshot:
        """Return the context's (result, error) and reset it to its fresh state."""
        snapshot = Snapshot(self.last_result, self.last_error)
        self.last_result = None
        self.last_error = None
        return snapshot

    # ──────────────────────── Void actions ────────────────────────

    def apply_nullary_void(
        self,
        action: Callable[[], Any],
        behavior: InjectionBehavior = InjectionBehavior.NOT_SPECIFIED,
    ) -> None:
        """
        Run an action that takes nothing and returns only an error.

        The chain's result becomes None, which the next action receives
        unless its behavior overrides it.
        """
        self._dispatcher(self, lambda _: (None, action()), ActionArg.for_behavior(behavior))

    def apply_unary_void(self, action: Callable[[Any], Any], arg: ActionArg | None = None) -> None:
        """
        Run an action that takes the injected value and returns only an error.

        The chain's result becomes None afterwards.
        """
        self._dispatcher(self, lambda value: (None, action(value)), arg or ActionArg())

    # ──────────────────────── Value actions ────────────────────────

    def apply_nullary_value(
        self,
        action: Callable[[], tuple[Any, Any]],
        behavior: InjectionBehavior = InjectionBehavior.NOT_SPECIFIED,
    ) -> None:
        """Run an action that takes nothing and returns (result, error)."""
        self._dispatcher(self, lambda _: action(), ActionArg.for_behavior(behavior))

    def apply_unary_value(
        self,
        action: Callable[[Any], tuple[Any, Any]],
        arg: ActionArg | None = None,
    ) -> None:
        """Run an action that takes the injected value and returns (result, error)."""
        self._dispatcher(self, action, arg or ActionArg())

    # ──────────────────────── Bool actions ────────────────────────

    def apply_nullary_bool(
        self,
        action: Callable[[], tuple[bool, Any]],
        behavior: InjectionBehavior = InjectionBehavior.NOT_SPECIFIED,
    ) -> bool:
        """
        Run an action that takes nothing and returns (bool, error).

        Returns the bool as well as threading it, for use inline in conditions.
        """
        return self.apply_unary_bool(lambda _: action(), ActionArg.for_behavior(behavior))

    def apply_unary_bool(
        self,
        action: Callable[[Any], tuple[bool, Any]],
        arg: ActionArg | None = None,
    ) -> bool:
        """
        Run an action that takes the injected value and returns (bool, error).

        Returns False whenever the context is faulted after the call, including
        when the action was skipped. Otherwise returns the stored bool.

        Raises ContractViolation if the chain holds something other than a bool.
        """
        self._dispatcher(self, action, arg or ActionArg())
        if self.last_error is not None:
            return False
        if not isinstance(self.last_result, bool):
            raise ContractViolation(bool, self.last_result)
        return self.last_result

    def __repr__(self) -> str:
        return f"Context({self.state.value}, last_result={self.last_result!r}, last_error={self.last_error!r})"


def new_context(dispatcher: Dispatcher | None = None) -> Context:
    """Create an empty Context bound to `dispatcher` (the canonical one by default)."""
    return Context(dispatcher if dispatcher is not None else dispatch)
