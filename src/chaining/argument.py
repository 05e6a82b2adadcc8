"""
ActionArg — the value/behavior pair supplied at each call site.

Immutable and built fresh per call. It has no identity beyond the call
that consumes it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from chaining.behavior import InjectionBehavior


@dataclass(frozen=True, slots=True)
class ActionArg:
    """
    Argument for a single Apply call.

    >>> ActionArg.supplied(1)
    ActionArg(value=1, behavior=<InjectionBehavior.OVERRIDE_PREVIOUS: 2>)
    >>> ActionArg().behavior
    <InjectionBehavior.NOT_SPECIFIED: 0>
    """

    value: Any = None
    behavior: InjectionBehavior = InjectionBehavior.NOT_SPECIFIED

    @staticmethod
    def supplied(value: Any) -> ActionArg:
        """Inject `value` into the action, ignoring whatever the chain holds."""
        return ActionArg(value=value, behavior=InjectionBehavior.OVERRIDE_PREVIOUS)

    @staticmethod
    def previous() -> ActionArg:
        """Inject the previous action's result."""
        return ActionArg(behavior=InjectionBehavior.USE_PREVIOUS)

    @staticmethod
    def for_behavior(behavior: InjectionBehavior) -> ActionArg:
        """Wrap a bare behavior, as the nullary adapters do."""
        return ActionArg(behavior=behavior)
