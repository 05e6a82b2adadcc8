"""
Injection behavior — how a chain picks the value fed into the next action.

Pure data. The dispatcher is the only place these tags are resolved.
"""

from __future__ import annotations

from enum import IntEnum


class InjectionBehavior(IntEnum):
    """
    Selects the value injected into an action.

    NOT_SPECIFIED is the zero value, so a default-constructed ActionArg
    threads the previous result just like USE_PREVIOUS.

    >>> InjectionBehavior.INJECT_SUPPLIED_VALUE is InjectionBehavior.OVERRIDE_PREVIOUS
    True
    """

    NOT_SPECIFIED = 0
    """No behavior declared. Resolved exactly as USE_PREVIOUS."""

    USE_PREVIOUS = 1
    """Inject the previous action's result (None on the first call of a chain).
    Any value supplied in the ActionArg is ignored."""

    OVERRIDE_PREVIOUS = 2
    """Inject the value supplied in the ActionArg, ignoring the previous result."""

    INJECT_SUPPLIED_VALUE = 2
    """Alias of OVERRIDE_PREVIOUS, reads better at call sites that supply a seed value."""

    @property
    def injects_supplied_value(self) -> bool:
        """True when the ActionArg's own value is injected instead of the previous result."""
        return self is InjectionBehavior.OVERRIDE_PREVIOUS
