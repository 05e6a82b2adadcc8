"""
Programming-error class for the chaining library.

Action-reported errors are plain data and travel through the chain until
flush(). Nothing in this module is ever stored in a Context: these are
raised at the call site because they indicate misuse, not a failed action.
"""

from __future__ import annotations

from typing import Any


class ContractViolation(TypeError):
    """
    A bool adapter found a non-bool value in the chain.

    Raised instead of folding the mismatch into the chain's error, so the
    bug surfaces where the adapter was misused.
    """

    def __init__(self, expected: type, actual: Any) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Chain holds {type(actual).__name__} ({actual!r}), "
            f"expected {expected.__name__}"
        )
