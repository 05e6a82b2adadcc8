"""
End-to-end acceptance tests for deferred-error chaining.

Drives whole chains through the public surface only, the way calling code
would: seed a value, thread it through several actions, check the outcome
once at flush(). Each test follows Given/When/Then structure in its docstring.
"""

from __future__ import annotations

import pytest

from chaining import (
    ActionArg,
    ChainAssertions,
    ChainState,
    InjectionBehavior,
    LoggingDispatcher,
    capture_void,
    new_context,
)

pytestmark = pytest.mark.acceptance


# ── Actions ──────────────────────────────────────────────────────────────────


def add_one(value):
    return value + 1, None


def multiply_by_six(value):
    return value * 6, None


def convert_to_string(value):
    return str(value), None


class PrinterError(Exception):
    """Raised by the fake printer when it is offline."""


class FakePrinter:
    """Collects printed values; raises PrinterError while offline."""

    def __init__(self, online: bool = True) -> None:
        self.online = online
        self.printed: list[str] = []

    def print(self, value: str) -> None:
        if not self.online:
            raise PrinterError("printer offline")
        self.printed.append(value)


# ── Scenarios ────────────────────────────────────────────────────────────────


class TestChainItAllTogether:
    def test_add_one_to_seed(self) -> None:
        """
        GIVEN a fresh context
        WHEN add_one runs with the supplied value 1
        THEN flush returns (2, None).
        """
        ctx = new_context()
        ctx.apply_unary_value(add_one, ActionArg(1, InjectionBehavior.INJECT_SUPPLIED_VALUE))

        assert ctx.flush() == (2, None)

    def test_add_one_then_multiply_by_six(self) -> None:
        """
        GIVEN a fresh context
        WHEN add_one(1) is followed by multiply_by_six on the previous result
        THEN flush returns (12, None).
        """
        ctx = new_context()
        ctx.apply_unary_value(add_one, ActionArg.supplied(1))
        ctx.apply_unary_value(multiply_by_six, ActionArg.previous())

        assert ctx.flush() == (12, None)

    def test_full_chain_to_printer(self) -> None:
        """
        GIVEN a working printer
        WHEN the seed is incremented, multiplied, stringified and printed
        THEN "12" is printed and the chain ends clear with no result.
        """
        printer = FakePrinter()
        ctx = new_context()

        ctx.apply_unary_value(add_one, ActionArg.supplied(1))
        ctx.apply_unary_value(multiply_by_six, ActionArg())
        ctx.apply_unary_value(convert_to_string, ActionArg())
        ctx.apply_unary_void(capture_void(printer.print), ActionArg())

        assert printer.printed == ["12"]
        assert ChainAssertions.assert_clear(ctx.flush()) is None

    def test_offline_printer_surfaces_at_flush(self) -> None:
        printer = FakePrinter(online=False)
        ctx = new_context()

        ctx.apply_unary_value(add_one, ActionArg.supplied(1))
        ctx.apply_unary_void(capture_void(printer.print, PrinterError))
        ctx.apply_unary_value(multiply_by_six)

        ChainAssertions.assert_faulted(ctx.flush(), PrinterError)


class TestFaultLatching:
    def test_failing_step_skips_the_rest(self) -> None:
        """
        GIVEN a nullary void action that always fails with E
        WHEN multiply_by_six is applied afterwards
        THEN multiply_by_six never runs and flush returns (None, E).
        """
        failure = RuntimeError("E")
        calls = 0

        def counted_multiply(value):
            nonlocal calls
            calls += 1
            return value * 6, None

        ctx = new_context()
        ctx.apply_nullary_void(lambda: failure)
        ctx.apply_unary_value(counted_multiply, ActionArg.previous())

        assert calls == 0
        assert ctx.flush() == (None, failure)

    @pytest.mark.parametrize("failing_step", [1, 2, 3, 4, 5])
    def test_first_error_wins_and_later_steps_never_run(self, failing_step: int) -> None:
        """
        GIVEN a five-step chain where step k fails
        WHEN the chain is driven to the end
        THEN only steps 1..k ran and flush returns step k's error.
        """
        ran: list[int] = []
        errors = {n: ValueError(f"step {n}") for n in range(1, 6)}

        def step(n):
            def action(value):
                ran.append(n)
                return (value or 0) + n, errors[n] if n >= failing_step else None
            return action

        ctx = new_context()
        for n in range(1, 6):
            ctx.apply_unary_value(step(n))

        _, err = ctx.flush()
        assert ran == list(range(1, failing_step + 1))
        assert err is errors[failing_step]

    def test_all_steps_succeed(self) -> None:
        ctx = new_context()
        for _ in range(5):
            ctx.apply_unary_value(lambda v: ((v or 0) + 1, None))

        ChainAssertions.assert_result(ctx.flush(), 5)


class TestBooleanChains:
    def test_bool_after_flush(self) -> None:
        """
        GIVEN a context already flushed once
        WHEN a bool action returning (True, None) is applied with USE_PREVIOUS
        THEN the adapter returns True and flush returns (True, None).
        """
        ctx = new_context()
        ctx.flush()
        assert ctx.state is ChainState.CLEAR

        assert ctx.apply_unary_bool(lambda v: (True, None), ActionArg.previous()) is True
        assert ctx.flush() == (True, None)

    def test_bool_on_faulted_context_never_runs(self) -> None:
        """
        GIVEN a context faulted by one failing action
        WHEN a bool action is applied
        THEN the adapter returns False and the action body is never entered.
        """
        counter = 0

        def check():
            nonlocal counter
            counter += 1
            return True, None

        ctx = new_context()
        ctx.apply_nullary_void(lambda: RuntimeError("down"))

        assert ctx.apply_nullary_bool(check) is False
        assert counter == 0

    def test_inline_in_condition(self) -> None:
        ctx = new_context()
        ctx.apply_unary_value(add_one, ActionArg.supplied(4))

        if ctx.apply_unary_bool(lambda v: (v % 5 == 0, None), ActionArg.previous()):
            ctx.apply_nullary_value(lambda: ("divisible", None))

        ChainAssertions.assert_result(ctx.flush(), "divisible")


class TestTracedChain:
    def test_tracing_does_not_change_outcome(self) -> None:
        traced = new_context(LoggingDispatcher(operation="acceptance"))
        plain = new_context()

        for ctx in (traced, plain):
            ctx.apply_unary_value(add_one, ActionArg.supplied(1))
            ctx.apply_nullary_void(lambda: KeyError("gone"))
            ctx.apply_unary_value(multiply_by_six)

        traced_result, traced_err = traced.flush()
        plain_result, plain_err = plain.flush()
        assert traced_result == plain_result is None
        assert type(traced_err) is type(plain_err) is KeyError
