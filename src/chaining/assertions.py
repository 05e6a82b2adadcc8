"""
Test assertions for chain snapshots and contexts.

Expressive asserts with clear failure messages, for tests of code that
drives a Context.

Usage in tests:
    from chaining import ChainAssertions

    def test_import():
        snapshot = run_import(ctx)
        rows = ChainAssertions.assert_clear(snapshot)
        assert rows == 3

    def test_import_rejects_bad_header():
        error = ChainAssertions.assert_faulted(run_import(ctx), HeaderError)
"""

from __future__ import annotations

from typing import Any

from chaining.context import Context, Snapshot


class ChainAssertions:
    """Expressive test assertions for flushed chains."""

    @staticmethod
    def assert_clear(snapshot: Snapshot, message: str = "") -> Any:
        """
        Assert the chain finished without an error and return its result.

            result = ChainAssertions.assert_clear(ctx.flush())
        """
        context = f" — {message}" if message else ""
        assert snapshot.error is None, (
            f"Expected a clear chain but it faulted with {snapshot.error!r}{context}"
        )
        return snapshot.result

    @staticmethod
    def assert_faulted(
        snapshot: Snapshot,
        expected: type[BaseException] | object | None = None,
        message: str = "",
    ) -> Any:
        """
        Assert the chain faulted and return its error.

        `expected` may be an exception type (checked with isinstance) or the
        exact error object (checked by identity, then equality).

            error = ChainAssertions.assert_faulted(ctx.flush(), ValueError)
        """
        context = f" — {message}" if message else ""
        assert snapshot.error is not None, (
            f"Expected a faulted chain but it finished clear with {snapshot.result!r}{context}"
        )
        error = snapshot.error
        if isinstance(expected, type):
            assert isinstance(error, expected), (
                f"Expected error of type {expected.__name__} "
                f"but got {type(error).__name__}: {error!r}{context}"
            )
        elif expected is not None:
            assert error is expected or error == expected, (
                f"Expected error {expected!r} but got {error!r}{context}"
            )
        return error

    @staticmethod
    def assert_result(snapshot: Snapshot, expected_value: Any) -> None:
        """Assert the chain finished clear with the specific result."""
        value = ChainAssertions.assert_clear(snapshot)
        assert value == expected_value, (
            f"Expected chain result {expected_value!r} but got {value!r}"
        )

    @staticmethod
    def assert_fresh(ctx: Context) -> None:
        """Assert the context holds nothing, as after construction or flush()."""
        assert ctx.last_result is None and ctx.last_error is None, (
            f"Expected a fresh context but got {ctx!r}"
        )
