"""Tests for with_retry."""

import pytest

from erplookup.util.retry import with_retry


class TestWithRetry:
    def test_returns_first_success(self) -> None:
        assert with_retry(lambda: 42) == 42

    def test_retries_listed_exceptions(self) -> None:
        attempts = []

        def flaky() -> str:
            attempts.append(1)
            if len(attempts) < 3:
                raise ConnectionError("down")
            return "ok"

        assert with_retry(flaky, retries=2, exceptions=(ConnectionError,), backoff=0) == "ok"
        assert len(attempts) == 3

    def test_raises_last_error(self) -> None:
        def always_fails() -> None:
            raise ConnectionError("still down")

        with pytest.raises(ConnectionError, match="still down"):
            with_retry(always_fails, retries=1, exceptions=(ConnectionError,), backoff=0)

    def test_other_exceptions_propagate_immediately(self) -> None:
        attempts = []

        def broken() -> None:
            attempts.append(1)
            raise KeyError("x")

        with pytest.raises(KeyError):
            with_retry(broken, retries=3, exceptions=(ConnectionError,), backoff=0)
        assert len(attempts) == 1
