import pytest

from solrsite.adapters.retry_tenacity import TenacityRetryAdapter


class Transient(Exception):
    pass


def test_retries_until_success():
    attempts = []

    def flaky(value):
        attempts.append(value)
        if len(attempts) < 3:
            raise Transient()
        return value * 2

    adapter = TenacityRetryAdapter(attempts=3, wait_initial=0, wait_max=0, exception_types=(Transient,))

    assert adapter.execute(flaky, 21) == 42
    assert len(attempts) == 3


def test_reraises_after_exhausting_attempts():
    adapter = TenacityRetryAdapter(attempts=2, wait_initial=0, wait_max=0, exception_types=(Transient,))
    calls = []

    def always_fails():
        calls.append(1)
        raise Transient()

    with pytest.raises(Transient):
        adapter.execute(always_fails)
    assert len(calls) == 2


def test_other_exceptions_are_not_retried():
    adapter = TenacityRetryAdapter(attempts=5, wait_initial=0, wait_max=0, exception_types=(Transient,))
    calls = []

    def broken():
        calls.append(1)
        raise KeyError("x")

    with pytest.raises(KeyError):
        adapter.execute(broken)
    assert len(calls) == 1


def test_call_time_overrides():
    adapter = TenacityRetryAdapter(attempts=1, wait_initial=0, wait_max=0, exception_types=(Transient,))
    calls = []

    def flaky():
        calls.append(1)
        if len(calls) < 2:
            raise Transient()
        return "ok"

    assert adapter.execute(flaky, attempts=2) == "ok"
